"""Utility modules for string grouper."""

from string_grouper.utils.text import trim

__all__ = ["trim"]
