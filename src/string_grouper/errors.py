"""Exceptions raised by string grouper."""

from __future__ import annotations


class GrouperError(Exception):
    """Base class for fatal errors that abort a grouping run."""


class InputReadError(GrouperError):
    """The input file could not be opened, decompressed or decoded."""


class ReportWriteError(GrouperError):
    """The grouped report could not be written."""
