"""Command-line interface for string grouper."""
