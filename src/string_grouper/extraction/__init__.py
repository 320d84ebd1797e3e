"""Reading, validating and deduplicating input lines."""

from string_grouper.extraction.lines import (
    LoadResult,
    collect_unique_lines,
    is_valid_line,
    iter_gzip_lines,
    limit_unique_lines,
    load_lines,
)

__all__ = [
    "LoadResult",
    "collect_unique_lines",
    "is_valid_line",
    "iter_gzip_lines",
    "limit_unique_lines",
    "load_lines",
]
