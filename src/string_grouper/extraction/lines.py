"""Read, validate and deduplicate lines from a gzip-compressed text file."""

from __future__ import annotations

import gzip
import logging
import re
import zlib
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import islice
from pathlib import Path

from string_grouper.config import GrouperConfig
from string_grouper.errors import InputReadError
from string_grouper.utils.text import trim

logger = logging.getLogger(__name__)

# Three quoted numbers glued together, e.g. "1"2"3"
_INVALID_PATTERN = re.compile(r'"\d+"\d+"\d+"')


@dataclass(frozen=True)
class LoadResult:
    """Unique lines and the counters gathered while reading them.

    Attributes:
        lines: Unique valid lines in first-seen order, at most the configured cap.
        total_lines: Raw lines read, blank ones included.
        invalid_lines: Non-blank lines rejected by the validator.
        unique_lines: Distinct valid lines before the cap was applied.
    """

    lines: tuple[str, ...] = field(default_factory=tuple)
    total_lines: int = 0
    invalid_lines: int = 0
    unique_lines: int = 0

    @property
    def truncated(self) -> bool:
        return len(self.lines) < self.unique_lines


def is_valid_line(line: str) -> bool:
    """Return False for lines containing glued quoted numbers like ``"1"2"3"``."""
    return _INVALID_PATTERN.search(line) is None


def iter_gzip_lines(path: str | Path) -> Iterator[str]:
    """Yield the decoded lines of a gzip file without line terminators."""
    with gzip.open(path, "rt", encoding="utf-8", newline=None) as fh:
        for line in fh:
            yield line.rstrip("\r\n")


def limit_unique_lines(unique: Iterable[str], cap: int) -> tuple[str, ...]:
    """Keep the first ``cap`` lines in iteration order."""
    return tuple(islice(unique, cap))


def collect_unique_lines(
    raw_lines: Iterable[str],
    config: GrouperConfig | None = None,
) -> LoadResult:
    """Trim, validate and deduplicate lines, then apply the unique-line cap.

    Blank lines are skipped silently. Malformed lines are counted and the
    first ``config.invalid_report_limit`` of them are logged.
    """
    if config is None:
        config = GrouperConfig()

    # dict keeps first-seen order, which makes truncation deterministic
    unique: dict[str, None] = {}
    total = 0
    invalid = 0

    for raw in raw_lines:
        total += 1
        line = trim(raw)
        if line:
            if is_valid_line(line):
                unique[line] = None
            else:
                invalid += 1
                if invalid <= config.invalid_report_limit:
                    logger.warning("Invalid line %d: %s", invalid, line)

        if total % config.progress_interval == 0:
            logger.info("Lines read: %d", total)

    unique_count = len(unique)
    logger.info("Total lines: %d", total)
    logger.info("Invalid lines: %d", invalid)
    logger.info("Unique lines: %d", unique_count)

    if unique_count > config.max_unique_lines:
        logger.warning(
            "Limiting to %d of %d unique lines to stay within the memory budget",
            config.max_unique_lines,
            unique_count,
        )
    kept = limit_unique_lines(unique, config.max_unique_lines)
    unique.clear()

    return LoadResult(
        lines=kept,
        total_lines=total,
        invalid_lines=invalid,
        unique_lines=unique_count,
    )


def load_lines(path: str | Path, config: GrouperConfig | None = None) -> LoadResult:
    """Read a gzip file and return its unique valid lines.

    Raises:
        InputReadError: The file is missing, unreadable, not gzip or not UTF-8.
    """
    try:
        return collect_unique_lines(iter_gzip_lines(path), config)
    except FileNotFoundError as e:
        raise InputReadError(f"File not found: {path}") from e
    except gzip.BadGzipFile as e:
        raise InputReadError(f"Not a gzip file: {path} ({e})") from e
    except EOFError as e:
        raise InputReadError(f"Truncated gzip file: {path}") from e
    except zlib.error as e:
        raise InputReadError(f"Corrupt gzip data in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise InputReadError(f"File is not valid UTF-8: {path} ({e.reason})") from e
    except OSError as e:
        raise InputReadError(f"Cannot read {path}: {e}") from e
