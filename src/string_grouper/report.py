"""Plain-text report of the groups with more than one line."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from string_grouper.errors import ReportWriteError

logger = logging.getLogger(__name__)

HEADER = "Количество групп с более чем одним элементом: {count}"
TRUNCATION_NOTE = "Внимание: обработано {kept} из {total} уникальных строк (превышен лимит)"
GROUP_TITLE = "Группа {number}"


def select_report_groups(groups: Iterable[Sequence[str]]) -> list[Sequence[str]]:
    """Keep groups with more than one line, largest first.

    The sort is stable, so equally sized groups keep their relative order.
    """
    multi = [group for group in groups if len(group) > 1]
    multi.sort(key=len, reverse=True)
    return multi


def iter_report_lines(
    groups: Sequence[Sequence[str]],
    truncated_from: int | None = None,
    kept: int | None = None,
) -> Iterable[str]:
    """Yield report lines (without newlines) for already selected groups."""
    yield HEADER.format(count=len(groups))
    if truncated_from is not None:
        yield TRUNCATION_NOTE.format(kept=kept, total=truncated_from)
    yield ""
    for number, group in enumerate(groups, start=1):
        yield GROUP_TITLE.format(number=number)
        yield from group
        yield ""


def format_report(
    groups: Sequence[Sequence[str]],
    truncated_from: int | None = None,
    kept: int | None = None,
) -> str:
    return "".join(f"{line}\n" for line in iter_report_lines(groups, truncated_from, kept))


def write_report(
    groups: Sequence[Sequence[str]],
    path: str | Path = "result.txt",
    truncated_from: int | None = None,
    kept: int | None = None,
) -> Path:
    """Write the report, overwriting ``path``.

    Args:
        groups: Groups to write, already filtered and sorted.
        path: Output file.
        truncated_from: Unique line count before the cap, when the cap was applied.
        kept: Lines actually grouped, when the cap was applied.

    Raises:
        ReportWriteError: The file could not be written.
    """
    out = Path(path)
    try:
        with out.open("w", encoding="utf-8", newline="\n") as fh:
            for line in iter_report_lines(groups, truncated_from, kept):
                fh.write(line)
                fh.write("\n")
    except OSError as e:
        raise ReportWriteError(f"Cannot write report to {out}: {e}") from e

    logger.info("Report written to %s (%d groups)", out, len(groups))
    return out
