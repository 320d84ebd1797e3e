"""Group lines that share a field value into connected components."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from string_grouper.config import GrouperConfig
from string_grouper.engine.clustering import UnionFind
from string_grouper.engine.indexer import FieldIndex, build_field_index

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupingResult:
    """Output of a grouping run.

    Attributes:
        groups: Every component, singletons included, as lists of lines.
        total_lines: Number of lines grouped.
        index_keys: Distinct (position, value) keys seen.
        dropped_entries: Index entries lost to the per-key fan-out limit.
        merges: Unions that joined two distinct sets.
    """

    groups: list[list[str]] = field(default_factory=list)
    total_lines: int = 0
    index_keys: int = 0
    dropped_entries: int = 0
    merges: int = 0


def merge_index(
    index: FieldIndex,
    total: int,
    progress_interval: int = 100_000,
) -> tuple[UnionFind, int]:
    """Union every line with the first line of each key it was indexed under.

    Star unions per key give the same connectivity as chaining all pairs.

    Returns:
        The forest over ``[0, total)`` and the number of effective merges.
    """
    uf = UnionFind(total)
    merges = 0

    for processed, indices in enumerate(index.entries.values(), start=1):
        if len(indices) > 1:
            first = indices[0]
            for other in indices[1:]:
                if uf.union(first, other):
                    merges += 1
        if processed % progress_interval == 0:
            logger.info("Merged keys: %d", processed)

    return uf, merges


def materialize_groups(uf: UnionFind, lines: Sequence[str]) -> list[list[str]]:
    """Map each set of line indices back to its lines, in first-seen order of the roots."""
    return [[lines[i] for i in members] for members in uf.groups().values()]


def group_lines(
    lines: Sequence[str],
    config: GrouperConfig | None = None,
) -> GroupingResult:
    """Group unique lines sharing any (position, value) field, transitively.

    Args:
        lines: Validated, trimmed, pairwise distinct lines. Their order fixes
            the line indices and is not changed.
        config: Limits to apply; defaults to ``GrouperConfig()``.
    """
    if config is None:
        config = GrouperConfig()

    lines_list = tuple(lines)
    total = len(lines_list)
    logger.info("Grouping %d lines in batches of %d", total, config.batch_size)

    index = build_field_index(
        lines_list,
        batch_size=config.batch_size,
        max_indices_per_key=config.max_indices_per_key,
        delimiter=config.delimiter,
    )
    index_keys = index.keys
    dropped = index.dropped_entries

    logger.info("Merging groups")
    uf, merges = merge_index(index, total, progress_interval=config.progress_interval)
    index.release()
    del index

    logger.info("Building final groups")
    groups = materialize_groups(uf, lines_list)

    return GroupingResult(
        groups=groups,
        total_lines=total,
        index_keys=index_keys,
        dropped_entries=dropped,
        merges=merges,
    )
