"""Batched inverted index from field values to the lines containing them."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from string_grouper.utils.text import trim

logger = logging.getLogger(__name__)

FieldKey = tuple[int, str]
"""(field position, trimmed field value). Position is part of the identity."""


@dataclass
class FieldIndex:
    """Inverted index plus the counters gathered while building it.

    Attributes:
        entries: FieldKey -> line indices, each list capped at the fan-out limit.
        lines: Number of lines indexed.
        batches: Number of batches processed.
        dropped_entries: Line indices not stored because their key was full.
        capped_keys: Keys that reached the fan-out limit.
    """

    entries: dict[FieldKey, list[int]] = field(default_factory=dict)
    lines: int = 0
    batches: int = 0
    dropped_entries: int = 0
    capped_keys: int = 0

    @property
    def keys(self) -> int:
        return len(self.entries)

    def release(self) -> None:
        """Drop the index entries, keeping the counters."""
        self.entries.clear()


def split_fields(line: str, delimiter: str = ";") -> list[str]:
    """Split a line into trimmed fields.

    Trailing empty fields are removed; empty fields elsewhere keep their
    position so later fields are numbered as they appear in the line.
    """
    parts = line.split(delimiter)
    while parts and not parts[-1]:
        parts.pop()
    return [trim(part) for part in parts]


def field_keys(line: str, delimiter: str = ";") -> list[FieldKey]:
    """Return the keys a line is indexed under, skipping empty fields."""
    return [
        (position, value)
        for position, value in enumerate(split_fields(line, delimiter))
        if value
    ]


def build_field_index(
    lines: Sequence[str],
    batch_size: int = 50_000,
    max_indices_per_key: int = 10_000,
    delimiter: str = ";",
) -> FieldIndex:
    """Map every (position, value) key to the indices of lines holding it.

    Lines are walked in contiguous batches of ``batch_size``. Batching only
    bounds the per-batch working set; the resulting index is the same for
    any batch size. Once a key holds ``max_indices_per_key`` indices,
    further lines are not recorded for it.
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {batch_size}")
    if max_indices_per_key < 1:
        raise ValueError(f"max_indices_per_key must be >= 1, got {max_indices_per_key}")

    index = FieldIndex()
    entries = index.entries
    total = len(lines)

    for batch_start in range(0, total, batch_size):
        batch_end = min(batch_start + batch_size, total)
        index.batches += 1
        logger.info(
            "Indexing batch %d: lines %d-%d", index.batches, batch_start, batch_end - 1
        )

        for i in range(batch_start, batch_end):
            for key in field_keys(lines[i], delimiter):
                indices = entries.get(key)
                if indices is None:
                    indices = entries[key] = []
                if len(indices) < max_indices_per_key:
                    indices.append(i)
                    if len(indices) == max_indices_per_key:
                        index.capped_keys += 1
                else:
                    index.dropped_entries += 1

    index.lines = total
    logger.info("Index built: %d unique keys", index.keys)
    if index.capped_keys:
        logger.warning(
            "%d keys reached the limit of %d lines, %d entries dropped",
            index.capped_keys,
            max_indices_per_key,
            index.dropped_entries,
        )
    return index
