"""Configuration for a grouping run."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GrouperConfig:
    """Limits and formats for one grouping run.

    Defaults keep a run over the largest accepted input inside a 1GB-class
    memory budget.

    Attributes:
        delimiter: Field separator inside a line.
        batch_size: Number of lines indexed per batch.
        max_unique_lines: Unique lines kept after deduplication; the rest are dropped.
        max_indices_per_key: Max line indices stored per (position, value) key.
        invalid_report_limit: How many malformed lines are logged verbatim.
        progress_interval: Log progress every N input lines / merged keys.
        output_path: Where the report is written.
    """

    delimiter: str = ";"
    batch_size: int = 50_000
    max_unique_lines: int = 300_000
    max_indices_per_key: int = 10_000
    invalid_report_limit: int = 5
    progress_interval: int = 100_000
    output_path: str = "result.txt"

    def __post_init__(self) -> None:
        if not self.delimiter:
            raise ValueError("delimiter must be a non-empty string")
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {self.batch_size}")
        if self.max_unique_lines < 1:
            raise ValueError(f"max_unique_lines must be >= 1, got {self.max_unique_lines}")
        if self.max_indices_per_key < 2:
            raise ValueError(
                f"max_indices_per_key must be >= 2, got {self.max_indices_per_key}"
            )
        if self.invalid_report_limit < 0:
            raise ValueError(
                f"invalid_report_limit must be >= 0, got {self.invalid_report_limit}"
            )
        if self.progress_interval < 1:
            raise ValueError(f"progress_interval must be >= 1, got {self.progress_interval}")
        if not self.output_path:
            raise ValueError("output_path must be a non-empty string")
