"""Grouping engine: field index, union-find merge and group materialization."""

from string_grouper.engine.clustering import UnionFind
from string_grouper.engine.grouping import (
    GroupingResult,
    group_lines,
    materialize_groups,
    merge_index,
)
from string_grouper.engine.indexer import FieldIndex, FieldKey, build_field_index

__all__ = [
    "FieldIndex",
    "FieldKey",
    "GroupingResult",
    "UnionFind",
    "build_field_index",
    "group_lines",
    "materialize_groups",
    "merge_index",
]
