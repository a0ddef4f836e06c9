"""Shared types for the k-way merge."""

from dataclasses import dataclass
from typing import TypeAlias

FrontierEntry: TypeAlias = tuple[bytes, int]


@dataclass(frozen=True, slots=True)
class MergeStats:
    """Result of merging a set of chunks."""

    lines_merged: int
    distinct_lines: int
    fan_in: int
