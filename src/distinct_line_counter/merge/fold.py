"""Distinct-value fold over a sorted line stream."""

from collections.abc import Iterable


class DistinctFold:
    """
    Running count of distinct values in a non-decreasing stream.

    A value is counted when it differs from the previously observed one.
    `last` is None until the first observation, so an empty line is counted
    like any other value.
    """

    __slots__ = ("last", "count", "observed")

    def __init__(self) -> None:
        self.last: bytes | None = None
        self.count = 0
        self.observed = 0

    def observe(self, line: bytes) -> None:
        self.observed += 1
        if self.observed == 1 or line != self.last:
            self.count += 1
            self.last = line


def count_distinct_sorted(lines: Iterable[bytes]) -> int:
    """Count distinct values in an already sorted iterable."""
    fold = DistinctFold()
    for line in lines:
        fold.observe(line)
    return fold.count
