"""Frontier implementations for selecting the global minimum across readers."""

import heapq

from distinct_line_counter.chunks import ChunkReader
from distinct_line_counter.merge.types import FrontierEntry


class HeapFrontier:
    """
    Min-heap of (line, reader_index) pairs.

    Tuples compare by line first, so the smallest line across all readers is
    always at the top. O(log k) per step.
    """

    def __init__(self, readers: list[ChunkReader]):
        self._readers = readers
        self._heap: list[FrontierEntry] = []
        for idx, reader in enumerate(readers):
            line = reader.next()
            if line is not None:
                self._heap.append((line, idx))
        heapq.heapify(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def pop_min(self) -> FrontierEntry | None:
        """Take the smallest current line and advance the reader that held it."""
        if not self._heap:
            return None

        line, idx = self._heap[0]
        next_line = self._readers[idx].next()
        if next_line is None:
            heapq.heappop(self._heap)
        else:
            heapq.heapreplace(self._heap, (next_line, idx))
        return line, idx


class ScanFrontier:
    """
    One slot per reader, scanned linearly for the minimum. O(k) per step.

    Ties go to the lowest reader index. Exhausted readers hold None.
    """

    def __init__(self, readers: list[ChunkReader]):
        self._readers = readers
        self._slots: list[bytes | None] = [reader.next() for reader in readers]

    def __len__(self) -> int:
        return sum(1 for line in self._slots if line is not None)

    def pop_min(self) -> FrontierEntry | None:
        min_line: bytes | None = None
        min_idx = -1
        for idx, line in enumerate(self._slots):
            if line is not None and (min_line is None or line < min_line):
                min_line = line
                min_idx = idx

        if min_line is None:
            return None

        self._slots[min_idx] = self._readers[min_idx].next()
        return min_line, min_idx
