"""Chunk partitioning: sort bounded buffers and spill them to a chunk store."""

from distinct_line_counter.partition.partition import (
    iter_stripped_lines,
    partition_file,
    partition_to_chunks,
    strip_line,
)
from distinct_line_counter.partition.types import DEFAULT_CHUNK_SIZE, PartitionStats

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "PartitionStats",
    "iter_stripped_lines",
    "partition_file",
    "partition_to_chunks",
    "strip_line",
]
