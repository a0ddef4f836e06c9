import io
import logging
import shutil
import tempfile
import time
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO, TypeAlias

from distinct_line_counter.chunks import ChunkHandle, ChunkStore
from distinct_line_counter.merge import merge_count_with_stats, resolve_strategy
from distinct_line_counter.partition import (
    DEFAULT_CHUNK_SIZE,
    PartitionStats,
    partition_file,
    partition_to_chunks,
)

logger = logging.getLogger(__name__)

TMP_PREFIX = "distinct_lines_"

PartitionFn: TypeAlias = Callable[[ChunkStore], tuple[list[ChunkHandle], PartitionStats]]


def _run(
    partition: PartitionFn,
    label: str,
    chunk_size: int,
    tmp_dir: str | None,
    strategy: str | None,
) -> int:
    """
    Count distinct lines in two passes.

    1. Partition the input into sorted chunks in a private temp directory
    2. K-way merge the chunks, counting value changes

    Chunks and the temp directory are removed on every exit path.
    """
    total_start = time.perf_counter()

    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    strategy_name = resolve_strategy(strategy)

    logger.info(
        "Starting: input=%s, chunk_size=%d, merge=%s",
        label,
        chunk_size,
        strategy_name,
    )

    work_dir = tempfile.mkdtemp(prefix=TMP_PREFIX, dir=tmp_dir)
    store = ChunkStore(Path(work_dir))

    try:
        # Pass 1: sort and spill chunks.
        t1_start = time.perf_counter()
        chunks, stats = partition(store)
        t1 = time.perf_counter() - t1_start

        if stats.empty_lines > 0:
            logger.info(
                "Pass 1: %d empty lines seen (read=%d, written=%d)",
                stats.empty_lines,
                stats.lines_read,
                stats.lines_written,
            )
        logger.info(
            "Pass 1 done: %d chunks, %d lines in %.2fs", len(chunks), stats.lines_written, t1
        )

        # Pass 2: merge and count.
        t2_start = time.perf_counter()
        merged = merge_count_with_stats(chunks, store, strategy_name)
        t2 = time.perf_counter() - t2_start
        logger.info(
            "Pass 2 done: merged %d lines from %d chunks in %.2fs",
            merged.lines_merged,
            merged.fan_in,
            t2,
        )

        total_passes = t1 + t2
        if total_passes > 0:
            logger.debug(
                "Timing breakdown: Pass1=%.2fs (%.0f%%), Pass2=%.2fs (%.0f%%)",
                t1,
                100 * t1 / total_passes,
                t2,
                100 * t2 / total_passes,
            )

        total_time = time.perf_counter() - total_start
        logger.info("Result: %d distinct lines (total %.2fs)", merged.distinct_lines, total_time)
        return merged.distinct_lines

    finally:
        store.dispose_all()
        shutil.rmtree(work_dir, ignore_errors=True)


def solve(
    input_path: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    tmp_dir: str | None = None,
    strategy: str | None = None,
    skip_empty: bool = False,
) -> int:
    """Count distinct lines in a file ("-" reads stdin)."""
    label = input_path if input_path == "-" else Path(input_path).name
    return _run(
        lambda store: partition_file(input_path, chunk_size, store, skip_empty),
        label,
        chunk_size,
        tmp_dir,
        strategy,
    )


def count_distinct_lines(
    stream: BinaryIO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    tmp_dir: str | None = None,
    strategy: str | None = None,
    skip_empty: bool = False,
) -> int:
    """
    Count distinct lines in an already open binary stream.

    Text-mode streams are rejected with ValueError; lines are compared as bytes.
    """
    if isinstance(stream, io.TextIOBase):
        raise ValueError("count_distinct_lines needs a binary stream, got a text stream")
    return _run(
        lambda store: partition_to_chunks(stream, chunk_size, store, skip_empty),
        "<stream>",
        chunk_size,
        tmp_dir,
        strategy,
    )


def main_solve(
    input_path: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    tmp_dir: str | None = None,
    strategy: str | None = None,
    skip_empty: bool = False,
) -> None:
    """Main entry point that prints result to stdout."""
    print(solve(input_path, chunk_size, tmp_dir, strategy, skip_empty))
