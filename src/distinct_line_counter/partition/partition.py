"""Split an input stream into sorted chunks."""

import io
import logging
import sys
from collections.abc import Iterator
from typing import BinaryIO

from distinct_line_counter.chunks import ChunkHandle, ChunkStore
from distinct_line_counter.chunks.types import BUFFER_SIZE
from distinct_line_counter.errors import InputReadError
from distinct_line_counter.partition.types import WHITESPACE, PartitionStats

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


def strip_line(raw_line: bytes) -> bytes:
    """
    Remove surrounding whitespace, Unicode whitespace included.

    Lines are decoded as UTF-8 only when a non-ASCII byte sits at either end;
    invalid bytes survive the round trip unchanged via surrogateescape.
    """
    line = raw_line.strip()
    if line and (line[0] >= 0x80 or line[-1] >= 0x80):
        text = line.decode("utf-8", "surrogateescape").strip(WHITESPACE)
        line = text.encode("utf-8", "surrogateescape")
    return line


def iter_stripped_lines(stream: BinaryIO, source: str = "<stream>") -> Iterator[bytes]:
    """Yield each line of a binary stream with surrounding whitespace removed."""
    lines = iter(stream)
    while True:
        try:
            raw_line = next(lines)
        except StopIteration:
            return
        except OSError as exc:
            raise InputReadError(source, str(exc)) from exc
        yield strip_line(raw_line)


def _flush(buffer: list[bytes], store: ChunkStore, stats: PartitionStats) -> ChunkHandle:
    buffer.sort()
    chunk = store.create(buffer)
    stats.chunks_written += 1
    stats.lines_written += chunk.line_count
    logger.debug("Chunk %d: %d lines -> %s", chunk.index, chunk.line_count, chunk.path.name)
    return chunk


def partition_to_chunks(
    stream: BinaryIO,
    chunk_size: int,
    store: ChunkStore,
    skip_empty: bool = False,
    source: str = "<stream>",
) -> tuple[list[ChunkHandle], PartitionStats]:
    """
    Partition a line stream into sorted chunks of at most `chunk_size` lines.

    Each full buffer is sorted byte-lexicographically and spilled through
    `store`; a trailing partial buffer becomes the last chunk. Empty input
    produces no chunks.

    Args:
        stream: Binary stream of newline-delimited lines.
        chunk_size: Maximum number of lines per chunk.
        store: Destination for the sorted chunks.
        skip_empty: Drop lines that are empty after stripping.
        source: Name used in error messages.

    Returns:
        Tuple of (chunk handles in flush order, partition statistics).
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if isinstance(stream, io.TextIOBase):
        raise ValueError(f"input stream {source} must be opened in binary mode")

    stats = PartitionStats()
    chunks: list[ChunkHandle] = []
    buffer: list[bytes] = []

    for line in iter_stripped_lines(stream, source):
        stats.lines_read += 1
        if not line:
            stats.empty_lines += 1
            if skip_empty:
                continue

        buffer.append(line)
        if len(buffer) >= chunk_size:
            chunks.append(_flush(buffer, store, stats))
            buffer = []

    if buffer:
        chunks.append(_flush(buffer, store, stats))

    return chunks, stats


def partition_file(
    input_path: str,
    chunk_size: int,
    store: ChunkStore,
    skip_empty: bool = False,
) -> tuple[list[ChunkHandle], PartitionStats]:
    """Partition a file, or stdin when `input_path` is "-"."""
    if input_path == STDIN_PATH:
        return partition_to_chunks(sys.stdin.buffer, chunk_size, store, skip_empty, "<stdin>")

    try:
        handle = open(input_path, "rb", buffering=BUFFER_SIZE)  # noqa: SIM115
    except OSError as exc:
        raise InputReadError(input_path, str(exc)) from exc

    with handle:
        return partition_to_chunks(handle, chunk_size, store, skip_empty, input_path)
