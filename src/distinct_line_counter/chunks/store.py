"""Chunk store: persists sorted buffers and reads them back sequentially."""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import BinaryIO

from distinct_line_counter.chunks.types import BUFFER_SIZE, CHUNK_PREFIX, ChunkHandle
from distinct_line_counter.errors import ChunkReadError, ChunkWriteError

logger = logging.getLogger(__name__)


class ChunkReader:
    """Sequential reader over one chunk; `next()` returns None at end of stream."""

    def __init__(self, handle: ChunkHandle, stream: BinaryIO):
        self.handle = handle
        self._stream: BinaryIO | None = stream

    def next(self) -> bytes | None:
        if self._stream is None:
            return None
        try:
            raw = self._stream.readline()
        except OSError as exc:
            raise ChunkReadError(self.handle.path, str(exc)) from exc
        if not raw:
            return None
        # Stored lines are already stripped, so only the terminator goes.
        return raw[:-1] if raw.endswith(b"\n") else raw

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.next()) is not None:
            yield line

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def __enter__(self) -> "ChunkReader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class ChunkStore:
    """
    Directory of write-once chunk files.

    Chunks are numbered in creation order and named `<prefix>_<index>.txt`,
    so names never collide within one store.
    """

    def __init__(self, tmp_dir: Path, prefix: str = CHUNK_PREFIX):
        self._tmp_dir = Path(tmp_dir)
        self._prefix = prefix
        self._handles: list[ChunkHandle] = []

    @property
    def handles(self) -> list[ChunkHandle]:
        return list(self._handles)

    def _get_path(self, index: int) -> Path:
        return self._tmp_dir / f"{self._prefix}_{index:06d}.txt"

    def create(self, sorted_lines: Iterable[bytes]) -> ChunkHandle:
        """Persist already sorted lines as the next chunk and return its handle."""
        index = len(self._handles)
        path = self._get_path(index)
        line_count = 0

        try:
            with open(path, "xb", buffering=BUFFER_SIZE) as handle:
                for line in sorted_lines:
                    handle.write(line + b"\n")
                    line_count += 1
        except FileExistsError as exc:
            raise ChunkWriteError(path, "chunk already exists") from exc
        except OSError as exc:
            path.unlink(missing_ok=True)
            raise ChunkWriteError(path, str(exc)) from exc

        chunk = ChunkHandle(index, path, line_count)
        self._handles.append(chunk)
        return chunk

    def open_reader(self, chunk: ChunkHandle) -> ChunkReader:
        try:
            stream = open(chunk.path, "rb", buffering=BUFFER_SIZE)  # noqa: SIM115
        except OSError as exc:
            raise ChunkReadError(chunk.path, str(exc)) from exc
        return ChunkReader(chunk, stream)

    def dispose(self, chunk: ChunkHandle) -> None:
        chunk.path.unlink(missing_ok=True)

    def dispose_all(self, chunks: Iterable[ChunkHandle] | None = None) -> int:
        """
        Remove chunk files, continuing past individual failures.

        Returns the number of chunks that could not be removed.
        """
        failures = 0
        for chunk in self._handles if chunks is None else chunks:
            try:
                self.dispose(chunk)
            except OSError as exc:
                failures += 1
                logger.warning("Failed to remove chunk %s: %s", chunk.path, exc)
        return failures
