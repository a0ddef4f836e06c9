"""Write-once storage for sorted chunks."""

from distinct_line_counter.chunks.store import ChunkReader, ChunkStore
from distinct_line_counter.chunks.types import ChunkHandle

__all__ = ["ChunkHandle", "ChunkReader", "ChunkStore"]
