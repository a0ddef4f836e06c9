"""Shared constants and handle types for chunk stores."""

from dataclasses import dataclass
from pathlib import Path

# 1MB buffer for chunk reads and writes.
BUFFER_SIZE = 1024 * 1024

CHUNK_PREFIX = "chunk"


@dataclass(frozen=True, slots=True)
class ChunkHandle:
    """Address of one persisted, sorted chunk."""

    index: int
    path: Path
    line_count: int
