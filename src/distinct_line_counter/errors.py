"""Error types raised by the counting pipeline."""

from pathlib import Path


class DistinctCountError(Exception):
    """Base class for pipeline failures."""


class InputReadError(DistinctCountError, OSError):
    """The input stream could not be opened or read."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"cannot read input {source}: {reason}")
        self.source = source


class ChunkWriteError(DistinctCountError, OSError):
    """A sorted chunk could not be persisted."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"cannot write chunk {path}: {reason}")
        self.path = path


class ChunkReadError(DistinctCountError, OSError):
    """A chunk could not be re-read during the merge."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"cannot read chunk {path}: {reason}")
        self.path = path
