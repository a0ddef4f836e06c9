"""Tests for the chunk store."""

import tempfile
from pathlib import Path

import pytest

from distinct_line_counter.chunks import ChunkStore
from distinct_line_counter.errors import ChunkReadError, ChunkWriteError


class TestChunkStoreCreate:
    """Test cases for ChunkStore.create."""

    def test_writes_one_line_per_entry(self) -> None:
        """Test that lines are persisted newline-terminated in order."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            store = ChunkStore(Path(tmp_dir))
            chunk = store.create([b"10.0.0.1", b"192.168.1.1"])

            assert chunk.index == 0
            assert chunk.line_count == 2
            assert chunk.path.read_bytes() == b"10.0.0.1\n192.168.1.1\n"

    def test_indices_follow_creation_order(self) -> None:
        """Test that chunk indices and names are unique and ordered."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            store = ChunkStore(Path(tmp_dir))
            first = store.create([b"a"])
            second = store.create([b"b"])

            assert (first.index, second.index) == (0, 1)
            assert first.path.name == "chunk_000000.txt"
            assert second.path.name == "chunk_000001.txt"
            assert store.handles == [first, second]

    def test_refuses_to_overwrite_existing_chunk(self) -> None:
        """Test that a chunk file left over at the target path is not replaced."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp_path = Path(tmp_dir)
            (tmp_path / "chunk_000000.txt").write_bytes(b"stale\n")
            store = ChunkStore(tmp_path)

            with pytest.raises(ChunkWriteError):
                store.create([b"a"])

            assert (tmp_path / "chunk_000000.txt").read_bytes() == b"stale\n"
            assert store.handles == []

    def test_missing_directory_raises_write_error(self) -> None:
        """Test that an unwritable location surfaces as ChunkWriteError."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            store = ChunkStore(Path(tmp_dir) / "missing")

            with pytest.raises(ChunkWriteError) as excinfo:
                store.create([b"a"])

            assert isinstance(excinfo.value, OSError)
            assert excinfo.value.path.name == "chunk_000000.txt"

    def test_failing_iterable_removes_partial_file(self) -> None:
        """Test that a write aborted midway leaves no chunk behind."""

        def lines():
            yield b"a"
            raise OSError("disk full")

        with tempfile.TemporaryDirectory() as tmp_dir:
            store = ChunkStore(Path(tmp_dir))

            with pytest.raises(ChunkWriteError, match="disk full"):
                store.create(lines())

            assert list(Path(tmp_dir).iterdir()) == []


class TestChunkReader:
    """Test cases for sequential chunk readers."""

    def test_next_returns_none_at_end(self) -> None:
        """Test that the end of a chunk is reported as None."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            store = ChunkStore(Path(tmp_dir))
            chunk = store.create([b"a", b"b"])

            with store.open_reader(chunk) as reader:
                assert reader.next() == b"a"
                assert reader.next() == b"b"
                assert reader.next() is None
                assert reader.next() is None

    def test_empty_line_is_distinct_from_end(self) -> None:
        """Test that a stored empty line reads back as b"" rather than None."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            store = ChunkStore(Path(tmp_dir))
            chunk = store.create([b"", b"", b"x"])

            with store.open_reader(chunk) as reader:
                assert list(reader) == [b"", b"", b"x"]

    def test_empty_chunk_is_immediately_exhausted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            store = ChunkStore(Path(tmp_dir))
            chunk = store.create([])

            with store.open_reader(chunk) as reader:
                assert reader.next() is None

    def test_close_is_idempotent(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            store = ChunkStore(Path(tmp_dir))
            reader = store.open_reader(store.create([b"a"]))
            reader.close()
            reader.close()
            assert reader.next() is None

    def test_open_missing_chunk_raises_read_error(self) -> None:
        """Test that a disposed chunk cannot be reopened."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            store = ChunkStore(Path(tmp_dir))
            chunk = store.create([b"a"])
            store.dispose(chunk)

            with pytest.raises(ChunkReadError):
                store.open_reader(chunk)


class TestChunkDisposal:
    """Test cases for chunk disposal."""

    def test_dispose_all_removes_every_chunk(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            store = ChunkStore(Path(tmp_dir))
            store.create([b"a"])
            store.create([b"b"])

            assert store.dispose_all() == 0
            assert list(Path(tmp_dir).iterdir()) == []

    def test_dispose_tolerates_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            store = ChunkStore(Path(tmp_dir))
            chunk = store.create([b"a"])
            chunk.path.unlink()

            store.dispose(chunk)
            assert store.dispose_all([chunk]) == 0

    def test_dispose_all_continues_past_failures(self, monkeypatch) -> None:
        """Test that one failed removal does not stop the others."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            store = ChunkStore(Path(tmp_dir))
            first = store.create([b"a"])
            second = store.create([b"b"])
            original_dispose = store.dispose

            def flaky_dispose(chunk):
                if chunk == first:
                    raise PermissionError("busy")
                original_dispose(chunk)

            monkeypatch.setattr(store, "dispose", flaky_dispose)

            assert store.dispose_all() == 1
            assert first.path.exists()
            assert not second.path.exists()
