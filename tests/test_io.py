"""Tests for reading input chunks and resolving the output destination."""

from __future__ import annotations

import io
import sys

import pytest

from dumpx.reader import IO_BUF_SIZE, iter_chunks, open_input
from dumpx.writer import open_output, write_lines


class TestReader:
    def test_chunks_cover_stream(self, random_data: bytes) -> None:
        chunks = list(iter_chunks(io.BytesIO(random_data)))
        assert b"".join(chunks) == random_data
        assert all(len(chunk) <= IO_BUF_SIZE for chunk in chunks)

    def test_custom_chunk_size(self) -> None:
        assert list(iter_chunks(io.BytesIO(b"abcde"), size=2)) == [b"ab", b"cd", b"e"]

    def test_empty_stream(self) -> None:
        assert list(iter_chunks(io.BytesIO(b""))) == []

    def test_open_input(self, hello_file) -> None:
        with open_input(str(hello_file)) as stream:
            assert stream.read() == b"Hello"

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            open_input(str(tmp_path / "missing.bin"))

    def test_directory(self, tmp_path) -> None:
        with pytest.raises(IsADirectoryError):
            open_input(str(tmp_path))


class TestWriter:
    def test_stdout_by_default(self) -> None:
        with open_output() as out:
            assert out is sys.stdout
        assert not sys.stdout.closed

    def test_creates_file(self, tmp_path) -> None:
        path = tmp_path / "dump.txt"
        with open_output(str(path)) as out:
            write_lines(out, ["one"])
        assert path.read_text() == "one\n"

    def test_refuses_existing_file(self, tmp_path) -> None:
        path = tmp_path / "dump.txt"
        path.write_text("keep me")
        with pytest.raises(FileExistsError):
            with open_output(str(path)):
                pass
        assert path.read_text() == "keep me"

    def test_write_lines_counts(self) -> None:
        out = io.StringIO()
        assert write_lines(out, iter(["a", "b", "c"])) == 3
        assert out.getvalue() == "a\nb\nc\n"

    def test_write_no_lines(self) -> None:
        out = io.StringIO()
        assert write_lines(out, []) == 0
        assert out.getvalue() == ""
