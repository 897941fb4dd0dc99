# tests/unit/storage/test_unit_sinks.py — v1
"""Tests for storage/ — output sink interface and implementations."""

from __future__ import annotations

import io

import pytest

from graphjson.core.errors import SinkWriteError
from graphjson.storage.base_output_sink import BaseOutputSink
from graphjson.storage.sinks import BufferSink, FileSink, StreamSink


class TestBaseOutputSink:
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            BaseOutputSink()  # type: ignore[abstract]


class TestBufferSink:
    def test_collects_bytes(self):
        sink = BufferSink()
        sink.write(b"ab")
        sink.write(b"c")
        assert sink.getvalue() == b"abc"

    def test_closed_rejects_writes(self):
        sink = BufferSink()
        sink.close()
        with pytest.raises(SinkWriteError):
            sink.write(b"x")


class TestStreamSink:
    def test_writes_to_stream(self):
        stream = io.BytesIO()
        sink = StreamSink(stream)
        sink.write(b"data")
        sink.flush()
        assert stream.getvalue() == b"data"

    def test_closed_stream(self):
        stream = io.BytesIO()
        stream.close()
        with pytest.raises(SinkWriteError):
            StreamSink(stream).write(b"x")


class TestFileSink:
    def test_writes_file(self, tmp_path):
        path = tmp_path / "nested" / "graph.json"
        with FileSink(path) as sink:
            sink.write(b"{}")
        assert path.read_bytes() == b"{}"

    def test_closed_rejects_writes(self, tmp_path):
        sink = FileSink(tmp_path / "g.json")
        sink.close()
        with pytest.raises(SinkWriteError):
            sink.write(b"x")
