# src/storage/sinks.py — v1
"""Concrete output sinks: in-memory buffer, binary stream, local file."""

from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO

from graphjson.core.errors import SinkWriteError
from graphjson.storage.base_output_sink import BaseOutputSink


class BufferSink(BaseOutputSink):
    """Collect the document in memory."""

    def __init__(self) -> None:
        self._buffer = io.BytesIO()
        self._closed = False

    def write(self, data: bytes) -> None:
        if self._closed:
            raise SinkWriteError("Cannot write to a closed buffer sink")
        self._buffer.write(data)

    def getvalue(self) -> bytes:
        """All bytes written so far."""
        return self._buffer.getvalue()

    def close(self) -> None:
        self._closed = True


class StreamSink(BaseOutputSink):
    """Write into a caller-owned binary file-like object.

    The stream is flushed but never closed by the sink.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def write(self, data: bytes) -> None:
        if getattr(self._stream, "closed", False):
            raise SinkWriteError("Cannot write to a closed stream")
        self._stream.write(data)

    def flush(self) -> None:
        self._stream.flush()


class FileSink(BaseOutputSink):
    """Write to a local file, creating parent directories.

    Usable as a context manager; the file is opened on construction.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file: BinaryIO | None = open(self._path, "wb")  # noqa: SIM115

    @property
    def path(self) -> Path:
        return self._path

    def write(self, data: bytes) -> None:
        if self._file is None:
            raise SinkWriteError(f"Cannot write to closed file sink {self._path}")
        self._file.write(data)

    def flush(self) -> None:
        if self._file is not None:
            self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> FileSink:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
