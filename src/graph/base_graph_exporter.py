# src/graph/base_graph_exporter.py — v1
"""Abstract graph export interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any

from graphjson.storage.sinks import BufferSink

if TYPE_CHECKING:
    from graphjson.core.models import ExportStats
    from graphjson.storage.base_output_sink import BaseOutputSink


class BaseGraphExporter(ABC):
    """Unified interface for graph export formats."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Export format identifier (e.g., 'json')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Output file extension (e.g., '.json')."""

    @abstractmethod
    def export(self, graph: Any, sink: BaseOutputSink) -> ExportStats:
        """Write the whole document for ``graph`` into ``sink``."""

    def export_to_bytes(self, graph: Any) -> bytes:
        """Export into memory; nothing is returned unless the export succeeds."""
        sink = BufferSink()
        self.export(graph, sink)
        return sink.getvalue()

    def export_to_string(self, graph: Any) -> str:
        return self.export_to_bytes(graph).decode("utf-8")

    def export_to_file(self, graph: Any, output_path: str | Path) -> str:
        """Export to a file, return its path.

        The document is buffered first, so a failed export leaves no file
        behind (or leaves an existing file untouched).
        """
        data = self.export_to_bytes(graph)
        path = Path(output_path).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return str(path)
