# src/storage/base_output_sink.py — v1
"""Abstract byte sink the document assembler writes into."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseOutputSink(ABC):
    """Append-only byte destination.

    Implementations raise on failure; the exporter never retries.
    """

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Append ``data`` to the sink."""

    def flush(self) -> None:
        """Push buffered bytes to the underlying resource, if any."""

    def close(self) -> None:
        """Release the underlying resource, if any."""
