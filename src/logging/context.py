# src/logging/context.py — v1
"""Contextual logging support: attach export_id and phase to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Set per export call by the exporter facade.
_export_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "export_id", default=None
)
_phase: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "phase", default=None
)


@dataclass
class LogContext:
    """Snapshot of the current logging context."""

    export_id: str | None = None
    phase: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(export_id=_export_id.get(), phase=_phase.get())


def set_export_context(export_id: str, phase: str | None = None) -> None:
    """Set the export id and, optionally, the current phase (nodes/edges)."""
    _export_id.set(export_id)
    _phase.set(phase)


def clear_context() -> None:
    """Reset all context variables."""
    _export_id.set(None)
    _phase.set(None)
