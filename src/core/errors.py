# src/core/errors.py — v1
"""Exception hierarchy for graph export failures.

Every error aborts the export call that raised it. Nothing in the engine
catches these; callers decide whether a partially written sink is usable.
"""

from __future__ import annotations

from typing import Any


class ExportError(Exception):
    """Base class for all export failures."""


class InvalidNumericValueError(ExportError, ValueError):
    """A floating-point attribute or edge weight is NaN or infinite."""

    def __init__(
        self,
        value: float,
        attribute: str | None = None,
        component: str | None = None,
    ) -> None:
        self.value = value
        self.attribute = attribute
        self.component = component
        where = _describe(attribute, component)
        super().__init__(
            f"Non-finite numeric value {value!r}{where}: "
            "JSON has no literal for NaN or Infinity"
        )


class NullIdentityError(ExportError):
    """An identity resolver returned no id for a vertex or edge."""

    def __init__(self, kind: str, component: Any) -> None:
        self.kind = kind
        self.component = component
        super().__init__(f"Identity resolver returned None for {kind} {component!r}")


class UnsupportedAttributeTypeError(ExportError, TypeError):
    """An attribute value is not one of the known attribute variants."""

    def __init__(
        self,
        value: Any,
        attribute: str | None = None,
        component: str | None = None,
    ) -> None:
        self.value = value
        self.attribute = attribute
        self.component = component
        where = _describe(attribute, component)
        super().__init__(
            f"Unsupported attribute type {type(value).__name__}{where}"
        )


class SinkWriteError(ExportError, OSError):
    """A built-in output sink rejected a write."""


class ConfigurationError(Exception):
    """Raised when an exporter or settings object is inconsistent."""


def _describe(attribute: str | None, component: str | None) -> str:
    parts = []
    if attribute is not None:
        parts.append(f"attribute {attribute!r}")
    if component is not None:
        parts.append(component)
    return " for " + " of ".join(parts) if parts else ""
