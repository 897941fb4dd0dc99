# src/graph/attributes.py — v1
"""Attribute suppliers: per-component name/value metadata.

A supplier returns either a mapping or an iterable of ``(name, value)``
pairs. Values may be attribute variants or native Python values; both are
normalized by ``normalize_attributes``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Literal

import networkx as nx

from graphjson.core.errors import ConfigurationError, UnsupportedAttributeTypeError
from graphjson.core.models import AttributeList, attribute
from graphjson.graph.networkx_view import NetworkXGraphView

RawAttributes = Mapping[str, Any] | Iterable[tuple[str, Any]] | None


class BaseAttributeSupplier(ABC):
    """Produces the extra attributes of a vertex or edge."""

    @abstractmethod
    def attributes_of(self, component: Any) -> RawAttributes:
        """Return the attributes of ``component`` in output order."""


class EmptyAttributeSupplier(BaseAttributeSupplier):
    """Supplies no attributes."""

    def attributes_of(self, component: Any) -> RawAttributes:
        return ()


class FunctionAttributeSupplier(BaseAttributeSupplier):
    """Adapts a plain callable to the supplier interface."""

    def __init__(self, func: Callable[[Any], RawAttributes]) -> None:
        self._func = func

    def attributes_of(self, component: Any) -> RawAttributes:
        return self._func(component)


class NetworkXAttributeSupplier(BaseAttributeSupplier):
    """Exports the data dicts NetworkX keeps on nodes or edges."""

    def __init__(
        self,
        graph: nx.Graph | NetworkXGraphView,
        kind: Literal["vertex", "edge"],
    ) -> None:
        if kind not in ("vertex", "edge"):
            raise ConfigurationError(f"Unknown component kind: {kind!r}")
        self._view = graph if isinstance(graph, NetworkXGraphView) else NetworkXGraphView(graph)
        self._kind = kind

    def attributes_of(self, component: Any) -> RawAttributes:
        if self._kind == "vertex":
            return self._view.node_data(component)
        return self._view.edge_data(component)


def as_attribute_supplier(
    supplier: BaseAttributeSupplier | Callable[[Any], RawAttributes] | None,
) -> BaseAttributeSupplier:
    """Normalize a supplier argument; None becomes the empty supplier."""
    if supplier is None:
        return EmptyAttributeSupplier()
    if isinstance(supplier, BaseAttributeSupplier):
        return supplier
    if callable(supplier):
        return FunctionAttributeSupplier(supplier)
    raise ConfigurationError(
        f"Attribute supplier must be a BaseAttributeSupplier or callable, "
        f"got {type(supplier).__name__}"
    )


def normalize_attributes(
    raw: RawAttributes, component: str | None = None
) -> AttributeList:
    """Turn a supplier result into an ordered list of attribute pairs.

    A name returned twice keeps its first position and its last value.

    Raises:
        UnsupportedAttributeTypeError: If a value has no attribute variant.
    """
    if raw is None:
        return []
    items = raw.items() if isinstance(raw, Mapping) else raw
    merged: dict[str, Any] = {}
    for name, value in items:
        key = str(name)
        try:
            merged[key] = attribute(value)
        except UnsupportedAttributeTypeError as exc:
            raise UnsupportedAttributeTypeError(value, key, component) from exc
    return list(merged.items())
