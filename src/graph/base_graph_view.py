# src/graph/base_graph_view.py — v1
"""Read-only graph interface consumed by the exporter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable


class BaseGraphView(ABC):
    """Vertices, edges and edge endpoints of a graph, in native order.

    The exporter iterates ``vertices()`` and ``edges()`` once each and never
    mutates the graph.
    """

    @abstractmethod
    def vertices(self) -> Iterable[Any]:
        """Vertex handles in iteration order."""

    @abstractmethod
    def edges(self) -> Iterable[Any]:
        """Edge handles in iteration order."""

    @abstractmethod
    def source(self, edge: Any) -> Any:
        """Source vertex of an edge."""

    @abstractmethod
    def target(self, edge: Any) -> Any:
        """Target vertex of an edge."""

    def is_weighted(self) -> bool:
        return False

    def weight(self, edge: Any) -> float:
        """Edge weight; 1.0 unless the view overrides it."""
        return 1.0

    def is_directed(self) -> bool:
        return True
