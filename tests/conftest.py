# tests/conftest.py — v1
"""Shared test fixtures: insertion-ordered graph views and sample graphs.

No external dependencies; all output goes to in-memory sinks or tmp_path.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from graphjson.graph.base_graph_view import BaseGraphView


@dataclass(eq=False)
class Edge:
    """Edge handle hashed by identity, like an opaque edge object."""

    source: Any
    target: Any
    weight: float = 1.0


class ListGraph(BaseGraphView):
    """Graph view that iterates vertices and edges in insertion order."""

    def __init__(self, directed: bool = True, weighted: bool = False) -> None:
        self._vertices: list[Any] = []
        self._edges: list[Edge] = []
        self._directed = directed
        self._weighted = weighted

    def add_vertex(self, vertex: Any) -> Any:
        self._vertices.append(vertex)
        return vertex

    def add_edge(self, source: Any, target: Any, weight: float = 1.0) -> Edge:
        edge = Edge(source, target, weight)
        self._edges.append(edge)
        return edge

    def vertices(self) -> list[Any]:
        return list(self._vertices)

    def edges(self) -> list[Edge]:
        return list(self._edges)

    def source(self, edge: Edge) -> Any:
        return edge.source

    def target(self, edge: Edge) -> Any:
        return edge.target

    def is_weighted(self) -> bool:
        return self._weighted

    def weight(self, edge: Edge) -> float:
        return edge.weight

    def is_directed(self) -> bool:
        return self._directed


HEADER = '{"creator":"JGraphT JSON Exporter","version":"1",'


@pytest.fixture
def header() -> str:
    return HEADER


@pytest.fixture
def make_graph():
    """Factory for empty ListGraph instances."""
    return ListGraph


@pytest.fixture
def basic_graph() -> ListGraph:
    """Four vertices, directed edges 1→2, 2→3, 3→4, 1→4."""
    graph = ListGraph(directed=True)
    for v in (1, 2, 3, 4):
        graph.add_vertex(v)
    graph.add_edge(1, 2)
    graph.add_edge(2, 3)
    graph.add_edge(3, 4)
    graph.add_edge(1, 4)
    return graph


@pytest.fixture
def weighted_graph() -> ListGraph:
    """Three vertices, weighted edges 1→2 (1.0), 1→3 (1.0), 2→3 (100.0)."""
    graph = ListGraph(directed=True, weighted=True)
    for v in (1, 2, 3):
        graph.add_vertex(v)
    graph.add_edge(1, 2)
    graph.add_edge(1, 3)
    graph.add_edge(2, 3, weight=100.0)
    return graph
