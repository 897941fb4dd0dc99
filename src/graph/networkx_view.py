# src/graph/networkx_view.py — v1
"""Expose a NetworkX graph through the BaseGraphView interface.

Edges are ``(u, v)`` tuples, or ``(u, v, key)`` for multigraphs, in the
order NetworkX reports them.
"""

from __future__ import annotations

from typing import Any, Iterable

import networkx as nx

from graphjson.graph.base_graph_view import BaseGraphView

DEFAULT_WEIGHT = 1.0


class NetworkXGraphView(BaseGraphView):
    """Read-only view over any ``nx.Graph`` subclass."""

    def __init__(
        self,
        graph: nx.Graph,
        weight_key: str = "weight",
        weighted: bool | None = None,
    ) -> None:
        """Wrap a NetworkX graph.

        Args:
            graph: Graph, DiGraph, MultiGraph or MultiDiGraph.
            weight_key: Edge data key holding the weight.
            weighted: Force the weighted flag. None means weighted when any
                edge carries ``weight_key``.
        """
        self._graph = graph
        self._weight_key = weight_key
        if weighted is None:
            weighted = any(
                weight_key in data for *_, data in graph.edges(data=True)
            )
        self._weighted = weighted

    @property
    def graph(self) -> nx.Graph:
        return self._graph

    def vertices(self) -> Iterable[Any]:
        return self._graph.nodes()

    def edges(self) -> Iterable[Any]:
        if self._graph.is_multigraph():
            return self._graph.edges(keys=True)
        return self._graph.edges()

    def source(self, edge: Any) -> Any:
        return edge[0]

    def target(self, edge: Any) -> Any:
        return edge[1]

    def is_weighted(self) -> bool:
        return self._weighted

    def is_directed(self) -> bool:
        return self._graph.is_directed()

    def weight(self, edge: Any) -> float:
        return float(self.edge_data(edge).get(self._weight_key, DEFAULT_WEIGHT))

    def edge_data(self, edge: Any) -> dict[str, Any]:
        """Data dict NetworkX stores for ``edge``."""
        if self._graph.is_multigraph():
            u, v, key = edge
            return self._graph.edges[u, v, key]
        u, v = edge
        return self._graph.edges[u, v]

    def node_data(self, vertex: Any) -> dict[str, Any]:
        return self._graph.nodes[vertex]
