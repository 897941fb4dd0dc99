# src/graph/exporters/json_exporter.py — v1
"""JSON graph exporter facade.

Usage:
    from graphjson import JsonGraphExporter
    exporter = JsonGraphExporter(vertex_attribute_supplier=lambda v: {"label": str(v)})
    document = exporter.export_to_string(nx_graph)
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Callable

import networkx as nx

from graphjson.core.errors import ConfigurationError
from graphjson.core.models import ExportStats
from graphjson.graph.attributes import (
    BaseAttributeSupplier,
    EmptyAttributeSupplier,
    NetworkXAttributeSupplier,
    RawAttributes,
    as_attribute_supplier,
)
from graphjson.graph.base_graph_exporter import BaseGraphExporter
from graphjson.graph.base_graph_view import BaseGraphView
from graphjson.graph.document_assembler import GraphDocumentAssembler
from graphjson.graph.identity import (
    BaseIdentityResolver,
    IntegerIdentityResolver,
    as_identity_resolver,
)
from graphjson.graph.networkx_view import NetworkXGraphView
from graphjson.logging.context import clear_context, set_export_context
from graphjson.storage.base_output_sink import BaseOutputSink

logger = logging.getLogger(__name__)

IdentityArg = BaseIdentityResolver | Callable[[Any], Any] | None
SupplierArg = BaseAttributeSupplier | Callable[[Any], RawAttributes] | None


class JsonGraphExporter(BaseGraphExporter):
    """Export a graph as a compact JSON document of nodes and edges.

    Instances are reusable across calls and graphs. When no identity
    resolver is given, each call numbers vertices and edges from 1 in
    iteration order with fresh resolvers. A resolver passed in has its
    ``reset()`` hook called at the start of every export, so the exporter
    carries no numbering from one call into the next.
    """

    def __init__(
        self,
        vertex_id_resolver: IdentityArg = None,
        vertex_attribute_supplier: SupplierArg = None,
        edge_id_resolver: IdentityArg = None,
        edge_attribute_supplier: SupplierArg = None,
        weight_key: str = "weight",
        networkx_attributes: bool = False,
    ) -> None:
        """Configure the exporter.

        Args:
            vertex_id_resolver: Resolver or callable for vertex ids.
            vertex_attribute_supplier: Supplier or callable for vertex
                attributes. None = no attributes.
            edge_id_resolver: Resolver or callable for edge ids.
            edge_attribute_supplier: Supplier or callable for edge
                attributes. None = no attributes.
            weight_key: Edge data key used as weight for NetworkX input.
            networkx_attributes: For NetworkX input without an explicit
                supplier, export node and edge data dicts as attributes.

        Raises:
            ConfigurationError: If a provider is neither an instance of the
                provider interface nor callable.
        """
        if not weight_key:
            raise ConfigurationError("weight_key must not be empty")
        self._vertex_id_resolver = as_identity_resolver(vertex_id_resolver)
        self._edge_id_resolver = as_identity_resolver(edge_id_resolver)
        self._vertex_supplier = (
            as_attribute_supplier(vertex_attribute_supplier)
            if vertex_attribute_supplier is not None
            else None
        )
        self._edge_supplier = (
            as_attribute_supplier(edge_attribute_supplier)
            if edge_attribute_supplier is not None
            else None
        )
        self._weight_key = weight_key
        self._networkx_attributes = networkx_attributes

    @property
    def format_name(self) -> str:
        return "json"

    @property
    def file_extension(self) -> str:
        return ".json"

    def export(self, graph: Any, sink: BaseOutputSink) -> ExportStats:
        """Export ``graph`` into ``sink``.

        Args:
            graph: A BaseGraphView or any NetworkX graph.
            sink: Destination for the UTF-8 encoded document.

        Returns:
            ExportStats with node/edge counts and bytes written.

        Raises:
            ExportError: On invalid ids or attribute values. Nothing is
                written to ``sink`` in that case.
            TypeError: If ``graph`` is not a supported graph type.
        """
        view = self._as_view(graph)
        export_id = uuid.uuid4().hex[:12]
        set_export_context(export_id)
        try:
            for resolver in (self._vertex_id_resolver, self._edge_id_resolver):
                if resolver is not None:
                    resolver.reset()
            assembler = GraphDocumentAssembler(
                vertex_id_resolver=self._vertex_id_resolver or IntegerIdentityResolver(),
                vertex_attribute_supplier=self._supplier_for(view, "vertex"),
                edge_id_resolver=self._edge_id_resolver or IntegerIdentityResolver(),
                edge_attribute_supplier=self._supplier_for(view, "edge"),
                export_id=export_id,
            )
            stats = assembler.assemble(view, sink)
        except Exception:
            logger.error("Graph export %s failed", export_id, exc_info=True)
            raise
        finally:
            clear_context()

        logger.info(
            "Exported graph %s: nodes=%d, edges=%d, bytes=%d",
            export_id, stats.node_count, stats.edge_count, stats.bytes_written,
            extra={"data": stats.model_dump()},
        )
        return stats

    def _as_view(self, graph: Any) -> BaseGraphView:
        if isinstance(graph, BaseGraphView):
            return graph
        if isinstance(graph, nx.Graph):
            return NetworkXGraphView(graph, weight_key=self._weight_key)
        raise TypeError(
            f"Cannot export {type(graph).__name__}: expected BaseGraphView or networkx graph"
        )

    def _supplier_for(self, view: BaseGraphView, kind: str) -> BaseAttributeSupplier:
        supplier = self._vertex_supplier if kind == "vertex" else self._edge_supplier
        if supplier is not None:
            return supplier
        if self._networkx_attributes and isinstance(view, NetworkXGraphView):
            return NetworkXAttributeSupplier(view, kind)  # type: ignore[arg-type]
        return EmptyAttributeSupplier()
