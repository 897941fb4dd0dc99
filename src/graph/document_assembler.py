# src/graph/document_assembler.py — v1
"""Assemble the JSON graph document and write it into an output sink.

Document layout (no whitespace, fixed field order)::

    {"creator":"...","version":"1",
     "nodes":[{"id":"1",<attributes>},...],
     "edges":[{"id":"1","source":"1","target":"2",<attributes>[,"weight":w]},...]}

Structural fields come first, then supplied attributes in supplier order.
For weighted graphs the structural weight is appended only when the
supplier did not provide a ``weight`` attribute itself.

The whole document is built in memory during one pass over vertices and one
over edges, then handed to the sink in a single write. An invalid id or
value anywhere in the graph aborts the call before any byte reaches the sink.
"""

from __future__ import annotations

import logging
from typing import Any

from graphjson.core.models import AttributeList, ExportStats
from graphjson.encoding.json_encoder import (
    encode_attribute,
    encode_id,
    encode_string,
    encode_weight,
)
from graphjson.graph.attributes import BaseAttributeSupplier, normalize_attributes
from graphjson.graph.base_graph_view import BaseGraphView
from graphjson.graph.identity import BaseIdentityResolver, resolve_id
from graphjson.logging.context import set_export_context
from graphjson.storage.base_output_sink import BaseOutputSink

logger = logging.getLogger(__name__)

CREATOR = "JGraphT JSON Exporter"
VERSION = "1"
WEIGHT_ATTRIBUTE = "weight"
ENCODING = "utf-8"


class GraphDocumentAssembler:
    """Single-use assembler for one export call.

    Holds the per-call identity resolvers; create one per export.
    """

    def __init__(
        self,
        vertex_id_resolver: BaseIdentityResolver,
        vertex_attribute_supplier: BaseAttributeSupplier,
        edge_id_resolver: BaseIdentityResolver,
        edge_attribute_supplier: BaseAttributeSupplier,
        export_id: str = "",
    ) -> None:
        self._vertex_ids = vertex_id_resolver
        self._vertex_attributes = vertex_attribute_supplier
        self._edge_ids = edge_id_resolver
        self._edge_attributes = edge_attribute_supplier
        self._export_id = export_id

    def assemble(self, graph: BaseGraphView, sink: BaseOutputSink) -> ExportStats:
        """Write the full document for ``graph`` into ``sink``.

        Nothing is written unless every vertex and edge encodes cleanly.

        Raises:
            ExportError: On any invalid id or attribute value.
            Exception: Whatever the sink raises, unchanged.
        """
        stats = ExportStats(
            export_id=self._export_id,
            weighted=graph.is_weighted(),
            directed=graph.is_directed(),
        )

        fragments = [
            "{"
            f'"creator":{encode_string(CREATOR)},'
            f'"version":{encode_string(VERSION)},'
            '"nodes":['
        ]

        set_export_context(self._export_id, phase="nodes")
        for index, vertex in enumerate(graph.vertices()):
            if index:
                fragments.append(",")
            fragments.append(self._encode_vertex(vertex))
            stats.node_count += 1

        fragments.append('],"edges":[')

        set_export_context(self._export_id, phase="edges")
        weighted = stats.weighted
        for index, edge in enumerate(graph.edges()):
            if index:
                fragments.append(",")
            fragments.append(self._encode_edge(graph, edge, weighted))
            stats.edge_count += 1

        fragments.append("]}")

        data = "".join(fragments).encode(ENCODING)
        sink.write(data)
        sink.flush()

        stats.bytes_written = len(data)
        logger.debug(
            "Assembled graph document: nodes=%d, edges=%d, bytes=%d",
            stats.node_count, stats.edge_count, stats.bytes_written,
        )
        return stats

    def _encode_vertex(self, vertex: Any) -> str:
        vertex_id = resolve_id(self._vertex_ids, vertex, "vertex")
        component = f"vertex {vertex_id!r}"
        attributes = normalize_attributes(
            self._vertex_attributes.attributes_of(vertex), component
        )
        parts = [f'{{"id":{encode_id(vertex_id)}']
        parts.extend(_encode_attributes(attributes, component))
        parts.append("}")
        return "".join(parts)

    def _encode_edge(self, graph: BaseGraphView, edge: Any, weighted: bool) -> str:
        edge_id = resolve_id(self._edge_ids, edge, "edge")
        source_id = resolve_id(self._vertex_ids, graph.source(edge), "vertex")
        target_id = resolve_id(self._vertex_ids, graph.target(edge), "vertex")
        component = f"edge {edge_id!r}"
        attributes = normalize_attributes(
            self._edge_attributes.attributes_of(edge), component
        )
        parts = [
            f'{{"id":{encode_id(edge_id)},'
            f'"source":{encode_id(source_id)},'
            f'"target":{encode_id(target_id)}'
        ]
        parts.extend(_encode_attributes(attributes, component))
        if weighted and all(name != WEIGHT_ATTRIBUTE for name, _ in attributes):
            weight = encode_weight(graph.weight(edge), component)
            parts.append(f',"{WEIGHT_ATTRIBUTE}":{weight}')
        parts.append("}")
        return "".join(parts)


def _encode_attributes(attributes: AttributeList, component: str) -> list[str]:
    return [
        f",{encode_string(name)}:{encode_attribute(value, name, component)}"
        for name, value in attributes
    ]
