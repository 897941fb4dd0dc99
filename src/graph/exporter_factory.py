# src/graph/exporter_factory.py — v1
"""Factory: build a JSON exporter from settings."""

from __future__ import annotations

from graphjson.config.settings import ExporterSettings, load_settings
from graphjson.graph.exporters.json_exporter import JsonGraphExporter
from graphjson.graph.identity import BaseIdentityResolver, StringIdentityResolver


def create_exporter(settings: ExporterSettings | None = None) -> JsonGraphExporter:
    """Create a JsonGraphExporter configured from settings.

    Args:
        settings: Exporter settings. Loaded from the environment if None.

    Returns:
        Exporter without attribute suppliers; with ``networkx_attributes``
        set, NetworkX data dicts are exported.

    Raises:
        ValueError: If the id strategy is not supported.
    """
    settings = settings or load_settings()

    resolver: BaseIdentityResolver | None
    if settings.id_strategy == "integer":
        resolver = None
    elif settings.id_strategy == "string":
        resolver = StringIdentityResolver()
    else:
        raise ValueError(f"Unsupported id strategy: {settings.id_strategy!r}")

    return JsonGraphExporter(
        vertex_id_resolver=resolver,
        edge_id_resolver=resolver,
        weight_key=settings.networkx_weight_key,
        networkx_attributes=settings.networkx_attributes,
    )
