# src/__init__.py — v1
"""graphjson: export graphs as compact, deterministic JSON documents."""

from __future__ import annotations

from graphjson.config.settings import ExporterSettings, load_settings
from graphjson.core.errors import (
    ConfigurationError,
    ExportError,
    InvalidNumericValueError,
    NullIdentityError,
    SinkWriteError,
    UnsupportedAttributeTypeError,
)
from graphjson.core.models import (
    BooleanAttribute,
    CustomAttribute,
    DoubleAttribute,
    ExportStats,
    FloatAttribute,
    IntAttribute,
    LongAttribute,
    NullAttribute,
    StringAttribute,
    attribute,
)
from graphjson.graph.attributes import (
    BaseAttributeSupplier,
    EmptyAttributeSupplier,
    FunctionAttributeSupplier,
    NetworkXAttributeSupplier,
)
from graphjson.graph.base_graph_view import BaseGraphView
from graphjson.graph.exporter_factory import create_exporter
from graphjson.graph.exporters.json_exporter import JsonGraphExporter
from graphjson.graph.identity import (
    BaseIdentityResolver,
    FunctionIdentityResolver,
    IntegerIdentityResolver,
    StringIdentityResolver,
)
from graphjson.graph.networkx_view import NetworkXGraphView
from graphjson.logging.logger import setup_logging, setup_logging_from_settings
from graphjson.storage.sinks import BufferSink, FileSink, StreamSink

__version__ = "0.1.0"

__all__ = [
    "BaseAttributeSupplier",
    "BaseGraphView",
    "BaseIdentityResolver",
    "BooleanAttribute",
    "BufferSink",
    "ConfigurationError",
    "CustomAttribute",
    "DoubleAttribute",
    "EmptyAttributeSupplier",
    "ExportError",
    "ExportStats",
    "ExporterSettings",
    "FileSink",
    "FloatAttribute",
    "FunctionAttributeSupplier",
    "FunctionIdentityResolver",
    "IntAttribute",
    "IntegerIdentityResolver",
    "InvalidNumericValueError",
    "JsonGraphExporter",
    "LongAttribute",
    "NetworkXAttributeSupplier",
    "NetworkXGraphView",
    "NullAttribute",
    "NullIdentityError",
    "SinkWriteError",
    "StreamSink",
    "StringAttribute",
    "StringIdentityResolver",
    "UnsupportedAttributeTypeError",
    "attribute",
    "create_exporter",
    "load_settings",
    "setup_logging",
    "setup_logging_from_settings",
]
