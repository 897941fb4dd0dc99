# tests/unit/core/test_unit_models.py — v1
"""Tests for core/models.py — attribute variants and value inference."""

from __future__ import annotations

import numpy as np
import pytest
from pydantic import TypeAdapter, ValidationError

from graphjson.core.errors import UnsupportedAttributeTypeError
from graphjson.core.models import (
    AttributeValue,
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


class TestAttributeVariants:
    def test_kinds(self):
        assert StringAttribute(value="x").kind == "string"
        assert BooleanAttribute(value=True).kind == "boolean"
        assert IntAttribute(value=1).kind == "int"
        assert LongAttribute(value=1).kind == "long"
        assert FloatAttribute(value=1.5).kind == "float"
        assert DoubleAttribute(value=1.5).kind == "double"
        assert CustomAttribute(value="x").kind == "custom"
        assert NullAttribute().kind == "null"

    def test_int_range_enforced(self):
        IntAttribute(value=2**31 - 1)
        with pytest.raises(ValidationError):
            IntAttribute(value=2**31)

    def test_long_range_enforced(self):
        LongAttribute(value=-(2**63))
        with pytest.raises(ValidationError):
            LongAttribute(value=2**63)

    def test_int_rejects_bool(self):
        with pytest.raises(ValidationError):
            IntAttribute(value=True)

    def test_string_rejects_int(self):
        with pytest.raises(ValidationError):
            StringAttribute(value=3)

    def test_frozen(self):
        attr = StringAttribute(value="x")
        with pytest.raises(ValidationError):
            attr.value = "y"  # type: ignore[misc]

    def test_nan_allowed_at_construction(self):
        # Non-finite values are rejected when encoded, not when built
        assert np.isnan(DoubleAttribute(value=float("nan")).value)

    def test_discriminated_union(self):
        adapter = TypeAdapter(AttributeValue)
        value = adapter.validate_python({"kind": "long", "value": 7})
        assert isinstance(value, LongAttribute)


class TestAttributeInference:
    def test_bool_before_int(self):
        assert attribute(True) == BooleanAttribute(value=True)

    def test_small_int(self):
        assert attribute(3) == IntAttribute(value=3)

    def test_large_int_is_long(self):
        assert attribute(2**40) == LongAttribute(value=2**40)

    def test_huge_int_is_custom(self):
        assert attribute(2**70) == CustomAttribute(value=str(2**70))

    def test_float_is_double(self):
        assert attribute(3.4) == DoubleAttribute(value=3.4)

    def test_numpy_float32_is_float(self):
        assert isinstance(attribute(np.float32(3.4)), FloatAttribute)

    def test_numpy_int64(self):
        assert attribute(np.int64(5)) == IntAttribute(value=5)

    def test_numpy_bool(self):
        assert attribute(np.bool_(False)) == BooleanAttribute(value=False)

    def test_str(self):
        assert attribute("red") == StringAttribute(value="red")

    def test_none_is_null(self):
        assert attribute(None) == NullAttribute()

    def test_existing_attribute_unchanged(self):
        attr = LongAttribute(value=3)
        assert attribute(attr) is attr

    def test_other_object_is_custom(self):
        class Color:
            def __str__(self) -> str:
                return "teal"

        assert attribute(Color()) == CustomAttribute(value="teal")

    def test_bytes_unsupported(self):
        with pytest.raises(UnsupportedAttributeTypeError):
            attribute(b"raw")


class TestExportStats:
    def test_defaults(self):
        stats = ExportStats(export_id="abc")
        assert stats.node_count == 0
        assert stats.edge_count == 0
        assert stats.weighted is False
