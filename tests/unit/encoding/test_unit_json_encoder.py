# tests/unit/encoding/test_unit_json_encoder.py — v1
"""Tests for encoding/json_encoder.py — JSON literal encoding."""

from __future__ import annotations

import pytest

from graphjson.core.errors import (
    InvalidNumericValueError,
    UnsupportedAttributeTypeError,
)
from graphjson.core.models import (
    BooleanAttribute,
    CustomAttribute,
    DoubleAttribute,
    FloatAttribute,
    IntAttribute,
    LongAttribute,
    NullAttribute,
    StringAttribute,
)
from graphjson.encoding.json_encoder import (
    encode_attribute,
    encode_double,
    encode_float,
    encode_id,
    encode_string,
    encode_weight,
)


class TestEncodeString:
    def test_plain(self):
        assert encode_string("yellow") == '"yellow"'

    def test_quote_and_backslash(self):
        assert encode_string('a"b\\c') == '"a\\"b\\\\c"'

    def test_control_characters(self):
        assert encode_string("a\nb\tc\x01") == '"a\\nb\\tc\\u0001"'

    def test_unicode_passes_through(self):
        assert encode_string("café ✓ 図") == '"café ✓ 図"'

    def test_slash_not_escaped(self):
        assert encode_string("a/b") == '"a/b"'

    def test_id(self):
        assert encode_id("1") == '"1"'


class TestEncodeNumbers:
    def test_double(self):
        assert encode_double(3.4) == "3.4"
        assert encode_double(100.0) == "100.0"
        assert encode_double(-0.5) == "-0.5"

    def test_double_exponent_has_fraction(self):
        assert encode_double(1e16) == "1.0e+16"
        assert encode_double(1.5e-7) == "1.5e-07"
        assert encode_double(-2e-300) == "-2.0e-300"

    def test_double_rejects_nan(self):
        with pytest.raises(InvalidNumericValueError):
            encode_double(float("nan"))

    def test_double_rejects_infinity(self):
        with pytest.raises(InvalidNumericValueError):
            encode_double(float("-inf"))

    def test_float_shortest_single_precision(self):
        assert encode_float(3.4) == "3.4"
        assert encode_float(100.0) == "100.0"

    def test_float_exponent_has_fraction(self):
        assert encode_float(1e20) == "1.0e+20"

    def test_float_overflow_rejected(self):
        with pytest.raises(InvalidNumericValueError):
            encode_float(1e300)

    def test_weight(self):
        assert encode_weight(1.0) == "1.0"

    def test_weight_error_names_weight(self):
        with pytest.raises(InvalidNumericValueError) as exc_info:
            encode_weight(float("inf"), "edge '3'")
        assert exc_info.value.attribute == "weight"
        assert exc_info.value.component == "edge '3'"


class TestEncodeAttribute:
    def test_string(self):
        assert encode_attribute(StringAttribute(value='say "hi"')) == '"say \\"hi\\""'

    def test_boolean(self):
        assert encode_attribute(BooleanAttribute(value=True)) == "true"
        assert encode_attribute(BooleanAttribute(value=False)) == "false"

    def test_integers(self):
        assert encode_attribute(IntAttribute(value=-3)) == "-3"
        assert encode_attribute(LongAttribute(value=2**40)) == "1099511627776"

    def test_floats(self):
        assert encode_attribute(FloatAttribute(value=3.4)) == "3.4"
        assert encode_attribute(DoubleAttribute(value=3.4)) == "3.4"

    def test_custom_quoted(self):
        assert encode_attribute(CustomAttribute(value="x<y>")) == '"x<y>"'

    def test_null(self):
        assert encode_attribute(NullAttribute()) == "null"

    def test_nan_reports_attribute_and_component(self):
        with pytest.raises(InvalidNumericValueError) as exc_info:
            encode_attribute(DoubleAttribute(value=float("nan")), "score", "vertex '1'")
        assert exc_info.value.attribute == "score"
        assert exc_info.value.component == "vertex '1'"

    def test_float_infinity_rejected(self):
        with pytest.raises(InvalidNumericValueError):
            encode_attribute(FloatAttribute(value=float("inf")))

    def test_raw_value_unsupported(self):
        with pytest.raises(UnsupportedAttributeTypeError):
            encode_attribute("not wrapped", "label")
