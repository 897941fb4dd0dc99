# src/encoding/json_encoder.py — v1
"""Encode ids, weights and attribute values as JSON literal text.

Strings go through the standard library encoder with ``ensure_ascii=False``:
quotes, backslashes and control characters are escaped, every other code
point passes through. Floats are validated here; NaN and Infinity have no
JSON literal and raise ``InvalidNumericValueError``.
"""

from __future__ import annotations

import json
import math
from typing import Any, Callable

import numpy as np

from graphjson.core.errors import (
    InvalidNumericValueError,
    UnsupportedAttributeTypeError,
)
from graphjson.core.models import ATTRIBUTE_TYPES


def encode_string(text: str) -> str:
    """Quote and escape ``text`` as a JSON string literal."""
    return json.dumps(text, ensure_ascii=False)


def encode_id(component_id: str) -> str:
    return encode_string(component_id)


def encode_double(
    value: float, attribute: str | None = None, component: str | None = None
) -> str:
    """Shortest round-trip form of a double, e.g. ``3.4``, ``100.0``, ``1.0e+16``."""
    number = float(value)
    if not math.isfinite(number):
        raise InvalidNumericValueError(number, attribute, component)
    return _with_fraction(repr(number))


def encode_float(
    value: float, attribute: str | None = None, component: str | None = None
) -> str:
    """Shortest single-precision form, so ``3.4`` stays ``3.4``.

    Doubles beyond the float32 range overflow to infinity and are rejected.
    """
    with np.errstate(over="ignore"):
        single = np.float32(value)
    if not np.isfinite(single):
        raise InvalidNumericValueError(float(value), attribute, component)
    return _with_fraction(str(single))


def _with_fraction(text: str) -> str:
    """Give exponent forms a fractional mantissa: ``1e+16`` becomes ``1.0e+16``."""
    mantissa, sep, exponent = text.partition("e")
    if sep and "." not in mantissa:
        return f"{mantissa}.0e{exponent}"
    return text


def encode_weight(weight: float, component: str | None = None) -> str:
    return encode_double(weight, "weight", component)


def _encode_string_value(value: Any, attribute: str | None, component: str | None) -> str:
    return encode_string(value.value)


def _encode_boolean(value: Any, attribute: str | None, component: str | None) -> str:
    return "true" if value.value else "false"


def _encode_integer(value: Any, attribute: str | None, component: str | None) -> str:
    return str(int(value.value))


def _encode_float_value(value: Any, attribute: str | None, component: str | None) -> str:
    return encode_float(value.value, attribute, component)


def _encode_double_value(value: Any, attribute: str | None, component: str | None) -> str:
    return encode_double(value.value, attribute, component)


def _encode_null(value: Any, attribute: str | None, component: str | None) -> str:
    return "null"


_ENCODERS: dict[str, Callable[[Any, str | None, str | None], str]] = {
    "string": _encode_string_value,
    "boolean": _encode_boolean,
    "int": _encode_integer,
    "long": _encode_integer,
    "float": _encode_float_value,
    "double": _encode_double_value,
    "custom": _encode_string_value,
    "null": _encode_null,
}


def encode_attribute(
    value: Any, attribute: str | None = None, component: str | None = None
) -> str:
    """Encode one attribute value as JSON literal text.

    Args:
        value: An attribute variant from ``core.models``.
        attribute: Attribute name, used in error messages.
        component: Component description (e.g. ``vertex '1'``), used in
            error messages.

    Raises:
        InvalidNumericValueError: For a NaN or infinite float/double.
        UnsupportedAttributeTypeError: If ``value`` is not a known variant.
    """
    if not isinstance(value, ATTRIBUTE_TYPES):
        raise UnsupportedAttributeTypeError(value, attribute, component)
    encoder = _ENCODERS.get(value.kind)
    if encoder is None:
        raise UnsupportedAttributeTypeError(value, attribute, component)
    return encoder(value, attribute, component)
