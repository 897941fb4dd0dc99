# src/core/models.py — v1
"""Attribute value models shared across the export pipeline.

An attribute value is a closed tagged variant: each model carries a ``kind``
literal, and the JSON encoder keeps exactly one encoding per kind. Adding a
variant means adding a model here and an encoder entry in
``encoding.json_encoder``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from graphjson.core.errors import UnsupportedAttributeTypeError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class _Attribute(BaseModel):
    model_config = ConfigDict(frozen=True)


class StringAttribute(_Attribute):
    """Plain text, encoded as a quoted JSON string."""

    kind: Literal["string"] = "string"
    value: StrictStr


class BooleanAttribute(_Attribute):
    kind: Literal["boolean"] = "boolean"
    value: StrictBool


class IntAttribute(_Attribute):
    """32-bit signed integer."""

    kind: Literal["int"] = "int"
    value: StrictInt = Field(ge=INT32_MIN, le=INT32_MAX)


class LongAttribute(_Attribute):
    """64-bit signed integer."""

    kind: Literal["long"] = "long"
    value: StrictInt = Field(ge=INT64_MIN, le=INT64_MAX)


class FloatAttribute(_Attribute):
    """Single-precision float, rendered in its shortest float32 form."""

    kind: Literal["float"] = "float"
    value: float


class DoubleAttribute(_Attribute):
    kind: Literal["double"] = "double"
    value: float


class CustomAttribute(_Attribute):
    """Any other caller type, carried as its string form."""

    kind: Literal["custom"] = "custom"
    value: StrictStr


class NullAttribute(_Attribute):
    kind: Literal["null"] = "null"


AttributeValue = Annotated[
    Union[
        StringAttribute,
        BooleanAttribute,
        IntAttribute,
        LongAttribute,
        FloatAttribute,
        DoubleAttribute,
        CustomAttribute,
        NullAttribute,
    ],
    Field(discriminator="kind"),
]

AttributeList = list[tuple[str, AttributeValue]]

ATTRIBUTE_TYPES: tuple[type[_Attribute], ...] = (
    StringAttribute,
    BooleanAttribute,
    IntAttribute,
    LongAttribute,
    FloatAttribute,
    DoubleAttribute,
    CustomAttribute,
    NullAttribute,
)


def attribute(value: Any) -> AttributeValue:
    """Wrap a native Python value in the matching attribute variant.

    ``bool`` maps to boolean, ``int`` to int or long depending on range,
    ``float`` to double, ``numpy.float32`` to float, ``str`` to string and
    ``None`` to null. Attribute instances are returned unchanged; any other
    object becomes a custom attribute holding ``str(value)``.

    Raises:
        UnsupportedAttributeTypeError: For raw bytes, which have no textual
            form without an encoding, and for unregistered attribute models.
    """
    if isinstance(value, ATTRIBUTE_TYPES):
        return value  # type: ignore[return-value]
    if isinstance(value, (_Attribute, bytes, bytearray, memoryview)):
        raise UnsupportedAttributeTypeError(value)
    if value is None:
        return NullAttribute()
    if isinstance(value, (bool, np.bool_)):
        return BooleanAttribute(value=bool(value))
    if isinstance(value, (int, np.integer)):
        number = int(value)
        if INT32_MIN <= number <= INT32_MAX:
            return IntAttribute(value=number)
        if INT64_MIN <= number <= INT64_MAX:
            return LongAttribute(value=number)
        return CustomAttribute(value=str(number))
    if isinstance(value, np.float32):
        return FloatAttribute(value=float(value))
    if isinstance(value, (float, np.floating)):
        return DoubleAttribute(value=float(value))
    if isinstance(value, str):
        return StringAttribute(value=value)
    return CustomAttribute(value=str(value))


class ExportStats(BaseModel):
    """Summary of one completed export call."""

    export_id: str
    node_count: int = 0
    edge_count: int = 0
    bytes_written: int = 0
    weighted: bool = False
    directed: bool = True
