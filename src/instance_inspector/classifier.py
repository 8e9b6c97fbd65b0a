"""
Scalar type classification.

Numbers are tagged by the numeric subtype the decoder produced, not by
magnitude: an INT value is INTEGER even if it would fit a SHORT.
"""

from typing import Any, Optional, Tuple

from .model import FieldStatus, FieldType
from .values import JsonKind, JsonValue

_FIELD_TYPES = {
    JsonKind.INT: FieldType.INTEGER,
    JsonKind.BIG_INTEGER: FieldType.BIG_INTEGER,
    JsonKind.FLOAT: FieldType.FLOAT,
    JsonKind.DOUBLE: FieldType.DOUBLE,
    JsonKind.DECIMAL: FieldType.DECIMAL,
    JsonKind.SHORT: FieldType.SHORT,
    JsonKind.LONG: FieldType.LONG,
    JsonKind.STRING: FieldType.STRING,
    JsonKind.BOOLEAN: FieldType.BOOLEAN,
}


def classify(value: JsonValue) -> Tuple[Optional[FieldType], FieldStatus]:
    """
    Map a scalar value to its ``(field type, status)`` pair.

    Never raises. Null yields no type but stays SUPPORTED; binary, opaque
    and anything else without a known type yields ``(None, UNSUPPORTED)``.
    """
    if value.kind is JsonKind.NULL:
        return None, FieldStatus.SUPPORTED
    field_type = _FIELD_TYPES.get(value.kind)
    if field_type is None:
        return None, FieldStatus.UNSUPPORTED
    return field_type, FieldStatus.SUPPORTED


def sample_value(value: JsonValue) -> Any:
    """The plain value to keep on a leaf node, or None when it has no usable type."""
    if value.kind in _FIELD_TYPES:
        return value.value
    return None
