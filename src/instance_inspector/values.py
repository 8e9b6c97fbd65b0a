"""
Decoded JSON value tree.

Values are tagged with the numeric subtype the decoder saw, so the schema
inspector can tell a 32-bit integer from a 64-bit one or a double from an
arbitrary-precision decimal. Text is decoded with ijson; already-parsed
Python objects can be wrapped with ``from_python``.
"""

import io
import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Tuple

import ijson

from .errors import DecodeError, InvalidInputError

logger = logging.getLogger(__name__)

INT_MIN, INT_MAX = -(2 ** 31), 2 ** 31 - 1
LONG_MIN, LONG_MAX = -(2 ** 63), 2 ** 63 - 1

FLOAT_MODES = ("double", "decimal")


class JsonKind(Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INT = "int"
    LONG = "long"
    BIG_INTEGER = "big_integer"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    SHORT = "short"
    BOOLEAN = "boolean"
    NULL = "null"
    BINARY = "binary"
    OPAQUE = "opaque"


@dataclass(frozen=True)
class JsonValue:
    """
    One node of a decoded JSON document.

    Objects carry an insertion-ordered ``dict[str, JsonValue]``, arrays a
    ``tuple`` of elements, scalars the plain Python value.
    """
    kind: JsonKind
    value: Any = None

    def is_object(self) -> bool:
        return self.kind is JsonKind.OBJECT

    def is_array(self) -> bool:
        return self.kind is JsonKind.ARRAY

    def is_container(self) -> bool:
        return self.kind in (JsonKind.OBJECT, JsonKind.ARRAY)

    def fields(self) -> Iterator[Tuple[str, "JsonValue"]]:
        """Iterate ``(key, value)`` pairs of an object in document order."""
        if not self.is_object():
            raise TypeError(f"{self.kind.value} value has no fields")
        return iter(self.value.items())

    def elements(self) -> Iterator["JsonValue"]:
        """Iterate the elements of an array in document order."""
        if not self.is_array():
            raise TypeError(f"{self.kind.value} value has no elements")
        return iter(self.value)

    def size(self) -> int:
        """Number of members of an object or elements of an array."""
        if not self.is_container():
            raise TypeError(f"{self.kind.value} value has no length")
        return len(self.value)


def integer_kind(number: int) -> JsonKind:
    """Narrowest integer kind able to hold ``number``."""
    if INT_MIN <= number <= INT_MAX:
        return JsonKind.INT
    if LONG_MIN <= number <= LONG_MAX:
        return JsonKind.LONG
    return JsonKind.BIG_INTEGER


def decode(text: str | bytes, float_mode: str = "double") -> JsonValue:
    """
    Decode one JSON document into a JsonValue tree.

    ijson builds the plain Python document; numbers stay ``int`` and become
    ``float`` or ``Decimal`` according to ``float_mode`` before width tagging.
    Malformed text, trailing content and empty documents raise DecodeError
    with the ijson failure as its cause.
    """
    if float_mode not in FLOAT_MODES:
        raise InvalidInputError(f"Unknown float mode: {float_mode!r}", context={"float_modes": list(FLOAT_MODES)})
    if isinstance(text, str):
        text = text.encode("utf-8")

    try:
        # A single top-level value; ijson rejects anything trailing it
        documents = list(ijson.items(io.BytesIO(text), "", use_float=(float_mode == "double")))
    except (ijson.JSONError, UnicodeDecodeError) as e:
        raise DecodeError(f"Could not decode JSON instance: {e}", context={"size": len(text)}) from e

    if not documents:
        raise DecodeError("JSON instance contains no value", context={"size": len(text)})
    root = from_python(documents[0])
    logger.debug("Decoded JSON instance of %d bytes into a %s root", len(text), root.kind.value)
    return root


def from_python(obj: Any) -> JsonValue:
    """
    Wrap an already-decoded Python object.

    bytes-like objects become BINARY and anything that is not a JSON shape
    becomes OPAQUE, so the inspector can mark such fields unsupported.
    """
    if isinstance(obj, JsonValue):
        return obj
    if obj is None:
        return JsonValue(JsonKind.NULL)
    if isinstance(obj, bool):
        return JsonValue(JsonKind.BOOLEAN, obj)
    if isinstance(obj, int):
        return JsonValue(integer_kind(obj), obj)
    if isinstance(obj, float):
        return JsonValue(JsonKind.DOUBLE, obj)
    if isinstance(obj, Decimal):
        return JsonValue(JsonKind.DECIMAL, obj)
    if isinstance(obj, str):
        return JsonValue(JsonKind.STRING, obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return JsonValue(JsonKind.BINARY, bytes(obj))
    if isinstance(obj, Mapping):
        members: Dict[str, JsonValue] = {}
        for key, value in obj.items():
            if not isinstance(key, str):
                raise InvalidInputError(f"JSON object keys must be strings, got {type(key).__name__}", context={"key": repr(key)})
            members[key] = from_python(value)
        return JsonValue(JsonKind.OBJECT, members)
    if isinstance(obj, (list, tuple)):
        return JsonValue(JsonKind.ARRAY, tuple(from_python(item) for item in obj))
    return JsonValue(JsonKind.OPAQUE, obj)
