"""
JSON Instance Inspector - infer a mapping schema from one example JSON document.

The inspector walks an object or array document and produces a tree of
complex and leaf fields with slash-delimited paths, list markers for
unwrapped arrays, and numeric-width aware type tags.
"""

from .errors import (
    DecodeError,
    DepthLimitError,
    FrozenDocumentError,
    InspectionError,
    InvalidInputError,
    UnsupportedShapeError,
)
from .inspector import InspectorOptions, InstanceInspector, inspect, inspect_file
from .model import (
    CollectionType,
    ComplexNode,
    Diagnostic,
    FieldStatus,
    FieldType,
    LeafNode,
    SchemaDocument,
)
from .values import JsonKind, JsonValue

__version__ = "0.1.0"

__all__ = [
    "InstanceInspector",
    "InspectorOptions",
    "inspect",
    "inspect_file",
    "SchemaDocument",
    "ComplexNode",
    "LeafNode",
    "Diagnostic",
    "FieldType",
    "FieldStatus",
    "CollectionType",
    "JsonKind",
    "JsonValue",
    "InspectionError",
    "InvalidInputError",
    "DecodeError",
    "UnsupportedShapeError",
    "DepthLimitError",
    "FrozenDocumentError",
    "__version__",
]
