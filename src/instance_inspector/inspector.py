"""
JSON instance document inspector.

Consumes one JSON instance document as an example and builds a SchemaDocument
from it. Objects become complex nodes, scalars become typed leaf nodes, and
arrays are unwrapped: every element is inspected as if it were the value at
the array's key, with ``<>`` appended to the path and the node marked as a
LIST collection.
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Callable, Optional

from .classifier import classify, sample_value
from .errors import DepthLimitError, InvalidInputError, UnsupportedShapeError
from .model import (
    CollectionType,
    ComplexNode,
    Diagnostic,
    SchemaDocument,
    SchemaNode,
    create_complex_node,
    create_document,
    create_leaf_node,
)
from .paths import build_path, collection_path
from .values import FLOAT_MODES, JsonValue, decode, from_python

logger = logging.getLogger(__name__)


@dataclass
class InspectorOptions:
    # "double" decodes non-integral numbers as floats, "decimal" keeps them exact
    float_mode: str = "double"
    # Keep the example value on each leaf node
    include_values: bool = True
    # Deepest node level allowed; top-level fields are level 1. None means unbounded.
    max_depth: Optional[int] = None
    on_diagnostic: Optional[Callable[[Diagnostic], None]] = None

    def validate(self):
        if self.float_mode not in FLOAT_MODES:
            raise InvalidInputError(f"Unknown float mode: {self.float_mode!r}", context={"float_modes": list(FLOAT_MODES)})
        if self.max_depth is not None and self.max_depth < 1:
            raise InvalidInputError(f"max_depth must be at least 1, got {self.max_depth}", context={"max_depth": self.max_depth})


class InstanceInspector:
    """
    Builds a schema document from a single example JSON instance.

    Usage:
        document = InstanceInspector().inspect('{"id": 1, "tags": ["a"]}')
        document = InstanceInspector(float_mode="decimal").inspect_file("order.json")

    An inspector holds no per-call state and may be reused.
    """

    def __init__(self, options: Optional[InspectorOptions] = None, **overrides):
        if options is None:
            options = InspectorOptions(**overrides)
        elif overrides:
            options = replace(options, **overrides)
        options.validate()
        self.options = options

    def inspect(self, instance: str | bytes | None) -> SchemaDocument:
        """
        Decode and inspect a JSON instance given as text or UTF-8 bytes.
        The root must be an object or an array.
        """
        if not instance:
            raise InvalidInputError("JSON instance cannot be empty")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Start JSON instance inspection: %d characters", len(instance))
        try:
            root = decode(instance, float_mode=self.options.float_mode)
        except RecursionError as e:
            raise DepthLimitError("JSON instance is nested too deeply to inspect") from e
        return self._inspect_root(root)

    def inspect_value(self, value: Any) -> SchemaDocument:
        """Inspect an already-decoded document (a JsonValue or plain Python objects)."""
        try:
            root = from_python(value)
        except RecursionError as e:
            raise DepthLimitError("JSON instance is nested too deeply to inspect") from e
        return self._inspect_root(root)

    def inspect_file(self, file_path: str | Path) -> SchemaDocument:
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        return self.inspect(file_path.read_bytes())

    def _inspect_root(self, root: JsonValue) -> SchemaDocument:
        document = create_document()
        try:
            if root.is_object():
                for key, value in root.fields():
                    self._handle_value(document, None, key, value, 1)
            elif root.is_array():
                self._handle_array(document, None, "", root, 1)
            else:
                raise InvalidInputError("JSON root must be object or array", context={"kind": root.kind.value})
        except RecursionError as e:
            raise DepthLimitError("JSON instance is nested too deeply to inspect") from e
        document.freeze()
        logger.debug("Finished JSON instance inspection: %d top-level fields", len(document.fields))
        return document

    def _handle_value(self, document: SchemaDocument, parent: Optional[ComplexNode], key: str, value: JsonValue, depth: int):
        if value.is_object():
            self._handle_object(document, parent, key, value, depth)
        elif value.is_array():
            self._handle_array(document, parent, key, value, depth)
        else:
            self._create_leaf(document, parent, key, value, depth)

    def _handle_object(
        self,
        document: SchemaDocument,
        parent: Optional[ComplexNode],
        key: str,
        value: JsonValue,
        depth: int,
        is_array: bool = False,
    ) -> ComplexNode:
        logger.debug("Handling object node (array:%s): %s", is_array, key)
        complex_node = self._create_complex(document, parent, key, depth, is_array)
        for sub_key, sub_value in value.fields():
            self._handle_value(document, complex_node, sub_key, sub_value, depth + 1)
        return complex_node

    def _handle_array(self, document: SchemaDocument, parent: Optional[ComplexNode], key: str, value: JsonValue, depth: int):
        logger.debug("Handling array node of %d elements: %s", value.size(), key)
        if value.size() == 0:
            self._diagnose(document, Diagnostic(
                code="empty_array",
                path=build_path(_path_of(parent), key),
                message="Ignoring empty JSON array",
            ))
            return

        representative: Optional[ComplexNode] = None
        for index, element in enumerate(value.elements()):
            if element.is_object():
                # Every element node is attached; the first one also collects
                # the fields of all later elements.
                node = self._handle_object(document, parent, key, element, depth, is_array=True)
                if representative is None:
                    representative = node
                else:
                    representative.extend_children(node.children)
            elif element.is_array():
                raise UnsupportedShapeError(
                    "Nested JSON array is not supported",
                    context={"path": build_path(_path_of(parent), key), "index": index},
                )
            else:
                self._create_leaf(document, parent, key, element, depth, is_array=True)

    def _create_complex(
        self,
        document: SchemaDocument,
        parent: Optional[ComplexNode],
        key: str,
        depth: int,
        is_array: bool,
    ) -> ComplexNode:
        path, collection_type = self._node_path(parent, key, depth, is_array)
        complex_node = create_complex_node(key, path, collection_type)
        self._attach(document, parent, complex_node)
        return complex_node

    def _create_leaf(
        self,
        document: SchemaDocument,
        parent: Optional[ComplexNode],
        key: str,
        value: JsonValue,
        depth: int,
        is_array: bool = False,
    ):
        logger.debug("Creating JSON field (array:%s): %s is a %s", is_array, key, value.kind.value)
        path, collection_type = self._node_path(parent, key, depth, is_array)
        field_type, status = classify(value)
        leaf = create_leaf_node(
            key,
            path,
            collection_type=collection_type,
            status=status,
            field_type=field_type,
            value=sample_value(value) if self.options.include_values else None,
        )
        self._attach(document, parent, leaf)

    def _node_path(self, parent: Optional[ComplexNode], key: str, depth: int, is_array: bool):
        path = build_path(_path_of(parent), key)
        max_depth = self.options.max_depth
        if max_depth is not None and depth > max_depth:
            raise DepthLimitError(
                f"JSON instance exceeds the maximum nesting depth of {max_depth}",
                context={"path": path, "max_depth": max_depth},
            )
        if is_array:
            return collection_path(path), CollectionType.LIST
        return path, CollectionType.NONE

    @staticmethod
    def _attach(document: SchemaDocument, parent: Optional[ComplexNode], node: SchemaNode):
        if parent is not None:
            parent.add_child(node)
        else:
            document.add_field(node)

    def _diagnose(self, document: SchemaDocument, diagnostic: Diagnostic):
        logger.warning("%s: %s", diagnostic.message, diagnostic.path)
        document.add_diagnostic(diagnostic)
        if self.options.on_diagnostic is not None:
            self.options.on_diagnostic(diagnostic)


def _path_of(node: Optional[ComplexNode]) -> Optional[str]:
    return node.path if node is not None else None


def inspect(instance: str | bytes | None, **options) -> SchemaDocument:
    """Inspect a JSON instance with a one-off InstanceInspector."""
    return InstanceInspector(**options).inspect(instance)


def inspect_file(file_path: str | Path, **options) -> SchemaDocument:
    return InstanceInspector(**options).inspect_file(file_path)
