"""
Schema model produced by the inspector.

A SchemaDocument owns an ordered list of top-level nodes. ComplexNode
represents an object-shaped field and owns its children; LeafNode represents
a scalar field and carries its type tag. Once the inspector returns, the
document is frozen and every node becomes read-only.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generator, Iterable, List, Optional, Tuple, Union

from rich.console import Console

from .errors import FrozenDocumentError

console = Console()


class FieldType(Enum):
    INTEGER = "INTEGER"
    LONG = "LONG"
    BIG_INTEGER = "BIG_INTEGER"
    SHORT = "SHORT"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    DECIMAL = "DECIMAL"
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"
    COMPLEX = "COMPLEX"


class FieldStatus(Enum):
    SUPPORTED = "SUPPORTED"
    UNSUPPORTED = "UNSUPPORTED"


class CollectionType(Enum):
    NONE = "NONE"
    LIST = "LIST"


@dataclass(frozen=True)
class Diagnostic:
    """Advisory event raised during inspection, e.g. an ignored empty array."""
    code: str
    path: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"code": self.code, "path": self.path, "message": self.message}


class _Frozen:
    _frozen = False

    def __setattr__(self, name, value):
        if self._frozen:
            raise FrozenDocumentError(f"Cannot set {name!r} on a frozen schema object", context={"attribute": name})
        super().__setattr__(name, value)

    def _freeze(self):
        object.__setattr__(self, "_frozen", True)


@dataclass(eq=False)
class LeafNode(_Frozen):
    name: str
    path: str
    collection_type: CollectionType = CollectionType.NONE
    status: FieldStatus = FieldStatus.SUPPORTED
    field_type: Optional[FieldType] = None
    value: Any = None

    is_complex = False

    def freeze(self):
        self._freeze()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "collectionType": self.collection_type.value,
            "status": self.status.value,
            "fieldType": self.field_type.value if self.field_type else None,
            "value": self.value,
        }


@dataclass(eq=False)
class ComplexNode(_Frozen):
    name: str
    path: str
    collection_type: CollectionType = CollectionType.NONE
    status: FieldStatus = FieldStatus.SUPPORTED
    children: Union[List["SchemaNode"], Tuple["SchemaNode", ...]] = field(default_factory=list)

    is_complex = True
    field_type = FieldType.COMPLEX

    def add_child(self, node: "SchemaNode"):
        if self._frozen:
            raise FrozenDocumentError(f"Cannot add a child to frozen node {self.path!r}", context={"path": self.path})
        self.children.append(node)

    def extend_children(self, nodes: Iterable["SchemaNode"]):
        """Append nodes to the child list as-is; same-named entries are kept side by side."""
        if self._frozen:
            raise FrozenDocumentError(f"Cannot add children to frozen node {self.path!r}", context={"path": self.path})
        self.children.extend(nodes)

    def freeze(self):
        for child in self.children:
            child.freeze()
        object.__setattr__(self, "children", tuple(self.children))
        self._freeze()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "collectionType": self.collection_type.value,
            "status": self.status.value,
            "fieldType": FieldType.COMPLEX.value,
            "fields": [child.to_dict() for child in self.children],
        }


SchemaNode = Union[ComplexNode, LeafNode]


@dataclass(eq=False)
class SchemaDocument(_Frozen):
    fields: Union[List[SchemaNode], Tuple[SchemaNode, ...]] = field(default_factory=list)
    diagnostics: Union[List[Diagnostic], Tuple[Diagnostic, ...]] = field(default_factory=list)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add_field(self, node: SchemaNode):
        if self.frozen:
            raise FrozenDocumentError("Cannot add a field to a frozen schema document")
        self.fields.append(node)

    def add_diagnostic(self, diagnostic: Diagnostic):
        if self.frozen:
            raise FrozenDocumentError("Cannot add a diagnostic to a frozen schema document")
        self.diagnostics.append(diagnostic)

    def freeze(self):
        """Make the document and every node in it read-only."""
        if self.frozen:
            return
        for node in self.fields:
            node.freeze()
        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(self, "diagnostics", tuple(self.diagnostics))
        self._freeze()

    def walk(self) -> Generator[Tuple[int, SchemaNode], None, None]:
        """
        Yields ``(depth, node)`` pairs depth-first in pre-order.
        Top-level nodes have depth 0.
        """
        stack = [(0, node) for node in reversed(self.fields)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            if node.is_complex:
                stack.extend((depth + 1, child) for child in reversed(node.children))

    def iter_nodes(self) -> Generator[SchemaNode, None, None]:
        for _depth, node in self.walk():
            yield node

    def find(self, path: str) -> List[SchemaNode]:
        """All nodes with the given path; array-unwrapped siblings may share one."""
        return [node for node in self.iter_nodes() if node.path == path]

    def rows(self) -> List[Dict[str, Any]]:
        """Flat listing of every node, one dict per node."""
        rows = []
        for depth, node in self.walk():
            rows.append({
                "path": node.path,
                "name": node.name,
                "depth": depth,
                "field_type": node.field_type.value if node.field_type else None,
                "collection_type": node.collection_type.value,
                "status": node.status.value,
                "value": None if node.is_complex else node.value,
            })
        return rows

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fields": [node.to_dict() for node in self.fields],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }

    def to_dataframe(self):
        """
        Returns the flat node listing as a pandas DataFrame.
        Requires pandas; returns None when it is not installed.
        """
        try:
            import pandas as pd
        except ImportError:
            console.print("[bold red]pandas is required for DataFrame conversion. Install with: pip install pandas[/bold red]")
            return None
        return pd.DataFrame(self.rows(), columns=["path", "name", "depth", "field_type", "collection_type", "status", "value"])


def create_document() -> SchemaDocument:
    return SchemaDocument()


def create_complex_node(name: str, path: str, collection_type: CollectionType = CollectionType.NONE) -> ComplexNode:
    return ComplexNode(name=name, path=path, collection_type=collection_type, status=FieldStatus.SUPPORTED)


def create_leaf_node(
    name: str,
    path: str,
    collection_type: CollectionType = CollectionType.NONE,
    status: FieldStatus = FieldStatus.SUPPORTED,
    field_type: Optional[FieldType] = None,
    value: Any = None,
) -> LeafNode:
    return LeafNode(
        name=name,
        path=path,
        collection_type=collection_type,
        status=status,
        field_type=field_type,
        value=value,
    )
