"""
Tests for the schema document model.
"""

from __future__ import annotations

import pytest

from instance_inspector import InstanceInspector
from instance_inspector.errors import FrozenDocumentError
from instance_inspector.model import (
    CollectionType,
    Diagnostic,
    FieldType,
    SchemaDocument,
    create_complex_node,
    create_document,
    create_leaf_node,
)


@pytest.fixture
def document() -> SchemaDocument:
    return InstanceInspector().inspect('{"id": 1, "o": {"a": "x", "l": [true]}, "z": null}')


class TestTraversal:
    """Walking and searching a document."""

    def test_walk_is_preorder(self, document: SchemaDocument) -> None:
        """Parents come before their children, siblings in order."""
        assert [(depth, node.path) for depth, node in document.walk()] == [
            (0, "/id"),
            (0, "/o"),
            (1, "/o/a"),
            (1, "/o/l<>"),
            (0, "/z"),
        ]

    def test_find(self, document: SchemaDocument) -> None:
        """find() returns every node with the path."""
        (node,) = document.find("/o/l<>")

        assert node.field_type is FieldType.BOOLEAN
        assert document.find("/missing") == []

    def test_rows(self, document: SchemaDocument) -> None:
        """rows() flattens every node."""
        rows = document.rows()

        assert len(rows) == 5
        assert rows[1] == {
            "path": "/o",
            "name": "o",
            "depth": 0,
            "field_type": "COMPLEX",
            "collection_type": "NONE",
            "status": "SUPPORTED",
            "value": None,
        }
        assert rows[4]["field_type"] is None


class TestSerialization:
    """Dictionary and DataFrame views."""

    def test_to_dict(self, document: SchemaDocument) -> None:
        """to_dict() nests complex fields."""
        data = document.to_dict()

        assert data["diagnostics"] == []
        o = data["fields"][1]
        assert o["fieldType"] == "COMPLEX"
        assert [f["path"] for f in o["fields"]] == ["/o/a", "/o/l<>"]
        assert o["fields"][1]["collectionType"] == "LIST"

    def test_diagnostics_in_dict(self) -> None:
        """Diagnostics serialize alongside fields."""
        data = InstanceInspector().inspect('{"e": []}').to_dict()

        assert data == {
            "fields": [],
            "diagnostics": [{"code": "empty_array", "path": "/e", "message": "Ignoring empty JSON array"}],
        }

    def test_to_dataframe(self, document: SchemaDocument) -> None:
        """to_dataframe() has one row per node."""
        pytest.importorskip("pandas")

        df = document.to_dataframe()

        assert list(df["path"]) == ["/id", "/o", "/o/a", "/o/l<>", "/z"]
        assert list(df.columns) == ["path", "name", "depth", "field_type", "collection_type", "status", "value"]


class TestBuilding:
    """Factory functions and freezing."""

    def test_factory_and_freeze(self) -> None:
        """A hand-built document freezes recursively."""
        doc = create_document()
        parent = create_complex_node("p", "/p", CollectionType.NONE)
        parent.add_child(create_leaf_node("c", "/p/c", field_type=FieldType.STRING, value="v"))
        doc.add_field(parent)
        doc.add_diagnostic(Diagnostic("note", "/p", "hand built"))

        doc.freeze()
        doc.freeze()

        assert isinstance(doc.fields, tuple)
        assert isinstance(parent.children, tuple)
        with pytest.raises(FrozenDocumentError):
            parent.extend_children([])
        with pytest.raises(FrozenDocumentError):
            doc.add_diagnostic(Diagnostic("late", "/", "too late"))

    def test_extend_keeps_duplicates(self) -> None:
        """Appending same-named nodes keeps them all."""
        parent = create_complex_node("p", "/p")
        parent.add_child(create_leaf_node("a", "/p/a"))
        parent.extend_children([create_leaf_node("a", "/p/a"), create_leaf_node("b", "/p/b")])

        assert [child.name for child in parent.children] == ["a", "a", "b"]
