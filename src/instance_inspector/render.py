"""
Presentation of schema documents: rich trees and tables for the terminal,
JSON and YAML text for export.
"""

import json
from decimal import Decimal
from typing import Any, Optional

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from .model import FieldStatus, SchemaDocument, SchemaNode

console = Console()


def _type_label(node: SchemaNode) -> str:
    if node.field_type is None:
        return "-"
    return node.field_type.value


def _node_label(node: SchemaNode) -> str:
    label = f"[cyan]{escape(node.name) or '(root)'}[/cyan] [magenta]{_type_label(node)}[/magenta] [dim]{escape(node.path)}[/dim]"
    if node.status is FieldStatus.UNSUPPORTED:
        label += " [red]unsupported[/red]"
    return label


def schema_tree(document: SchemaDocument, title: str = "Inferred Schema") -> Tree:
    tree = Tree(f"[bold]{escape(title)}[/bold]")

    def _add(branch, nodes):
        for node in nodes:
            child = branch.add(_node_label(node))
            if node.is_complex:
                _add(child, node.children)

    _add(tree, document.fields)
    return tree


def schema_table(document: SchemaDocument, title: str = "Inferred Schema") -> Table:
    table = Table(title=title)
    table.add_column("Path", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Type", style="magenta")
    table.add_column("Collection", style="green")
    table.add_column("Status", style="yellow")
    table.add_column("Value", style="white")

    for row in document.rows():
        table.add_row(
            escape(row["path"]),
            escape(row["name"]),
            row["field_type"] or "-",
            row["collection_type"],
            row["status"],
            escape(str(row["value"])) if row["value"] is not None else "",
        )
    return table


def print_schema(document: SchemaDocument, title: str = "Inferred Schema", target: Optional[Console] = None):
    """Print the schema tree followed by any diagnostics."""
    out = target or console
    out.print(schema_tree(document, title))
    for diagnostic in document.diagnostics:
        out.print(f"[yellow]{escape(diagnostic.message)}: {escape(diagnostic.path)}[/yellow]")


def _plain(value: Any) -> Any:
    """Make to_dict() output safe for yaml.safe_dump."""
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    if isinstance(value, Decimal):
        return str(value)
    return value


def to_json(document: SchemaDocument, indent: Optional[int] = 2) -> str:
    return json.dumps(document.to_dict(), indent=indent, default=str)


def to_yaml(document: SchemaDocument) -> str:
    return yaml.safe_dump(_plain(document.to_dict()), default_flow_style=False, sort_keys=False)
