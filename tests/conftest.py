"""
Shared pytest fixtures for the inspector tests.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from instance_inspector import InstanceInspector


@pytest.fixture
def inspector() -> InstanceInspector:
    """An inspector with default options."""
    return InstanceInspector()


@pytest.fixture
def order_document() -> dict[str, Any]:
    """A small order with nested objects, scalar arrays and object arrays."""
    return {
        "id": 7,
        "customer": {"name": "Ada", "vip": True},
        "tags": ["new", "priority"],
        "lines": [
            {"sku": "A-1", "qty": 2},
            {"sku": "B-2", "qty": 1, "note": "gift"},
        ],
        "total": 31.5,
    }


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[Any, str], Path]:
    """Write a JSON document to a temp file and return its path."""

    def _write(data: Any, name: str = "instance.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path

    return _write
