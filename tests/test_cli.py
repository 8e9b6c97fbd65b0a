"""
Tests for the command-line interface.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from instance_inspector import __version__
from instance_inspector.cli import main


class TestCommands:
    """Successful runs."""

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Running without a command shows usage."""
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--version prints the package version."""
        assert main(["--version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_schema(self, write_json, order_document, capsys: pytest.CaptureFixture[str]) -> None:
        """schema prints the tree for each file."""
        first = write_json(order_document, "a.json")
        second = write_json([{"k": 1}], "b.json")

        assert main(["schema", str(first), str(second)]) == 0
        out = capsys.readouterr().out
        assert "/customer/name" in out
        assert "/<>/k" in out

    def test_fields_csv(self, write_json, order_document, tmp_path: Path) -> None:
        """fields --csv writes one row per node."""
        pytest.importorskip("pandas")
        source = write_json(order_document)
        csv_path = tmp_path / "fields.csv"

        assert main(["fields", str(source), "--csv", str(csv_path)]) == 0
        lines = csv_path.read_text().splitlines()
        assert lines[0] == "path,name,depth,field_type,collection_type,status,value"
        assert any(line.startswith("/lines<>/note,") for line in lines)

    def test_export_yaml_from_suffix(self, write_json, tmp_path: Path) -> None:
        """export picks YAML for .yaml outputs."""
        source = write_json({"n": 1})
        output = tmp_path / "schema.yaml"

        assert main(["export", str(source), "-o", str(output)]) == 0
        data = yaml.safe_load(output.read_text())
        assert data["fields"][0]["path"] == "/n"

    def test_export_json_with_options(self, write_json, tmp_path: Path) -> None:
        """export honours --format, --float-mode and --no-values."""
        source = write_json({"price": 2.5})
        output = tmp_path / "schema.out"

        assert main(["export", str(source), "-o", str(output), "--format", "json",
                     "--float-mode", "decimal", "--no-values"]) == 0
        data = json.loads(output.read_text())
        assert data["fields"][0]["fieldType"] == "DECIMAL"
        assert data["fields"][0]["value"] is None


class TestFailures:
    """Runs that exit non-zero."""

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing file is reported."""
        assert main(["schema", str(tmp_path / "nope.json")]) == 1
        assert "File not found" in capsys.readouterr().out

    def test_nested_array(self, write_json, capsys: pytest.CaptureFixture[str]) -> None:
        """Inspection errors report their code."""
        source = write_json({"x": [[1]]})

        assert main(["schema", str(source)]) == 1
        assert "unsupported_shape" in capsys.readouterr().out

    def test_verbose_logs_error_fields(self, write_json, capsys: pytest.CaptureFixture[str]) -> None:
        """--verbose logs the structured fields of an inspection error."""
        source = write_json({"x": [[1]]})

        assert main(["--verbose", "schema", str(source)]) == 1
        assert "error_code" in capsys.readouterr().out

    def test_depth_limit(self, write_json) -> None:
        """--max-depth is enforced."""
        source = write_json({"a": {"b": 1}})

        assert main(["schema", str(source), "--max-depth", "1"]) == 1

    def test_scalar_root(self, tmp_path: Path) -> None:
        """Scalar documents are rejected."""
        source = tmp_path / "scalar.json"
        source.write_text("42")

        assert main(["fields", str(source)]) == 1
