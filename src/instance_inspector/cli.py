"""
Command-line interface for the JSON instance inspector.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from tqdm import tqdm

console = Console()
logger = logging.getLogger(__name__)


def _add_inspection_options(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--float-mode",
        choices=["double", "decimal"],
        default="double",
        help="How to decode non-integral numbers (default: double)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Fail on documents nested deeper than this many levels",
    )
    parser.add_argument(
        "--no-values",
        action="store_true",
        help="Do not keep example values on leaf fields",
    )


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="instance-inspector",
        description="Infer a field schema from an example JSON document",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log each step of the inspection",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Schema command
    schema_parser = subparsers.add_parser("schema", help="Inspect and print the schema tree")
    schema_parser.add_argument("files", nargs="+", help="JSON documents to inspect, each on its own")
    _add_inspection_options(schema_parser)

    # Fields command
    fields_parser = subparsers.add_parser("fields", help="List every inferred field in a table")
    fields_parser.add_argument("file", help="JSON document to inspect")
    fields_parser.add_argument(
        "--csv",
        dest="csv_path",
        help="Also write the field listing to this CSV file (requires pandas)",
    )
    _add_inspection_options(fields_parser)

    # Export command
    export_parser = subparsers.add_parser("export", help="Write the schema as JSON or YAML")
    export_parser.add_argument("file", help="JSON document to inspect")
    export_parser.add_argument(
        "-o", "--output",
        required=True,
        help="Output file path",
    )
    export_parser.add_argument(
        "-f", "--format",
        choices=["json", "yaml"],
        default=None,
        help="Output format (default: from the output file suffix, else json)",
    )
    _add_inspection_options(export_parser)

    args = parser.parse_args(argv)

    if args.version:
        from instance_inspector import __version__
        console.print(f"json-instance-inspector version {__version__}")
        return 0

    if not args.command:
        parser.print_help()
        return 0

    _configure_logging(args.verbose)

    from instance_inspector import InspectionError, InstanceInspector
    from instance_inspector.render import print_schema, schema_table, to_json, to_yaml

    try:
        inspector = InstanceInspector(
            float_mode=args.float_mode,
            max_depth=args.max_depth,
            include_values=not args.no_values,
        )

        if args.command == "schema":
            for file_path in tqdm(args.files, desc="Inspecting", unit=" files", disable=len(args.files) < 2):
                document = inspector.inspect_file(file_path)
                print_schema(document, title=str(file_path), target=console)

        elif args.command == "fields":
            document = inspector.inspect_file(args.file)
            console.print(schema_table(document, title=str(args.file)))
            if args.csv_path:
                df = document.to_dataframe()
                if df is None:
                    return 1
                df.to_csv(args.csv_path, index=False)
                console.print(f"[bold green]Wrote {len(df)} fields to {args.csv_path}[/bold green]")

        elif args.command == "export":
            document = inspector.inspect_file(args.file)
            output = Path(args.output)
            fmt = args.format
            if fmt is None:
                fmt = "yaml" if output.suffix.lower() in (".yaml", ".yml") else "json"
            text = to_yaml(document) if fmt == "yaml" else to_json(document)
            with open(output, "w") as f:
                f.write(text)
            console.print(f"[bold green]Exported schema to {output}[/bold green]")

    except InspectionError as e:
        logger.debug("Inspection failed: %s", e.as_log_fields())
        console.print(f"[bold red]Error ({e.code}): {e.message}[/bold red]")
        return 1
    except OSError as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
