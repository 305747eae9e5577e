"""
Command-line interface for converting data source definitions.

Usage:
    python -m feature_sources.cli.source_cli to-row --spec-file <path> [--name <source>]
    python -m feature_sources.cli.source_cli to-spec --row-file <path> [--strict]
    python -m feature_sources.cli.source_cli compare --spec-file <path> --left <a> --right <b>
"""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from feature_sources.core.errors import DataSourceError
from feature_sources.core.loader import DataSourceConfigLoader
from feature_sources.core.models import DataSource, DataSourceRow
from feature_sources.observability.logger import get_logger, log_operation


logger = get_logger(__name__)

EXIT_NOT_EQUAL = 2


def to_row_command(args) -> int:
    """
    Convert data sources from a YAML spec file into storage rows.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    with log_operation("Converting specs to rows", logger=logger, spec_file=args.spec_file):
        loader = DataSourceConfigLoader(args.spec_file)
        if args.name:
            specs = {args.name: loader.load_source(args.name)}
        else:
            specs = loader.load_sources()

        rows = {
            name: DataSource.from_spec(spec).to_row().model_dump(mode="json")
            for name, spec in specs.items()
        }

    print(json.dumps(rows, indent=2, sort_keys=True))
    return 0


def to_spec_command(args) -> int:
    """
    Convert a JSON storage row into its wire representation.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    with log_operation("Converting row to spec", logger=logger, row_file=args.row_file):
        row = DataSourceRow.model_validate_json(Path(args.row_file).read_text())
        spec = DataSource.from_row(row).to_spec(strict=args.strict or None)

    print(spec.model_dump_json(indent=2, exclude_none=True))
    return 0


def compare_command(args) -> int:
    """
    Report whether two named data sources describe the same source.

    Args:
        args: Command-line arguments

    Returns:
        0 if equal, EXIT_NOT_EQUAL otherwise
    """
    loader = DataSourceConfigLoader(args.spec_file)
    left = DataSource.from_spec(loader.load_source(args.left))
    right = DataSource.from_spec(loader.load_source(args.right))

    if left == right:
        print(f"{args.left} and {args.right} are equal")
        return 0

    print(f"{args.left} and {args.right} differ")
    return EXIT_NOT_EQUAL


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Data source descriptor conversions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print storage rows for every source in a file
  python -m feature_sources.cli.source_cli to-row --spec-file config/sources.yaml

  # Print the wire form of a stored row, failing on missing option keys
  python -m feature_sources.cli.source_cli to-spec --row-file row.json --strict

  # Check whether two definitions are the same source
  python -m feature_sources.cli.source_cli compare --spec-file config/sources.yaml \\
      --left clicks --right clicks_v2
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    to_row_parser = subparsers.add_parser("to-row", help="Convert YAML specs to storage rows")
    to_row_parser.add_argument(
        "--spec-file",
        required=True,
        help="Path to data source YAML file"
    )
    to_row_parser.add_argument(
        "--name",
        help="Only convert this source (default: all)"
    )

    to_spec_parser = subparsers.add_parser("to-spec", help="Convert a JSON storage row to a spec")
    to_spec_parser.add_argument(
        "--row-file",
        required=True,
        help="Path to JSON file holding one storage row"
    )
    to_spec_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when stored options are missing keys"
    )

    compare_parser = subparsers.add_parser("compare", help="Compare two data sources")
    compare_parser.add_argument(
        "--spec-file",
        required=True,
        help="Path to data source YAML file"
    )
    compare_parser.add_argument("--left", required=True, help="First source name")
    compare_parser.add_argument("--right", required=True, help="Second source name")

    return parser


COMMANDS = {
    "to-row": to_row_command,
    "to-spec": to_spec_command,
    "compare": compare_command,
}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return COMMANDS[args.command](args)
    except (DataSourceError, ValidationError, ValueError, KeyError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
