"""Waterfall CLI entry points.
This module exposes commands that compute bar ranges from entry files.
It maps argparse commands onto reader, transform, and export calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Any, Sequence

from core.config import WaterfallConfig
from core.logging_config import get_logger
from core.sample_data import DEMO_ENTRIES
from core.types import RawEntry
from ingest.entry_reader import read_raw_entries
from store.range_export import format_range_rows, write_ranges_file
from transforms.waterfall_ranges import compute_waterfall_ranges

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="waterfall",
        description="Compute waterfall chart bar ranges",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_compute_command(subparsers)
    _add_demo_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the waterfall CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = WaterfallConfig.from_env()
    if args.command == "compute":
        return _run_compute_command(config, args)
    if args.command == "demo":
        return _run_demo_command(config, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_compute_command(config: WaterfallConfig, args: argparse.Namespace) -> int:
    """Handle compute command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    if args.allow_non_finite:
        config = replace(config, strict_values=False)
    entries = read_raw_entries(args.source, config)
    return _emit_ranges(entries, config, args.output)


def _run_demo_command(config: WaterfallConfig, args: argparse.Namespace) -> int:
    """Handle demo command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    return _emit_ranges(DEMO_ENTRIES, config, args.output)


def _emit_ranges(
    entries: Sequence[RawEntry],
    config: WaterfallConfig,
    output_path: str | None,
) -> int:
    """Compute ranges and print rows or write a JSON file.

    Args:
        entries: Raw entries in display order.
        config: Runtime configuration.
        output_path: Optional JSON destination.

    Returns:
        Exit code.
    """
    data = compute_waterfall_ranges(entries)
    _LOGGER.info("ranges_computed", entry_count=len(data))
    if output_path:
        print(write_ranges_file(output_path, data, indent=config.json_indent))
        return 0
    for row in format_range_rows(data):
        print(row)
    return 0


def _add_compute_command(subparsers: Any) -> None:
    """Register compute subcommand."""
    parser = subparsers.add_parser("compute", help="Compute ranges for an entry file")
    parser.add_argument("source", help="JSON, JSONL, or YAML entry file")
    parser.add_argument("--output", help="Optional JSON output file")
    parser.add_argument(
        "--allow-non-finite",
        action="store_true",
        help="Pass NaN and infinite values through instead of rejecting them",
    )


def _add_demo_command(subparsers: Any) -> None:
    """Register demo subcommand."""
    parser = subparsers.add_parser("demo", help="Compute ranges for the built-in example")
    parser.add_argument("--output", help="Optional JSON output file")
