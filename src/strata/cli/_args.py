"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_site_root_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--site-root",
        type=str,
        help="Site root directory (default: current directory)",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add --json and --site-root."""
    add_json_flag(parser)
    add_site_root_flag(parser)
