"""
Strata generate command.

SUMMARY: Resolve one resource across the cascade

Runs the cascade resolver for a resource and prints the resulting ids, or
the full dictionary with ``--json``.
"""

from __future__ import annotations

import argparse

from strata.cli import OutputFormatter, add_standard_flags, build_context
from strata.core.exceptions import StrataError

SUMMARY = "Resolve one resource across the cascade"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "resource",
        help="Registered resource name (e.g., 'pages', 'widgets')",
    )
    parser.add_argument(
        "--id",
        dest="ids",
        action="append",
        help="Only resolve this id (repeatable)",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        context = build_context(args)
        collection = context.collection(args.resource)
        dictionary = collection.generate(args.ids)

        if formatter.json_mode:
            formatter.json_output(dictionary)
        else:
            report = context.reporter.latest(collection.registered_name)
            lines = sorted(dictionary.keys())
            if report is not None:
                lines.append(report.summary())
            formatter.text("\n".join(lines))
        return 0
    except StrataError as e:
        formatter.error(e, error_code="generate_error")
        return 1
