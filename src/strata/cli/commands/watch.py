"""
Strata watch command.

SUMMARY: Watch the cascade and invalidate cached resources

Polls every layer root for changes and dispatches each changed path to the
resource watchers.
"""

from __future__ import annotations

import argparse

from strata.cli import OutputFormatter, add_standard_flags, build_context
from strata.core.exceptions import StrataError
from strata.core.watch import ChangeNotifier, PollingObserver, watch

SUMMARY = "Watch the cascade and invalidate cached resources"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "--interval",
        type=float,
        default=1.0,
        help="Seconds between polls (default: 1.0)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Stop after this many polls (default: run until interrupted)",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        context = build_context(args)
        notifier = ChangeNotifier.for_context(context)
        observer = PollingObserver(layer.path for layer in context.paths.layers())

        def _report(changed):
            if not formatter.json_mode:
                for path in changed:
                    formatter.text(f"changed: {path}")

        try:
            seen = watch(
                notifier,
                observer,
                interval=args.interval,
                iterations=args.iterations,
                on_change=_report,
            )
        except KeyboardInterrupt:
            return 0

        formatter.success({"changed": seen}, f"{seen} change(s) seen")
        return 0
    except StrataError as e:
        formatter.error(e, error_code="watch_error")
        return 1
