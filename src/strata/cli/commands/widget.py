"""
Strata widget command.

SUMMARY: Render one widget

Renders a widget with the site configuration, optionally in the context of
a page so its ``widgets`` front matter applies.
"""

from __future__ import annotations

import argparse

from strata.cli import OutputFormatter, add_standard_flags, build_context
from strata.core.exceptions import ResourceNotFoundError, StrataError

SUMMARY = "Render one widget"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("name", help="Widget name (e.g., 'comments')")
    parser.add_argument(
        "--page",
        help="Page id whose front matter overrides widget config (e.g., 'about.md')",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        context = build_context(args)
        page_data = None
        if args.page:
            page_data = context.collection("pages").all().get(args.page)
            if page_data is None:
                raise ResourceNotFoundError(f"pages/{args.page}")

        master = context.master_view("", page_data=page_data)
        view = context.collection_view("widgets", master=master)
        rendered = view.widget(args.name)

        formatter.success(
            {"widget": args.name, "page": args.page, "html": rendered},
            rendered,
        )
        return 0
    except StrataError as e:
        formatter.error(e, error_code="widget_error")
        return 1
