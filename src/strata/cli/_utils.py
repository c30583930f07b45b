"""Shared CLI utility functions."""
from __future__ import annotations

import argparse
from pathlib import Path

from strata.core.context import SiteContext, new_context


def get_site_root(args: argparse.Namespace) -> Path:
    """Site root from ``--site-root``, else the current directory."""
    raw = getattr(args, "site_root", None)
    return Path(raw).resolve() if raw else Path.cwd()


def build_context(args: argparse.Namespace) -> SiteContext:
    return new_context(get_site_root(args), validate=True)
