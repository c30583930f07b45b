"""Utility helpers for Strata core.

This package provides:
- io/: YAML reading
- text/: name inflection, front matter parsing, template rendering
- merge: the cascade, config and widget merge orders
"""
from __future__ import annotations

from .merge import cascade_merge, deep_merge, merge_arrays, merge_widget_vars

__all__ = ["cascade_merge", "deep_merge", "merge_arrays", "merge_widget_vars"]
