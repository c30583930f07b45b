"""Text processing utilities.

- core: name inflection (CamelCase to snake_case, slug titles)
- frontmatter: YAML front matter parsing
- templates: Jinja2 rendering of raw template text
"""
from __future__ import annotations

from .core import titleize, underscore
from .frontmatter import ParsedDocument, parse_frontmatter
from .templates import build_environment, render_template_text

__all__ = [
    "underscore",
    "titleize",
    "ParsedDocument",
    "parse_frontmatter",
    "build_environment",
    "render_template_text",
]
