"""YAML front matter parsing.

Content files may start with a YAML mapping delimited by ``---`` lines:

    ---
    title: About
    layout: page
    ---

    Body text
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict

import yaml


FRONTMATTER_PATTERN = re.compile(
    r"^---\s*\n(.*?)\n---\s*\n?",
    re.DOTALL,
)


@dataclass
class ParsedDocument:
    """Result of parsing a document with YAML front matter.

    Attributes:
        frontmatter: Parsed YAML front matter as a dictionary
        content: The body after the front matter
        raw_frontmatter: The raw YAML string (for debugging)
    """
    frontmatter: Dict[str, Any]
    content: str
    raw_frontmatter: str


def parse_frontmatter(content: str) -> ParsedDocument:
    """Split YAML front matter from ``content``.

    Documents without front matter yield an empty mapping and the full text.

    Raises:
        ValueError: If the front matter is not valid YAML or not a mapping

    Example:
        >>> doc = parse_frontmatter("---\\ntitle: About\\n---\\nHello")
        >>> doc.frontmatter["title"]
        'About'
        >>> doc.content
        'Hello'
    """
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return ParsedDocument(frontmatter={}, content=content, raw_frontmatter="")

    raw_yaml = match.group(1)
    remaining = content[match.end():]

    try:
        parsed = yaml.safe_load(raw_yaml)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in front matter: {e}") from e
    if parsed is None:
        parsed = {}
    if not isinstance(parsed, dict):
        raise ValueError(f"Front matter must be a YAML mapping, got {type(parsed).__name__}")

    return ParsedDocument(frontmatter=parsed, content=remaining, raw_frontmatter=raw_yaml)


__all__ = ["ParsedDocument", "parse_frontmatter"]
