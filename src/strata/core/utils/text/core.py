"""Name inflection helpers."""
from __future__ import annotations

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def underscore(name: str) -> str:
    """Convert a CamelCase (or dotted/hyphenated) name to snake_case.

    Example:
        >>> underscore("BlogPosts")
        'blog_posts'
        >>> underscore("HTMLWidgets")
        'html_widgets'
        >>> underscore("posts")
        'posts'
    """
    word = str(name).replace("::", "/")
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
    word = _WORD_BOUNDARY.sub(r"\1_\2", word)
    word = word.replace("-", "_")
    return word.lower()


def titleize(slug: str) -> str:
    """Turn a file slug into a human readable title.

    Example:
        >>> titleize("hello-world_again")
        'Hello World Again'
    """
    words = re.split(r"[-_\s]+", str(slug).strip())
    return " ".join(w.capitalize() for w in words if w)


__all__ = ["underscore", "titleize"]
