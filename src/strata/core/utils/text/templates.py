"""Jinja2 template rendering.

Templates are rendered from raw strings (the content of a discovered
resource), never from a loader, because the cascade has already decided
which file wins.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from jinja2 import Environment


def build_environment() -> Environment:
    """Return the Jinja2 environment used for every Strata render.

    Templates use control blocks on their own lines; trimming keeps those
    tag-only lines from leaving blank lines behind.
    """
    return Environment(trim_blocks=True, lstrip_blocks=True, autoescape=False)


def render_template_text(
    text: str,
    context: Mapping[str, Any],
    *,
    environment: Optional[Environment] = None,
) -> str:
    """Render ``text`` with ``context``.

    Raises:
        jinja2.TemplateError: On syntax or rendering errors
    """
    env = environment or build_environment()
    return env.from_string(text).render(**dict(context))


__all__ = ["build_environment", "render_template_text"]
