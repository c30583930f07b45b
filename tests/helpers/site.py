"""Site layout builders for tests.

Writes files into a temporary cascade:

    <tmp>/system/...                 system layer
    <tmp>/site/...                   base layer (the site root)
    <tmp>/site/themes/<theme>/...    theme layer
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from strata.core.context import SiteContext, new_context


class SiteBuilder:
    def __init__(self, root: Path, theme: str = "twenty") -> None:
        self.root = Path(root)
        self.system = self.root / "system"
        self.base = self.root / "site"
        self.theme_name = theme
        self.system.mkdir(parents=True, exist_ok=True)
        self.base.mkdir(parents=True, exist_ok=True)

    @property
    def theme(self) -> Path:
        return self.base / "themes" / self.theme_name

    def layer_root(self, layer: str) -> Path:
        return {"system": self.system, "base": self.base, "theme": self.theme}[layer]

    def write(self, layer: str, relpath: str, text: str = "") -> Path:
        path = self.layer_root(layer) / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    def mkdir(self, layer: str, relpath: str) -> Path:
        path = self.layer_root(layer) / relpath
        path.mkdir(parents=True, exist_ok=True)
        return path

    def write_config(self, data: Mapping[str, Any]) -> Path:
        path = self.base / "config.yaml"
        path.write_text(yaml.safe_dump(dict(data), sort_keys=False), encoding="utf-8")
        return path

    def context(self, config: Optional[Dict[str, Any]] = None, **kwargs: Any) -> SiteContext:
        """Build a context; ``config`` bypasses config.yaml loading."""
        return new_context(self.base, config=config, system_root=self.system, **kwargs)


def page(frontmatter: Optional[Mapping[str, Any]] = None, body: str = "") -> str:
    """Render a content file with optional YAML front matter."""
    if not frontmatter:
        return body
    return f"---\n{yaml.safe_dump(dict(frontmatter), sort_keys=False)}---\n{body}"
