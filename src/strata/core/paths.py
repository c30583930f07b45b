"""Cascade layer roots for a site.

A site resolves content from up to three roots, low -> high precedence:

- ``system``: defaults bundled with Strata (``strata/data/system``)
- ``base``:   the site root itself
- ``theme``:  ``<site>/themes/<theme>`` when a theme is configured
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Optional

from strata.core.exceptions import SitePathError
from strata.data import get_system_root

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayerSpec:
    """A single cascade layer root."""

    name: str
    path: Path

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "path": str(self.path)}


@dataclass(frozen=True)
class SitePaths:
    """Resolved layer roots for one site."""

    system: Path
    base: Path
    theme: Optional[Path] = None

    def layers(self) -> List[LayerSpec]:
        """Return the cascade in low -> high precedence order."""
        out = [
            LayerSpec(name="system", path=self.system),
            LayerSpec(name="base", path=self.base),
        ]
        if self.theme:
            out.append(LayerSpec(name="theme", path=self.theme))
        return out

    def layer_by_name(self, name: str) -> Optional[LayerSpec]:
        for layer in self.layers():
            if layer.name == name:
                return layer
        return None

    @classmethod
    def resolve(
        cls,
        site_root: Path,
        config: Mapping[str, Any],
        *,
        system_root: Optional[Path] = None,
    ) -> "SitePaths":
        """Resolve layer roots from the site root and its ``theme`` setting.

        Raises:
            SitePathError: If ``site_root`` is not a directory
        """
        base = Path(site_root).expanduser().resolve()
        if not base.is_dir():
            raise SitePathError(f"Site root not found: {base}", context={"site_root": str(base)})

        system = Path(system_root).resolve() if system_root else get_system_root()

        theme_path: Optional[Path] = None
        theme = config.get("theme")
        if theme:
            candidate = base / "themes" / str(theme)
            if candidate.is_dir():
                theme_path = candidate.resolve()
            else:
                logger.warning("Theme '%s' is configured but %s does not exist", theme, candidate)

        return cls(system=system, base=base, theme=theme_path)


__all__ = ["LayerSpec", "SitePaths"]
