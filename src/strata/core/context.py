"""Site context: the explicitly constructed owner of per-site state.

Everything the resolver needs is reached through a ``SiteContext``: the
layer paths, the merged configuration, the resource registry, the
generated-dictionary cache and the generation reporter. Nothing is kept in
module globals, so tests build a context per site and call ``reset()``
between scenarios.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from jinja2 import Environment

from strata.core.config import ConfigManager
from strata.core.paths import SitePaths
from strata.core.resources.base import BaseCollection, BaseCollectionView, BaseWatcher
from strata.core.resources.cache import ResourceCache
from strata.core.resources.registry import ResourceRegistry
from strata.core.resources.report import GenerationReporter
from strata.core.utils.text import build_environment
from strata.core.views import MasterView

logger = logging.getLogger(__name__)


@dataclass
class SiteContext:
    paths: SitePaths
    config: Dict[str, Any]
    resources: ResourceRegistry = field(default_factory=ResourceRegistry.default)
    cache: ResourceCache = field(default_factory=ResourceCache)
    reporter: GenerationReporter = field(default_factory=GenerationReporter)
    environment: Environment = field(default_factory=build_environment)

    def collection(self, name: str) -> BaseCollection:
        return self.resources.collection(name)(self)

    def collection_view(self, name: str, master: Optional[MasterView] = None) -> BaseCollectionView:
        resource_type = self.resources.get(name)
        view_cls = resource_type.view or BaseCollectionView
        return view_cls(resource_type.collection(self), master)

    def watchers(self) -> List[BaseWatcher]:
        """One watcher per registered resource type that declares one."""
        return [
            resource_type.watcher(resource_type.collection(self))
            for resource_type in self.resources.types()
            if resource_type.watcher is not None
        ]

    def master_view(self, content: str = "", page_data: Optional[Mapping[str, Any]] = None) -> MasterView:
        return MasterView(self, page_data=page_data, content=content)

    def to_url(self, *parts: Any) -> str:
        """Join ``parts`` under the configured ``base_url``.

        Example:
            ``to_url("widgets", "sidebar")`` -> ``"/widgets/sidebar"``
        """
        base_url = str(self.config.get("base_url") or "/").rstrip("/")
        segments = [str(p).strip("/") for p in parts if p is not None and str(p).strip("/")]
        return f"{base_url}/{'/'.join(segments)}"

    def reset(self) -> None:
        """Drop every cached dictionary and report."""
        self.cache.clear_all()
        self.reporter.clear()


def new_context(
    site_root: Path,
    *,
    config: Optional[Mapping[str, Any]] = None,
    system_root: Optional[Path] = None,
    resources: Optional[ResourceRegistry] = None,
    validate: bool = False,
) -> SiteContext:
    """Build a ``SiteContext`` for the site at ``site_root``.

    Args:
        site_root: The site's own content root (the ``base`` layer)
        config: Use this configuration instead of loading ``config.yaml``
        system_root: Override the bundled ``system`` layer
        resources: Use this registry instead of the built-in resource types
        validate: Check the loaded configuration against the bundled schema
    """
    site_root = Path(site_root)
    cfg = dict(config) if config is not None else ConfigManager(site_root).load_config(validate=validate)
    paths = SitePaths.resolve(site_root, cfg, system_root=system_root)
    logger.debug("site context: %s", [layer.to_dict() for layer in paths.layers()])
    return SiteContext(
        paths=paths,
        config=cfg,
        resources=resources if resources is not None else ResourceRegistry.default(),
    )


__all__ = ["SiteContext", "new_context"]
