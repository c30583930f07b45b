"""Pages: standalone content files with YAML front matter."""
from __future__ import annotations

from pathlib import PurePosixPath
from typing import Any, Dict, List

from strata.core.utils.text import titleize

from .base import BaseCollection, BaseModel, BaseWatcher
from .registry import ResourceType


class Collection(BaseCollection):
    pass


class Model(BaseModel):
    """One record per page with ``title`` and ``url`` filled in."""

    def slug(self) -> PurePosixPath:
        return PurePosixPath(self.id).with_suffix("")

    def url_parts(self) -> List[str]:
        parts = list(self.slug().parts)
        if parts and parts[-1] == "index":
            parts.pop()
        return parts

    def data(self) -> Dict[str, Any]:
        data = super().data()
        data.setdefault("title", titleize(self.slug().name))
        data["url"] = self.context.to_url(*self.url_parts())
        return data


class Watcher(BaseWatcher):
    pass


RESOURCE = ResourceType.define(Collection, model=Model, watcher=Watcher)
