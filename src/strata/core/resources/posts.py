"""Posts: dated pages.

A post's date comes from its ``date`` front matter key, else from a
``YYYY-MM-DD-`` filename prefix; the prefix is dropped from the URL.
"""
from __future__ import annotations

import datetime as dt
import logging
import re
from typing import Any, Dict, List, Optional

from . import pages
from .base import BaseCollection, BaseCollectionView, BaseWatcher
from .registry import ResourceType

logger = logging.getLogger(__name__)

_DATED_NAME = re.compile(r"^(\d{4})-(\d{2})-(\d{2})-(.+)$")


class Collection(BaseCollection):
    pass


class Model(pages.Model):
    def _dated_name(self) -> Optional[re.Match[str]]:
        return _DATED_NAME.match(super().slug().name)

    def slug(self):
        match = self._dated_name()
        base = super().slug()
        return base.with_name(match.group(4)) if match else base

    def date(self) -> Optional[dt.date]:
        value = self.parse().frontmatter.get("date")
        if isinstance(value, dt.datetime):
            return value.date()
        if isinstance(value, dt.date):
            return value
        if isinstance(value, str):
            try:
                return dt.date.fromisoformat(value.strip()[:10])
            except ValueError:
                logger.warning("%s: unparseable date %r", self.realpath, value)
        match = self._dated_name()
        if match:
            try:
                return dt.date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
            except ValueError:
                logger.warning("%s: invalid date in filename", self.realpath)
        return None

    def url_parts(self) -> List[str]:
        return [self.pointer.get("resource") or "posts", *super().url_parts()]

    def data(self) -> Dict[str, Any]:
        data = super().data()
        data["date"] = self.date()
        return data


class Watcher(BaseWatcher):
    pass


class CollectionView(BaseCollectionView):
    exposed = (*BaseCollectionView.exposed, "latest")

    def latest(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Posts ordered newest first; undated posts sort last."""
        records = [r for r in self.all().values() if isinstance(r, dict)]
        records.sort(key=lambda r: (r.get("date") is not None, r.get("date") or dt.date.min, r.get("id", "")), reverse=True)
        return records[:limit] if limit is not None else records


RESOURCE = ResourceType.define(Collection, model=Model, watcher=Watcher, view=CollectionView)
