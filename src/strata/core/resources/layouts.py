"""Layouts: page wrappers. Records are the file pointers themselves."""
from __future__ import annotations

from .base import BaseCollection, BaseWatcher
from .registry import ResourceType


class Collection(BaseCollection):
    glob = "**/*.html"


class Watcher(BaseWatcher):
    pass


RESOURCE = ResourceType.define(Collection, watcher=Watcher)
