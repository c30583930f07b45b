"""Partials: reusable template fragments, kept as file pointers."""
from __future__ import annotations

from .base import BaseCollection, BaseWatcher
from .registry import ResourceType


class Collection(BaseCollection):
    pass


class Watcher(BaseWatcher):
    pass


RESOURCE = ResourceType.define(Collection, watcher=Watcher)
