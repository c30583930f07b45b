"""Resource types and the cascade resolver.

``BUILTIN_RESOURCES`` is the static registration table consumed by
``ResourceRegistry.default()``. Adding a resource type means adding its
module's ``RESOURCE`` definition here.
"""
from __future__ import annotations

from . import layouts, pages, partials, posts, widgets
from .base import BaseCollection, BaseCollectionView, BaseModel, BaseWatcher, FilePointer
from .cache import ResourceCache
from .registry import ResourceRegistry, ResourceType, registered_name_for
from .report import GenerationReport, GenerationReporter

BUILTIN_RESOURCES: tuple[ResourceType, ...] = (
    pages.RESOURCE,
    posts.RESOURCE,
    layouts.RESOURCE,
    partials.RESOURCE,
    widgets.RESOURCE,
)

__all__ = [
    "BUILTIN_RESOURCES",
    "BaseCollection",
    "BaseCollectionView",
    "BaseModel",
    "BaseWatcher",
    "FilePointer",
    "GenerationReport",
    "GenerationReporter",
    "ResourceCache",
    "ResourceRegistry",
    "ResourceType",
    "registered_name_for",
]
