"""Resource type registry.

Maps a registered resource name (``pages``, ``posts``, ``widgets``...) to the
classes that implement it. The table is built explicitly from a static list
of resource definitions; nothing registers itself as a side effect of
being imported or subclassed.

A resource's registered name comes from where its classes live: for
``strata.core.resources.posts.Collection`` the leaf segment (``Collection``,
the generic class name) is dropped and the next segment (``posts``) is
converted to snake_case.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Type

from strata.core.exceptions import ResourceNotFoundError, ResourceRegistrationError
from strata.core.utils.text import underscore

if TYPE_CHECKING:
    from .base import BaseCollection, BaseCollectionView, BaseModel, BaseWatcher


def registered_name_for(cls: type) -> str:
    """Derive the registered name of a resource class.

    A class may pin its name with a ``resource_name`` class attribute.

    Example:
        >>> from strata.core.resources.posts import Collection
        >>> registered_name_for(Collection)
        'posts'
    """
    pinned = getattr(cls, "resource_name", None)
    if pinned:
        return underscore(pinned)
    parts = f"{cls.__module__}.{cls.__qualname__}".split(".")
    parts.pop()
    if not parts:
        raise ResourceRegistrationError(f"Cannot derive a resource name for {cls!r}")
    return underscore(parts.pop())


@dataclass(frozen=True)
class ResourceType:
    """The classes implementing one resource."""

    name: str
    collection: Type["BaseCollection"]
    model: Optional[Type["BaseModel"]] = None
    watcher: Optional[Type["BaseWatcher"]] = None
    view: Optional[Type["BaseCollectionView"]] = None

    @classmethod
    def define(
        cls,
        collection: Type["BaseCollection"],
        *,
        model: Optional[Type["BaseModel"]] = None,
        watcher: Optional[Type["BaseWatcher"]] = None,
        view: Optional[Type["BaseCollectionView"]] = None,
    ) -> "ResourceType":
        """Build a definition whose name is derived from ``collection``."""
        return cls(
            name=registered_name_for(collection),
            collection=collection,
            model=model,
            watcher=watcher,
            view=view,
        )


class ResourceRegistry:
    """Lookup table of resource types by registered name."""

    def __init__(self, types: Iterable[ResourceType] = ()) -> None:
        self._types: Dict[str, ResourceType] = {}
        for resource_type in types:
            self.register(resource_type)

    @classmethod
    def default(cls) -> "ResourceRegistry":
        """Registry holding every built-in resource type."""
        from . import BUILTIN_RESOURCES

        return cls(BUILTIN_RESOURCES)

    def register(self, resource_type: ResourceType) -> ResourceType:
        if resource_type.name in self._types:
            raise ResourceRegistrationError(
                f"Resource '{resource_type.name}' is already registered",
                context={"resource": resource_type.name},
            )
        self._types[resource_type.name] = resource_type
        return resource_type

    def resolve(self, name: str) -> Optional[ResourceType]:
        return self._types.get(name)

    def get(self, name: str) -> ResourceType:
        resource_type = self._types.get(name)
        if resource_type is None:
            raise ResourceNotFoundError(name)
        return resource_type

    def model_exists(self, name: str) -> bool:
        resource_type = self._types.get(name)
        return resource_type is not None and resource_type.model is not None

    def model(self, name: str) -> Type["BaseModel"]:
        model = self.get(name).model
        if model is None:
            raise ResourceNotFoundError(name)
        return model

    def collection(self, name: str) -> Type["BaseCollection"]:
        return self.get(name).collection

    def names(self) -> List[str]:
        return list(self._types.keys())

    def types(self) -> List[ResourceType]:
        return list(self._types.values())

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)


__all__ = ["ResourceType", "ResourceRegistry", "registered_name_for"]
