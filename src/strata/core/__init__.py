"""Strata core: cascade resolution, widgets and change watching."""
from __future__ import annotations

from .context import SiteContext, new_context
from .exceptions import (
    ConfigError,
    ExcludePatternError,
    ResourceNotFoundError,
    ResourceRegistrationError,
    SitePathError,
    StrataError,
)
from .paths import LayerSpec, SitePaths
from .watch import ChangeNotifier, PollingObserver

__all__ = [
    "SiteContext",
    "new_context",
    "LayerSpec",
    "SitePaths",
    "ChangeNotifier",
    "PollingObserver",
    "StrataError",
    "ConfigError",
    "ExcludePatternError",
    "ResourceNotFoundError",
    "ResourceRegistrationError",
    "SitePathError",
]
