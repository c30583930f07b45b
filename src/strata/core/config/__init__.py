"""Site configuration loading."""
from __future__ import annotations

from .manager import ENV_PREFIX, SITE_CONFIG_NAMES, ConfigManager

__all__ = ["ConfigManager", "SITE_CONFIG_NAMES", "ENV_PREFIX"]
