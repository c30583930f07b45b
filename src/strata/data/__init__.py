"""
Strata data resource helpers.

Provides access to bundled configuration defaults and the system layer
(the lowest tier of the cascade) using importlib.resources.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """
    Get absolute path to a data file or directory.

    Args:
        subpackage: Name of the data subpackage (e.g., "config", "system")
        filename: Optional filename within the subpackage

    Returns:
        Absolute path to the file or directory

    Example:
        >>> get_data_path("config", "defaults.yaml")
        PosixPath('/path/to/strata/data/config/defaults.yaml')
    """
    pkg = resources.files("strata.data")
    base = Path(str(pkg / subpackage))
    return base / filename if filename else base


def get_system_root() -> Path:
    """Return the bundled system layer root."""
    return get_data_path("system")


__all__ = ["get_data_path", "get_system_root"]
