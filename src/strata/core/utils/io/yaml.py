"""YAML reading for configuration and schema files."""
from __future__ import annotations

import fcntl
from pathlib import Path
from typing import Any, List

import yaml


def read_yaml(path: Path, default: Any = None, raise_on_error: bool = False) -> Any:
    """Load one YAML document from ``path`` under a shared advisory lock.

    An empty document yields ``default``. A missing file or unparseable
    YAML also yields ``default`` unless ``raise_on_error`` is set, in which
    case ``FileNotFoundError`` or ``yaml.YAMLError`` propagates.
    """
    path = Path(path)
    if not path.is_file():
        if raise_on_error:
            raise FileNotFoundError(f"YAML file not found: {path}")
        return default

    try:
        with path.open("r", encoding="utf-8") as fh:
            fcntl.flock(fh.fileno(), fcntl.LOCK_SH)
            try:
                data = yaml.safe_load(fh)
            finally:
                fcntl.flock(fh.fileno(), fcntl.LOCK_UN)
    except (OSError, yaml.YAMLError):
        if raise_on_error:
            raise
        return default
    return default if data is None else data


def iter_yaml_files(dir_path: Path) -> List[Path]:
    """List ``*.yaml``/``*.yml`` files in ``dir_path`` sorted by stem.

    A ``<stem>.yaml`` shadows a ``<stem>.yml`` next to it so a layer never
    loads the same section twice.
    """
    directory = Path(dir_path)
    if not directory.is_dir():
        return []
    by_stem = {p.stem: p for p in directory.glob("*.yml")}
    by_stem.update({p.stem: p for p in directory.glob("*.yaml")})
    return [by_stem[stem] for stem in sorted(by_stem)]


__all__ = ["read_yaml", "iter_yaml_files"]
