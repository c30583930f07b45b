"""
Strata site configuration management (YAML only).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

import yaml

from strata.core.exceptions import ConfigError
from strata.core.utils.io import iter_yaml_files, read_yaml
from strata.core.utils.merge import deep_merge
from strata.data import get_data_path

logger = logging.getLogger(__name__)

SITE_CONFIG_NAMES = ("config.yaml", "config.yml")
ENV_PREFIX = "STRATA_"


class ConfigManager:
    """Load and merge the configuration of one site.

    Configuration sources (highest to lowest priority):
    1. Environment variables: STRATA_<section>__<key>=value
    2. Site config: <site-root>/config.yaml (or config.yml)
    3. Bundled defaults: strata.data/config/*.yaml (alphabetical order)
    """

    def __init__(self, site_root: Path, *, environ: Optional[Mapping[str, str]] = None) -> None:
        self.site_root = Path(site_root)
        self.core_config_dir = get_data_path("config")
        self._environ = environ

    @property
    def site_config_path(self) -> Optional[Path]:
        for name in SITE_CONFIG_NAMES:
            candidate = self.site_root / name
            if candidate.exists():
                return candidate
        return None

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        # Fail closed: configuration must never silently ignore invalid YAML.
        try:
            data = read_yaml(path, default={}, raise_on_error=True)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}", context={"path": str(path)}) from exc
        if not isinstance(data, dict):
            raise ConfigError(
                f"{path} must contain a YAML mapping, got {type(data).__name__}",
                context={"path": str(path)},
            )
        return data

    def validate_schema(self, config: Dict[str, Any], schema_name: str = "config.schema") -> None:
        from strata.core.schemas import validate_payload

        validate_payload(config, schema_name)

    def load_config(self, *, validate: bool = False, include_env: bool = True) -> Dict[str, Any]:
        """Return bundled defaults, site config and env overrides merged in order.

        Raises:
            ConfigError: On invalid YAML, or (with ``validate``) a schema violation
        """
        cfg = self._load_config_unvalidated(include_env=include_env)
        if validate:
            self.validate_schema(cfg)
        return cfg

    def _load_config_unvalidated(self, *, include_env: bool) -> Dict[str, Any]:
        cfg: Dict[str, Any] = {}
        for path in iter_yaml_files(self.core_config_dir):
            cfg = deep_merge(cfg, self.load_yaml(path))

        site_path = self.site_config_path
        if site_path is not None:
            cfg = deep_merge(cfg, self.load_yaml(site_path))
        else:
            logger.debug("No site config found under %s; using bundled defaults", self.site_root)

        if include_env:
            self.apply_env_overrides(cfg)
        return cfg

    # ========== Environment Overrides ==========

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        environ = os.environ if self._environ is None else self._environ
        for key in sorted(environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            segs = raw.split("__")
            if not raw or any(seg == "" for seg in segs):
                raise ConfigError(f"Malformed {ENV_PREFIX}* key: '{key}'", context={"key": key})
            yield segs, self._coerce_type(environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur = root
        for part in path[:-1]:
            candidates = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
            use_key = candidates.get(part.lower(), part)
            nxt = cur.get(use_key)
            if not isinstance(nxt, dict):
                nxt = {}
                cur[use_key] = nxt
            cur = nxt
        leaf = path[-1]
        candidates = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
        cur[candidates.get(leaf.lower(), leaf)] = value

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, typed_value in self._iter_env_overrides():
            self._set_nested(cfg, path, typed_value)


__all__ = ["ConfigManager", "SITE_CONFIG_NAMES", "ENV_PREFIX"]
