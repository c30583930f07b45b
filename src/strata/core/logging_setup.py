from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

_STRATA_HANDLER: logging.Handler | None = None
_CONFIGURED_TARGET: str | None = None

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str = "WARNING", *, log_path: Optional[Path] = None) -> None:
    """Install one Strata handler on the root logger (stderr, or ``log_path``).

    Idempotent per-process: reconfiguring replaces the previous handler.
    """
    global _STRATA_HANDLER, _CONFIGURED_TARGET

    target = str(Path(log_path).resolve()) if log_path else "<stderr>"
    root = logging.getLogger()
    root.setLevel(_level_from_name(level))

    if _STRATA_HANDLER is not None:
        if _CONFIGURED_TARGET == target:
            _STRATA_HANDLER.setLevel(_level_from_name(level))
            return
        root.removeHandler(_STRATA_HANDLER)
        _STRATA_HANDLER.close()
        _STRATA_HANDLER = None

    handler: logging.Handler
    if log_path:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    _STRATA_HANDLER = handler
    _CONFIGURED_TARGET = target


def reset_logging_for_tests() -> None:
    """Test-only: remove the Strata handler."""
    global _STRATA_HANDLER, _CONFIGURED_TARGET
    if _STRATA_HANDLER is not None:
        logging.getLogger().removeHandler(_STRATA_HANDLER)
        _STRATA_HANDLER.close()
    _STRATA_HANDLER = None
    _CONFIGURED_TARGET = None


__all__ = ["configure_logging", "reset_logging_for_tests", "LOG_FORMAT"]
