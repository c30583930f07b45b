"""Generated-dictionary cache keyed by resource kind.

Each ``SiteContext`` owns one ``ResourceCache``. Collections write an entry
after a full ``generate()`` pass and watchers clear it when a file under
the collection's cascade root changes. Readers must treat a miss as "run
the resolver again".
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ResourceCache:
    """Process-local cache of generated dictionaries."""

    def __init__(self) -> None:
        self._entries: Dict[str, Dict[str, Any]] = {}

    def get(self, kind: str) -> Optional[Dict[str, Any]]:
        """Return the cached dictionary for ``kind`` or None on a miss."""
        return self._entries.get(kind)

    def set(self, kind: str, dictionary: Dict[str, Any]) -> None:
        self._entries[kind] = dictionary
        logger.debug("cache.set %s (%d entries)", kind, len(dictionary))

    def clear(self, kind: str) -> None:
        """Drop the whole entry for ``kind``. Clearing a missing entry is a no-op."""
        if self._entries.pop(kind, None) is not None:
            logger.debug("cache.clear %s", kind)

    def clear_all(self) -> None:
        self._entries.clear()

    def __contains__(self, kind: object) -> bool:
        return kind in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["ResourceCache"]
