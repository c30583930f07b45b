"""File-change dispatch to resource watchers.

``ChangeNotifier`` implements the watcher contract: for each changed path
every watcher is asked ``match(path)`` and each match runs ``update(path)``
independently. ``PollingObserver`` is the change source used by
``strata watch``: it fingerprints every file under the layer roots with
``(mtime_ns, size)`` and reports what differs between polls.
"""
from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

if TYPE_CHECKING:
    from strata.core.context import SiteContext
    from strata.core.resources.base import BaseWatcher

logger = logging.getLogger(__name__)

Fingerprint = Tuple[int, int]


class ChangeNotifier:
    def __init__(self, watchers: Iterable["BaseWatcher"] = ()) -> None:
        self.watchers: List["BaseWatcher"] = list(watchers)

    @classmethod
    def for_context(cls, context: "SiteContext") -> "ChangeNotifier":
        return cls(context.watchers())

    def register(self, watcher: "BaseWatcher") -> None:
        self.watchers.append(watcher)

    def notify(self, path: Union[str, Path]) -> List["BaseWatcher"]:
        """Dispatch one changed path; returns the watchers that handled it."""
        matched = [w for w in self.watchers if w.match(path)]
        for watcher in matched:
            watcher.update(path)
        if not matched:
            logger.debug("No watcher for %s", path)
        return matched

    def notify_many(self, paths: Iterable[Union[str, Path]]) -> int:
        return sum(len(self.notify(p)) for p in paths)


class PollingObserver:
    """Detect added, modified and removed files under ``roots``."""

    def __init__(self, roots: Iterable[Path]) -> None:
        self.roots = [Path(r) for r in roots]
        self._snapshot = self.snapshot()

    def snapshot(self) -> Dict[str, Fingerprint]:
        files: Dict[str, Fingerprint] = {}
        for root in self.roots:
            if not root.is_dir():
                continue
            for p in root.rglob("*"):
                try:
                    if not p.is_file():
                        continue
                    st = p.stat()
                except FileNotFoundError:
                    continue
                files[str(p.resolve())] = (int(st.st_mtime_ns), int(st.st_size))
        return files

    def poll(self) -> List[str]:
        """Return changed paths since the previous poll, sorted."""
        current = self.snapshot()
        previous = self._snapshot
        changed = {p for p, fp in current.items() if previous.get(p) != fp}
        changed.update(p for p in previous if p not in current)
        self._snapshot = current
        return sorted(changed)


def watch(
    notifier: ChangeNotifier,
    observer: PollingObserver,
    *,
    interval: float = 1.0,
    iterations: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
    on_change: Optional[Callable[[Sequence[str]], None]] = None,
) -> int:
    """Poll ``observer`` and dispatch changes until ``iterations`` polls ran.

    Returns the number of changed paths seen.
    """
    seen = 0
    count = 0
    while iterations is None or count < iterations:
        sleep(interval)
        changed = observer.poll()
        if changed:
            notifier.notify_many(changed)
            seen += len(changed)
            if on_change is not None:
                on_change(changed)
        count += 1
    return seen


__all__ = ["ChangeNotifier", "PollingObserver", "watch"]
