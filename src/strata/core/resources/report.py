"""Generation reporting dataclasses.

Every ``generate()`` pass hands its final dictionary to the reporter, which
records a ``GenerationReport`` and logs a one-line summary.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass
class GenerationReport:
    """Report from one resource generation pass."""

    resource: str
    ids: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def count(self) -> int:
        return len(self.ids)

    @property
    def has_issues(self) -> bool:
        return bool(self.warnings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary for serialization."""
        return {
            "resource": self.resource,
            "count": self.count,
            "ids": list(self.ids),
            "warnings": list(self.warnings),
            "timestamp": self.timestamp.isoformat(),
        }

    def summary(self) -> str:
        """Generate human-readable summary."""
        lines = [f"{self.resource}: {self.count} resource(s)"]
        if self.warnings:
            lines.append(f"  Warnings: {len(self.warnings)}")
            for w in self.warnings[:3]:  # Show first 3
                lines.append(f"    - {w}")
        return "\n".join(lines)


class GenerationReporter:
    """Diagnostic sink for generated dictionaries (fire-and-forget)."""

    def __init__(self) -> None:
        self._latest: Dict[str, GenerationReport] = {}

    def report(
        self,
        name: str,
        dictionary: Mapping[str, Any],
        warnings: Sequence[str],
    ) -> GenerationReport:
        entry = GenerationReport(
            resource=name,
            ids=sorted(str(k) for k in dictionary.keys()),
            warnings=list(warnings),
        )
        self._latest[name] = entry
        logger.info("generated %s: %d resource(s)", name, entry.count)
        for warning in entry.warnings:
            logger.warning("%s: %s", name, warning)
        return entry

    def latest(self, name: str) -> Optional[GenerationReport]:
        return self._latest.get(name)

    def reports(self) -> List[GenerationReport]:
        return [self._latest[k] for k in sorted(self._latest)]

    def clear(self) -> None:
        self._latest.clear()


__all__ = ["GenerationReport", "GenerationReporter"]
