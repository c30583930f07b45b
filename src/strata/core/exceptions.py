from __future__ import annotations

from typing import Any, Dict, Mapping


class StrataError(Exception):
    """Base exception for Strata."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConfigError(StrataError):
    """Raised when the site configuration cannot be loaded."""


class SitePathError(StrataError, FileNotFoundError):
    """Raised when the site root does not exist."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        StrataError.__init__(self, message, context=context)
        FileNotFoundError.__init__(self, message)


class ExcludePatternError(StrataError, ValueError):
    """Raised when a resource's exclude pattern is not a valid regex."""

    def __init__(
        self,
        pattern: str,
        *,
        resource: str,
        reason: str = "",
    ) -> None:
        message = f"Invalid exclude pattern {pattern!r} for '{resource}'"
        if reason:
            message = f"{message}: {reason}"
        StrataError.__init__(
            self,
            message,
            context={"pattern": pattern, "resource": resource},
        )
        ValueError.__init__(self, message)
        self.pattern = pattern
        self.resource = resource


class ResourceRegistrationError(StrataError):
    """Raised when a resource type cannot be registered."""


class ResourceNotFoundError(StrataError, KeyError):
    """Raised when a resource name has no registered type."""

    def __init__(self, name: str) -> None:
        message = f"Unknown resource '{name}'"
        StrataError.__init__(self, message, context={"resource": name})
        KeyError.__init__(self, message)
        self.name = name

    def __str__(self) -> str:
        return self.args[0] if self.args else ""


__all__ = [
    "StrataError",
    "ConfigError",
    "SitePathError",
    "ExcludePatternError",
    "ResourceRegistrationError",
    "ResourceNotFoundError",
]
