"""Exceptions raised by the discovery and resolution pipeline."""

from __future__ import annotations

from pathlib import Path


class AutolinkingError(RuntimeError):
    """Base error for failures while discovering or resolving modules."""


class ConfigError(AutolinkingError):
    """Raised when the autolinking configuration is invalid."""


class UnknownPlatformError(ConfigError):
    """Raised when no resolver is registered for the requested platform."""

    def __init__(self, platform: str, known: list[str]) -> None:
        self.platform = platform
        self.known = known
        super().__init__(
            f"Resolver not found for platform '{platform}'. "
            f"Registered platforms: {', '.join(known) or '(none)'}"
        )


class ManifestError(AutolinkingError):
    """Raised when a package manifest or module descriptor cannot be loaded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
