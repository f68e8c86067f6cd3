"""Package revision model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PackageRevision:
    """One on-disk occurrence of a package."""

    path: Path
    version: str

    def __post_init__(self) -> None:
        if not self.path.is_absolute():
            raise ValueError(f"Package path must be absolute: {self.path}")

    def to_dict(self) -> dict[str, str]:
        return {
            "path": str(self.path),
            "version": self.version,
        }
