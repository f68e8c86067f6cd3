"""Registry entry for a discovered module."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeAlias

from .package_revision import PackageRevision


@dataclass
class ModuleDescriptor:
    """Canonical (first found) revision of a package plus its shadowed duplicates."""

    path: Path
    version: str
    duplicates: list[PackageRevision] = field(default_factory=list)

    def add_duplicate(self, revision: PackageRevision) -> bool:
        """Append ``revision`` unless its path is already recorded for this module.

        Returns True when the revision was appended.
        """
        if revision.path == self.path:
            return False
        if any(existing.path == revision.path for existing in self.duplicates):
            return False
        self.duplicates.append(revision)
        return True

    def to_dict(self) -> dict[str, object]:
        return {
            "path": str(self.path),
            "version": self.version,
            "duplicates": [duplicate.to_dict() for duplicate in self.duplicates],
        }

    @classmethod
    def from_revision(cls, revision: PackageRevision) -> ModuleDescriptor:
        return cls(path=revision.path, version=revision.version)


# Keyed by package name; insertion order is discovery order.
SearchResults: TypeAlias = dict[str, ModuleDescriptor]


def register_revision(results: SearchResults, name: str, revision: PackageRevision) -> bool:
    """Insert ``revision`` as the canonical entry for ``name`` or record it as a duplicate.

    The first revision registered under a name always stays canonical. Returns
    True when ``revision`` became the canonical entry.
    """
    descriptor = results.get(name)
    if descriptor is None:
        results[name] = ModuleDescriptor.from_revision(revision)
        return True
    descriptor.add_duplicate(revision)
    return False


def search_results_to_dict(results: SearchResults) -> dict[str, dict[str, object]]:
    return {name: descriptor.to_dict() for name, descriptor in results.items()}
