"""Search options model."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SearchOptions:
    """Effective options for a single scan.

    ``search_paths`` is ordered and may contain duplicates. ``ignore_paths`` and
    ``exclude`` are None when no configuration source defines them.
    """

    search_paths: tuple[Path, ...] = ()
    ignore_paths: tuple[Path, ...] | None = None
    exclude: frozenset[str] | None = None

    def is_excluded(self, name: str) -> bool:
        return self.exclude is not None and name in self.exclude

    def is_ignored(self, package_path: Path) -> bool:
        if not self.ignore_paths:
            return False
        return any(
            package_path == ignored or ignored in package_path.parents
            for ignored in self.ignore_paths
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "searchPaths": [str(p) for p in self.search_paths],
            "ignorePaths": (
                [str(p) for p in self.ignore_paths] if self.ignore_paths is not None else None
            ),
            "exclude": sorted(self.exclude) if self.exclude is not None else None,
        }

    @classmethod
    def from_iterables(
        cls,
        *,
        search_paths: Iterable[Path],
        ignore_paths: Iterable[Path] | None = None,
        exclude: Iterable[str] | None = None,
    ) -> SearchOptions:
        return cls(
            search_paths=tuple(search_paths),
            ignore_paths=tuple(ignore_paths) if ignore_paths is not None else None,
            exclude=frozenset(exclude) if exclude is not None else None,
        )
