"""Module scanning: find descriptors under search paths and build SearchResults.

Search paths are read concurrently but merged into the registry sequentially,
in search-path order and then shallowest match first, so the first occurrence of
a package name is always the same for identical inputs.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

from .config import merge_linking_options
from .discovery import PACKAGE_JSON
from .manifests import MODULE_DESCRIPTOR, load_module_config, load_package_manifest
from .models import PackageRevision, SearchOptions, SearchResults, register_revision

log = structlog.get_logger("module_autolinking.scanner")

MAX_WORKERS = 8


@dataclass(frozen=True)
class Candidate:
    """A package directory containing a module descriptor."""

    name: str
    revision: PackageRevision
    platforms: tuple[str, ...]


def iter_descriptor_paths(search_path: Path) -> Iterator[Path]:
    """Yield every module descriptor below ``search_path``, shallowest first.

    Symlinked directories are followed, so linked workspace packages are found;
    a link back to one of its own ancestors is not descended into. Directories
    whose name starts with a dot are skipped. Matches at the same depth come in
    sorted order.
    """
    if not search_path.is_dir():
        return
    matches: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(search_path, followlinks=True):
        current_real = Path(os.path.realpath(dirpath))
        dirnames[:] = [
            name
            for name in dirnames
            if not name.startswith(".")
            and not _links_to_ancestor(Path(dirpath, name), current_real)
        ]
        if MODULE_DESCRIPTOR in filenames:
            matches.append(Path(dirpath, MODULE_DESCRIPTOR))

    def depth_first(match: Path) -> tuple[int, tuple[str, ...]]:
        relative = match.relative_to(search_path)
        return len(relative.parts), relative.parts

    for match in sorted(matches, key=depth_first):
        if match.is_file():
            yield match


def _links_to_ancestor(directory: Path, current_real: Path) -> bool:
    if not directory.is_symlink():
        return False
    target = Path(os.path.realpath(directory))
    return current_real == target or target in current_real.parents


def load_candidate(descriptor_path: Path) -> Candidate:
    package_path = descriptor_path.parent
    module_config = load_module_config(descriptor_path)
    manifest = load_package_manifest(package_path / PACKAGE_JSON)
    return Candidate(
        name=manifest.name,
        revision=PackageRevision(path=package_path, version=manifest.version),
        platforms=module_config.platforms,
    )


def collect_candidates(search_path: Path) -> list[Candidate]:
    """Load every candidate under one search path, in enumeration order."""
    candidates = [load_candidate(p) for p in iter_descriptor_paths(search_path)]
    log.debug("scanned search path", search_path=str(search_path), candidates=len(candidates))
    return candidates


def scan_modules(platform: str, options: SearchOptions) -> SearchResults:
    """Build SearchResults for ``platform`` from already merged options.

    Any unreadable or malformed manifest aborts the scan with ManifestError.
    """
    results: SearchResults = {}
    if not options.search_paths:
        return results

    workers = min(MAX_WORKERS, len(options.search_paths))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        per_path = list(executor.map(collect_candidates, options.search_paths))

    for candidates in per_path:
        for candidate in candidates:
            if options.is_excluded(candidate.name):
                log.debug("excluded", package=candidate.name)
                continue
            if platform not in candidate.platforms:
                continue
            if options.is_ignored(candidate.revision.path):
                log.debug("ignored", package=candidate.name, path=str(candidate.revision.path))
                continue
            canonical = register_revision(results, candidate.name, candidate.revision)
            if not canonical:
                log.debug(
                    "duplicate package",
                    package=candidate.name,
                    path=str(candidate.revision.path),
                    version=candidate.revision.version,
                )

    duplicated = [name for name, descriptor in results.items() if descriptor.duplicates]
    if duplicated:
        log.warning("duplicated modules found", packages=duplicated)
    return results


def find_modules(
    platform: str,
    provided_options: Mapping[str, Any] | None,
    cwd: Path,
) -> SearchResults:
    """Merge linking options for ``platform`` and scan for modules."""
    options = merge_linking_options(platform, provided_options, cwd)
    return scan_modules(platform, options)
