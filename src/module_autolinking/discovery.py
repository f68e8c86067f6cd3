"""Project manifest lookup and search path resolution."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

import structlog

PACKAGE_JSON = "package.json"
NODE_MODULES = "node_modules"

log = structlog.get_logger("module_autolinking.discovery")


def find_package_json_path(cwd: Path) -> Path | None:
    """Return the nearest ``package.json`` at or above ``cwd``, or None."""
    start = Path(cwd).resolve()
    for directory in (start, *start.parents):
        candidate = directory / PACKAGE_JSON
        if candidate.is_file():
            return candidate
    return None


def find_default_paths(cwd: Path) -> list[Path]:
    """Collect ``node_modules`` next to every ancestor ``package.json``.

    The lookup restarts strictly above each manifest's directory, so nested
    workspaces yield nearest-to-farthest paths without any configuration.
    """
    paths: list[Path] = []
    directory: Path | None = Path(cwd).resolve()

    while directory is not None:
        manifest = find_package_json_path(directory)
        if manifest is None:
            break
        manifest_dir = manifest.parent
        paths.append(manifest_dir / NODE_MODULES)
        parent = manifest_dir.parent
        directory = parent if parent != manifest_dir else None

    log.debug("default search paths", cwd=str(cwd), paths=[str(p) for p in paths])
    return paths


def resolve_search_paths(explicit_paths: Sequence[str | Path] | None, cwd: Path) -> list[Path]:
    """Resolve explicit search paths against ``cwd``, or fall back to defaults.

    Explicit paths keep their order and are not deduplicated.
    """
    if explicit_paths:
        return resolve_paths(explicit_paths, cwd)
    return find_default_paths(cwd)


def resolve_paths(paths: Sequence[str | Path], cwd: Path) -> list[Path]:
    base = Path(cwd).resolve()
    return [_absolute(base, p) for p in paths]


def _absolute(base: Path, path: str | Path) -> Path:
    # Lexical normalisation only; symlinks are kept as given.
    return Path(os.path.normpath(base / path))
