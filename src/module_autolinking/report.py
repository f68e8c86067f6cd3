"""Human-readable rendering of search results and duplicate warnings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from packaging.version import InvalidVersion, Version

from .models import ModuleDescriptor, PackageRevision, SearchResults


def is_newer(candidate: str, canonical: str) -> bool:
    """Return True when ``candidate`` is a strictly newer version than ``canonical``.

    Versions that do not parse are never considered newer.
    """
    try:
        return Version(candidate) > Version(canonical)
    except InvalidVersion:
        return False


def _relative(revision: PackageRevision | ModuleDescriptor, cwd: Path) -> str:
    return os.path.relpath(revision.path, cwd)


def verify_search_results(search_results: SearchResults, cwd: Path) -> str:
    """Return a table of duplicated modules, or an empty string when there are none.

    The first row for each module is the canonical revision; the rows below are
    the shadowed duplicates, with ``(newer)`` marking ones ahead of it.
    """
    lines: list[str] = []
    duplicated = 0

    for name, descriptor in search_results.items():
        if not descriptor.duplicates:
            continue
        duplicated += 1
        if lines:
            lines.append("")
        lines.append(f"{name} has been found at multiple directories")
        lines.append("")
        lines.append("| Path | Version |")
        lines.append("| --- | --- |")
        lines.append(f"| {_relative(descriptor, cwd)} | {descriptor.version} |")
        for duplicate in descriptor.duplicates:
            version = duplicate.version
            if is_newer(duplicate.version, descriptor.version):
                version = f"{version} (newer)"
            lines.append(f"| {_relative(duplicate, cwd)} | {version} |")

    if not duplicated:
        return ""

    lines.append("")
    lines.append(
        f"Found {duplicated} duplicated module(s), but only the first one will be used."
    )
    lines.append("Make sure to get rid of unnecessary versions as it may introduce some side effects.")
    return "\n".join(lines)


def generate_logs(search_results: SearchResults, cwd: Path) -> str:
    """Return the log text printed while linking."""
    lines = ["Using modules:"]
    for name, descriptor in search_results.items():
        lines.append(f"- {name} ({descriptor.version})")

    warnings = verify_search_results(search_results, cwd)
    if warnings:
        lines.append(warnings)
    return "\n".join(lines)


def resolve_payload(
    search_results: SearchResults, modules: list[dict[str, Any]], cwd: Path
) -> dict[str, Any]:
    """Machine-readable output of ``resolve --json``."""
    return {
        "logs": generate_logs(search_results, cwd),
        "modules": modules,
    }
