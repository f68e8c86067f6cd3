"""Shared pytest fixtures for building JavaScript workspaces on disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def make_package(
    root: Path,
    relative: str,
    name: str,
    version: str = "1.0.0",
    platforms: list[str] | None = None,
) -> Path:
    """Create a package with a package.json and a unimodule.json descriptor."""
    package_path = root / relative
    write_json(package_path / "package.json", {"name": name, "version": version})
    write_json(
        package_path / "unimodule.json",
        {"platforms": ["ios", "android"] if platforms is None else platforms},
    )
    return package_path


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Resolved temporary directory usable as a working directory."""
    return tmp_path.resolve()
