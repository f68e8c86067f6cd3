"""iOS resolver: links packages that ship a CocoaPods podspec."""

from __future__ import annotations

from pathlib import Path

from ..models import ModuleDescriptor
from .registry import ResolvedModule


def find_podspec(package_path: Path) -> Path | None:
    """Return the first podspec in the package root or its ``ios`` directory."""
    for directory in (package_path, package_path / "ios"):
        if not directory.is_dir():
            continue
        podspecs = sorted(directory.glob("*.podspec"))
        if podspecs:
            return podspecs[0]
    return None


class IosResolver:
    platform = "ios"

    def resolve_module(
        self, package_name: str, descriptor: ModuleDescriptor
    ) -> ResolvedModule | None:
        podspec = find_podspec(descriptor.path)
        if podspec is None:
            return None
        return {
            "packageName": package_name,
            "podName": podspec.stem,
            "podspecDir": str(podspec.parent),
            "version": descriptor.version,
        }
