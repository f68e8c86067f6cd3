"""Android resolver: links packages that ship a Gradle project."""

from __future__ import annotations

from ..models import ModuleDescriptor
from .registry import ResolvedModule

BUILD_FILES = ("build.gradle", "build.gradle.kts")


def project_name(package_name: str) -> str:
    """Convert an npm package name into a Gradle project name.

    >>> project_name("@scope/some-module")
    'scope_some-module'
    """
    return package_name.replace("@", "").replace("/", "_")


class AndroidResolver:
    platform = "android"

    def resolve_module(
        self, package_name: str, descriptor: ModuleDescriptor
    ) -> ResolvedModule | None:
        source_dir = descriptor.path / "android"
        if not any((source_dir / name).is_file() for name in BUILD_FILES):
            return None
        return {
            "packageName": package_name,
            "projectName": project_name(package_name),
            "sourceDir": str(source_dir),
            "version": descriptor.version,
        }
