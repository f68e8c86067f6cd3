"""Tests for the platform resolver registry and built-in resolvers."""

from __future__ import annotations

import time
from pathlib import Path

import pytest

from module_autolinking.errors import ConfigError, UnknownPlatformError
from module_autolinking.models import ModuleDescriptor
from module_autolinking.resolvers import (
    RESOLVER_REGISTRY,
    AndroidResolver,
    IosResolver,
    PlatformResolver,
    get_resolver,
    register_resolver,
    resolve_modules,
)
from module_autolinking.resolvers.android import project_name


class _SlowFirstResolver:
    """Resolves every package; earlier packages finish later."""

    platform = "test"

    def __init__(self, skip=()):
        self.skip = set(skip)

    def resolve_module(self, package_name, descriptor):
        time.sleep(0.05 if package_name == "first" else 0.0)
        if package_name in self.skip:
            return None
        return {"packageName": package_name, "version": descriptor.version}


def _results(*names):
    return {
        name: ModuleDescriptor(path=Path(f"/w/node_modules/{name}"), version="1.0.0")
        for name in names
    }


class TestRegistry:
    def test_builtin_platforms_registered(self):
        assert {"ios", "android"}.issubset(RESOLVER_REGISTRY)
        assert isinstance(RESOLVER_REGISTRY["ios"], PlatformResolver)

    def test_unknown_platform_is_config_error(self):
        with pytest.raises(UnknownPlatformError, match="windows") as exc_info:
            get_resolver("windows")
        assert isinstance(exc_info.value, ConfigError)
        assert "ios" in exc_info.value.known

    def test_resolve_modules_unknown_platform_fails_even_when_empty(self):
        with pytest.raises(UnknownPlatformError):
            resolve_modules("windows", {})

    def test_register_into_custom_registry(self):
        registry = {}
        resolver = _SlowFirstResolver()
        register_resolver(resolver, registry)
        assert get_resolver("test", registry) is resolver
        assert "test" not in RESOLVER_REGISTRY


class TestResolveModules:
    def test_output_keeps_discovery_order(self):
        registry = {"test": _SlowFirstResolver()}
        modules = resolve_modules("test", _results("first", "second", "third"), registry)
        assert [m["packageName"] for m in modules] == ["first", "second", "third"]

    def test_absent_results_are_filtered(self):
        registry = {"test": _SlowFirstResolver(skip={"second"})}
        modules = resolve_modules("test", _results("first", "second", "third"), registry)
        assert [m["packageName"] for m in modules] == ["first", "third"]

    def test_empty_results(self):
        assert resolve_modules("test", {}, {"test": _SlowFirstResolver()}) == []


class TestIosResolver:
    def test_resolves_podspec_in_ios_dir(self, workspace):
        (workspace / "ios").mkdir()
        (workspace / "ios" / "NativeThing.podspec").write_text("", encoding="utf-8")
        descriptor = ModuleDescriptor(path=workspace, version="2.0.0")

        assert IosResolver().resolve_module("native-thing", descriptor) == {
            "packageName": "native-thing",
            "podName": "NativeThing",
            "podspecDir": str(workspace / "ios"),
            "version": "2.0.0",
        }

    def test_root_podspec_preferred(self, workspace):
        (workspace / "Root.podspec").write_text("", encoding="utf-8")
        (workspace / "ios").mkdir()
        (workspace / "ios" / "Nested.podspec").write_text("", encoding="utf-8")
        descriptor = ModuleDescriptor(path=workspace, version="1.0.0")

        assert IosResolver().resolve_module("pkg", descriptor)["podName"] == "Root"

    def test_no_podspec_is_not_applicable(self, workspace):
        descriptor = ModuleDescriptor(path=workspace, version="1.0.0")
        assert IosResolver().resolve_module("pkg", descriptor) is None


class TestAndroidResolver:
    def test_resolves_gradle_project(self, workspace):
        (workspace / "android").mkdir()
        (workspace / "android" / "build.gradle").write_text("", encoding="utf-8")
        descriptor = ModuleDescriptor(path=workspace, version="1.2.3")

        assert AndroidResolver().resolve_module("@scope/native-thing", descriptor) == {
            "packageName": "@scope/native-thing",
            "projectName": "scope_native-thing",
            "sourceDir": str(workspace / "android"),
            "version": "1.2.3",
        }

    def test_kotlin_build_script(self, workspace):
        (workspace / "android").mkdir()
        (workspace / "android" / "build.gradle.kts").write_text("", encoding="utf-8")
        descriptor = ModuleDescriptor(path=workspace, version="1.0.0")
        assert AndroidResolver().resolve_module("pkg", descriptor) is not None

    def test_without_gradle_project_is_not_applicable(self, workspace):
        descriptor = ModuleDescriptor(path=workspace, version="1.0.0")
        assert AndroidResolver().resolve_module("pkg", descriptor) is None

    def test_project_name(self):
        assert project_name("plain") == "plain"
        assert project_name("@scope/name") == "scope_name"
