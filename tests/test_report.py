"""Tests for duplicate verification and linking logs."""

from __future__ import annotations

from pathlib import Path

from module_autolinking.models import ModuleDescriptor, PackageRevision
from module_autolinking.report import (
    generate_logs,
    is_newer,
    resolve_payload,
    verify_search_results,
)

CWD = Path("/work/app")


def _results():
    duplicated = ModuleDescriptor(path=CWD / "node_modules" / "pkg-a", version="1.0.0")
    duplicated.add_duplicate(PackageRevision(Path("/work/node_modules/pkg-a"), "2.0.0"))
    return {
        "pkg-a": duplicated,
        "pkg-b": ModuleDescriptor(path=CWD / "node_modules" / "pkg-b", version="0.3.0"),
    }


class TestIsNewer:
    def test_semver_comparison(self):
        assert is_newer("2.0.0", "1.9.9")
        assert not is_newer("1.0.0", "1.0.0")
        assert not is_newer("0.9.0", "1.0.0")

    def test_unparseable_versions_are_not_newer(self):
        assert not is_newer("not-a-version", "1.0.0")


class TestVerifySearchResults:
    def test_no_duplicates_is_empty(self):
        results = {"pkg": ModuleDescriptor(path=CWD / "node_modules" / "pkg", version="1.0.0")}
        assert verify_search_results(results, CWD) == ""

    def test_duplicates_table(self):
        text = verify_search_results(_results(), CWD)

        assert "pkg-a has been found at multiple directories" in text
        assert "| node_modules/pkg-a | 1.0.0 |" in text
        assert "| ../node_modules/pkg-a | 2.0.0 (newer) |" in text
        assert "pkg-b" not in text
        assert "Found 1 duplicated module(s), but only the first one will be used." in text


class TestGenerateLogs:
    def test_lists_modules_in_discovery_order(self):
        logs = generate_logs(_results(), CWD)
        lines = logs.splitlines()
        assert lines[0] == "Using modules:"
        assert lines[1] == "- pkg-a (1.0.0)"
        assert lines[2] == "- pkg-b (0.3.0)"
        assert "duplicated module(s)" in logs

    def test_payload_shape(self):
        modules = [{"packageName": "pkg-a"}]
        payload = resolve_payload(_results(), modules, CWD)
        assert set(payload) == {"logs", "modules"}
        assert payload["modules"] == modules
