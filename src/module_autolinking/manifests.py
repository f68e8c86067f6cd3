"""Loading and validation of package manifests and module descriptors.

Both files are plain JSON. A file that cannot be read, does not parse, or does
not match its schema raises :class:`ManifestError`; callers treat that as fatal
for the whole scan.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from .errors import ManifestError

MODULE_DESCRIPTOR = "unimodule.json"

PACKAGE_MANIFEST_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["name", "version"],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "version": {"type": "string"},
    },
}

MODULE_DESCRIPTOR_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "platforms": {"type": "array", "items": {"type": "string"}},
    },
}

_PACKAGE_VALIDATOR = Draft202012Validator(PACKAGE_MANIFEST_SCHEMA)
_DESCRIPTOR_VALIDATOR = Draft202012Validator(MODULE_DESCRIPTOR_SCHEMA)


@dataclass(frozen=True)
class PackageManifest:
    """The fields of a package's own ``package.json`` used for discovery."""

    name: str
    version: str


@dataclass(frozen=True)
class ModuleConfig:
    """Contents of a ``unimodule.json`` descriptor."""

    platforms: tuple[str, ...]

    def supports(self, platform: str) -> bool:
        return platform in self.platforms


def load_json(path: Path) -> Any:
    """Read and decode a JSON file, raising ManifestError on failure."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(path, f"cannot be read ({exc.strerror or exc})") from exc

    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestError(path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc


def format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"{pointer or '<root>'}: {error.message}")
    return "; ".join(messages)


def _validate(validator: Draft202012Validator, document: Any, path: Path) -> None:
    errors = sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise ManifestError(path, format_errors(errors))


def load_package_manifest(path: Path) -> PackageManifest:
    data = load_json(path)
    _validate(_PACKAGE_VALIDATOR, data, path)
    return PackageManifest(name=data["name"], version=data["version"])


def load_module_config(path: Path) -> ModuleConfig:
    """Load a module descriptor. A descriptor without ``platforms`` supports nothing."""
    data = load_json(path)
    _validate(_DESCRIPTOR_VALIDATOR, data, path)
    return ModuleConfig(platforms=tuple(data.get("platforms") or ()))
