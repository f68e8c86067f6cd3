"""Merging of autolinking options from the project manifest and the caller.

Sources, highest precedence first:

1. options provided by the caller (e.g. CLI arguments)
2. the platform-specific section of ``expo.autolinking`` (e.g. ``expo.autolinking.ios``)
3. the base ``expo.autolinking`` section of the nearest ``package.json``

Each field is picked independently from the first source that defines it with
a non-empty value.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import structlog
from jsonschema import Draft202012Validator

from .discovery import find_package_json_path, resolve_paths, resolve_search_paths
from .errors import ConfigError, ManifestError
from .manifests import format_errors, load_json
from .models import SearchOptions

log = structlog.get_logger("module_autolinking.config")

# (option field, manifest key)
FIELDS: tuple[tuple[str, str], ...] = (
    ("search_paths", "searchPaths"),
    ("ignore_paths", "ignorePaths"),
    ("exclude", "exclude"),
)

_STRING_LIST = {"type": "array", "items": {"type": "string"}}

AUTOLINKING_SCHEMA: dict[str, Any] = {
    "$defs": {
        "options": {
            "type": "object",
            "properties": {
                "searchPaths": _STRING_LIST,
                "ignorePaths": _STRING_LIST,
                "exclude": _STRING_LIST,
            },
        },
    },
    "allOf": [{"$ref": "#/$defs/options"}],
    # Platform sections; other non-object keys are left alone.
    "additionalProperties": {
        "if": {"type": "object"},
        "then": {"$ref": "#/$defs/options"},
    },
    "properties": {
        "searchPaths": True,
        "ignorePaths": True,
        "exclude": True,
    },
}

_VALIDATOR = Draft202012Validator(AUTOLINKING_SCHEMA)


def load_autolinking_config(cwd: Path) -> dict[str, Any]:
    """Return the ``expo.autolinking`` section of the nearest project manifest.

    A missing manifest or a manifest without the section yields an empty dict.
    """
    manifest_path = find_package_json_path(cwd)
    if manifest_path is None:
        log.debug("no project manifest found", cwd=str(cwd))
        return {}

    data = load_json(manifest_path)
    if not isinstance(data, dict):
        raise ManifestError(manifest_path, "project manifest must be a JSON object")

    expo = data.get("expo")
    section = expo.get("autolinking") if isinstance(expo, dict) else None
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"{manifest_path}: 'expo.autolinking' must be an object")

    errors = sorted(_VALIDATOR.iter_errors(section), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise ConfigError(f"{manifest_path}: invalid 'expo.autolinking': {format_errors(errors)}")

    log.debug("loaded autolinking config", manifest=str(manifest_path))
    return section


def _provided_to_manifest_keys(provided: Mapping[str, Any] | None) -> dict[str, Any]:
    if not provided:
        return {}
    return {key: provided.get(field) for field, key in FIELDS}


def pick_merged_value(key: str, sources: Sequence[Mapping[str, Any] | None]) -> Any:
    """Return the first non-empty value of ``key`` across ``sources``, or None."""
    for source in sources:
        if source and source.get(key):
            return source[key]
    return None


def merge_linking_options(
    platform: str,
    provided_options: Mapping[str, Any] | None,
    cwd: Path,
) -> SearchOptions:
    """Combine caller, platform-specific and base options into SearchOptions.

    ``provided_options`` uses the option field names (``search_paths``,
    ``ignore_paths``, ``exclude``). Relative paths from any source are resolved
    against ``cwd``; when no source defines ``search_paths`` the default
    ``node_modules`` lookup is used.
    """
    base_options = load_autolinking_config(cwd)
    platform_options = base_options.get(platform)
    sources = [
        _provided_to_manifest_keys(provided_options),
        platform_options if isinstance(platform_options, dict) else None,
        base_options,
    ]

    search_paths = pick_merged_value("searchPaths", sources)
    ignore_paths = pick_merged_value("ignorePaths", sources)
    exclude = pick_merged_value("exclude", sources)

    options = SearchOptions.from_iterables(
        search_paths=resolve_search_paths(search_paths, cwd),
        ignore_paths=resolve_paths(ignore_paths, cwd) if ignore_paths else None,
        exclude=exclude,
    )
    log.debug("merged linking options", platform=platform, **options.to_dict())
    return options
