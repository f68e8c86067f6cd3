"""module-autolinking core package.

Discovers native module packages in a JavaScript workspace and resolves them
into per-platform linking data. The same functions back the command line
interface in :mod:`module_autolinking.cli`.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .logging import configure_library_defaults

configure_library_defaults()

from .config import merge_linking_options
from .discovery import find_default_paths, find_package_json_path, resolve_search_paths
from .errors import AutolinkingError, ConfigError, ManifestError, UnknownPlatformError
from .models import ModuleDescriptor, PackageRevision, SearchOptions, SearchResults
from .report import generate_logs, verify_search_results
from .resolvers import resolve_modules
from .scanner import find_modules, scan_modules

__all__ = [
    "AutolinkingError",
    "ConfigError",
    "ManifestError",
    "ModuleDescriptor",
    "PackageRevision",
    "SearchOptions",
    "SearchResults",
    "UnknownPlatformError",
    "find_default_paths",
    "find_modules",
    "find_package_json_path",
    "generate_logs",
    "merge_linking_options",
    "resolve_modules",
    "resolve_search_paths",
    "scan_modules",
    "verify_search_results",
]
