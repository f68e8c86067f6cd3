"""Data models for module discovery and resolution."""

from __future__ import annotations

from .module_descriptor import (
    ModuleDescriptor,
    SearchResults,
    register_revision,
    search_results_to_dict,
)
from .package_revision import PackageRevision
from .search_options import SearchOptions

__all__ = [
    "ModuleDescriptor",
    "PackageRevision",
    "SearchOptions",
    "SearchResults",
    "register_revision",
    "search_results_to_dict",
]
