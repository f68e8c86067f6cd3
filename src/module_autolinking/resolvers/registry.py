"""Platform resolver registry.

A resolver turns one discovered package into platform-specific linking data.
Resolvers are registered by platform identifier; resolving for an identifier
with no registered resolver is a configuration error.
"""

from __future__ import annotations

from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Protocol, TypeAlias, runtime_checkable

import structlog

from ..errors import UnknownPlatformError
from ..models import ModuleDescriptor, SearchResults

log = structlog.get_logger("module_autolinking.resolvers")

ResolvedModule: TypeAlias = dict[str, Any]

MAX_WORKERS = 8


@runtime_checkable
class PlatformResolver(Protocol):
    """Interface that every platform resolver must satisfy."""

    platform: str

    def resolve_module(
        self, package_name: str, descriptor: ModuleDescriptor
    ) -> ResolvedModule | None: ...


RESOLVER_REGISTRY: dict[str, PlatformResolver] = {}


def register_resolver(
    resolver: PlatformResolver,
    registry: dict[str, PlatformResolver] | None = None,
) -> None:
    """Register a resolver instance by its platform identifier."""
    target = RESOLVER_REGISTRY if registry is None else registry
    target[resolver.platform] = resolver


def get_resolver(
    platform: str,
    registry: Mapping[str, PlatformResolver] | None = None,
) -> PlatformResolver:
    """Return the resolver for ``platform`` or raise UnknownPlatformError."""
    source = RESOLVER_REGISTRY if registry is None else registry
    resolver = source.get(platform)
    if resolver is None:
        raise UnknownPlatformError(platform, sorted(source.keys()))
    return resolver


def get_known_platforms() -> list[str]:
    return sorted(RESOLVER_REGISTRY.keys())


def resolve_modules(
    platform: str,
    search_results: SearchResults,
    registry: Mapping[str, PlatformResolver] | None = None,
) -> list[ResolvedModule]:
    """Resolve every canonical entry of ``search_results`` for ``platform``.

    Resolvers run concurrently; the output keeps discovery order and drops
    packages the resolver reports as not applicable.
    """
    resolver = get_resolver(platform, registry)
    if not search_results:
        return []

    workers = min(MAX_WORKERS, len(search_results))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        resolved = list(
            executor.map(
                lambda item: resolver.resolve_module(item[0], item[1]),
                search_results.items(),
            )
        )

    modules = [module for module in resolved if module]
    log.info(
        "resolved modules",
        platform=platform,
        discovered=len(search_results),
        resolved=len(modules),
    )
    return modules
