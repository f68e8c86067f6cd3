"""Platform resolvers and their registry."""

from __future__ import annotations

from .android import AndroidResolver
from .ios import IosResolver
from .registry import (
    RESOLVER_REGISTRY,
    PlatformResolver,
    ResolvedModule,
    get_known_platforms,
    get_resolver,
    register_resolver,
    resolve_modules,
)

register_resolver(IosResolver())
register_resolver(AndroidResolver())

__all__ = [
    "AndroidResolver",
    "IosResolver",
    "PlatformResolver",
    "RESOLVER_REGISTRY",
    "ResolvedModule",
    "get_known_platforms",
    "get_resolver",
    "register_resolver",
    "resolve_modules",
]
