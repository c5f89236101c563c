"""
Registry of lookup resolver factories keyed by configuration name.

Usage::

    registry = build_default_registry()
    registry.register("companies", CompanyLookup)

    resolver = registry.create("companies", key_field="company_id")
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..exceptions import ResolverNotFoundError
from .base import DEFAULT_RESOLVER, LookupResolver
from .text import TextLookup

ResolverFactory = Callable[..., LookupResolver]


class LookupResolverRegistry:
    """Maps resolver names to factories producing :class:`LookupResolver`."""

    def __init__(self) -> None:
        self._factories: dict[str, ResolverFactory] = {}

    # -- registration --------------------------------------------------------

    def register(self, name: str, factory: ResolverFactory) -> None:
        """Register (or replace) the factory for ``name``."""
        self._factories[name] = factory

    def unregister(self, name: str) -> None:
        self._factories.pop(name, None)

    # -- look-up -------------------------------------------------------------

    def get(self, name: str) -> ResolverFactory | None:
        return self._factories.get(name)

    def has(self, name: str) -> bool:
        return name in self._factories

    @property
    def names(self) -> set[str]:
        return set(self._factories.keys())

    def resolve(self, name: str) -> ResolverFactory:
        """
        Return the factory registered under ``name``.

        Raises:
            ResolverNotFoundError: If nothing is registered under ``name``.
        """
        factory = self.get(name)
        if factory is None:
            raise ResolverNotFoundError(name, self.names)
        return factory

    def create(self, name: str, **options: Any) -> LookupResolver:
        """Resolve ``name`` and build a resolver with ``options``."""
        return self.resolve(name)(**options)


def build_default_registry() -> LookupResolverRegistry:
    """Create a registry with the built-in text lookup registered."""
    registry = LookupResolverRegistry()
    registry.register(DEFAULT_RESOLVER, TextLookup)
    return registry


_default_registry: LookupResolverRegistry | None = None


def default_registry() -> LookupResolverRegistry:
    """Process-wide registry used by conditions that do not carry their own."""
    global _default_registry
    if _default_registry is None:
        _default_registry = build_default_registry()
    return _default_registry


def register_resolver(name: str, factory: ResolverFactory) -> None:
    """Register a resolver on the process-wide default registry."""
    default_registry().register(name, factory)
