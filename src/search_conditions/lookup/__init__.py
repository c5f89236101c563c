from .base import (
    DEFAULT_RESOLVER,
    DISPLAY_FIELD,
    LOOKUP_OPTION_KEYS,
    LookupOptions,
    LookupResolver,
    SearchContext,
)
from .registry import (
    LookupResolverRegistry,
    ResolverFactory,
    build_default_registry,
    default_registry,
    register_resolver,
)
from .text import TextLookup

__all__ = [
    "DEFAULT_RESOLVER",
    "DISPLAY_FIELD",
    "LOOKUP_OPTION_KEYS",
    "LookupOptions",
    "LookupResolver",
    "LookupResolverRegistry",
    "ResolverFactory",
    "SearchContext",
    "TextLookup",
    "build_default_registry",
    "default_registry",
    "register_resolver",
]
