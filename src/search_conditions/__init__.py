from .builder import ConditionBuilder
from .compiler import Clause, ConditionCompiler, compile_clause, runtime_field_name
from .condition import Condition, coerce_values, identity
from .exceptions import (
    ConditionError,
    ConfigurationError,
    LookupOptionError,
    LookupResolutionError,
    ResolverNotFoundError,
)
from .lookup import (
    DEFAULT_RESOLVER,
    DISPLAY_FIELD,
    LookupOptions,
    LookupResolver,
    LookupResolverRegistry,
    SearchContext,
    TextLookup,
    build_default_registry,
    default_registry,
    register_resolver,
)

__all__ = [
    # Core types
    "Condition",
    "Clause",
    # Compilation
    "ConditionCompiler",
    "compile_clause",
    "runtime_field_name",
    # Builder
    "ConditionBuilder",
    # Lookup
    "DEFAULT_RESOLVER",
    "DISPLAY_FIELD",
    "LookupOptions",
    "LookupResolver",
    "LookupResolverRegistry",
    "SearchContext",
    "TextLookup",
    "build_default_registry",
    "default_registry",
    "register_resolver",
    # Exceptions
    "ConditionError",
    "ConfigurationError",
    "LookupOptionError",
    "LookupResolutionError",
    "ResolverNotFoundError",
    # Utilities
    "coerce_values",
    "identity",
]
