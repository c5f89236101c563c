"""
Condition exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``ConditionError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConditionError(Exception):
    """Base exception for all condition errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ConfigurationError(ConditionError):
    """A condition was configured in a way that can never compile."""


class LookupOptionError(ConfigurationError):
    """
    Unrecognised keys in a condition's ``lookup`` options.

    Provides fuzzy-matched suggestions for likely intended keys.
    """

    def __init__(self, invalid_keys: Iterable[str], valid_keys: Iterable[str]) -> None:
        self.invalid_keys = sorted(str(k) for k in invalid_keys)
        self.valid_keys = sorted(valid_keys)
        self.suggestions = {
            key: get_close_matches(key, self.valid_keys, n=1, cutoff=0.6)
            for key in self.invalid_keys
        }

        message = f"Unknown lookup option(s): {', '.join(self.invalid_keys)}."
        hints = [f"'{k}' -> '{s[0]}'" for k, s in self.suggestions.items() if s]
        if hints:
            message += f" Did you mean: {', '.join(hints)}?"
        message += f" Valid options: {', '.join(self.valid_keys)}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_LOOKUP_OPTION",
            "invalid_keys": self.invalid_keys,
            "suggestions": self.suggestions,
            "valid_keys": self.valid_keys,
        }


class ResolverNotFoundError(ConfigurationError):
    """
    Unknown lookup resolver name.

    Example error message::

        Unknown lookup resolver: 'txt'. Did you mean: text?
        Registered resolvers: companies, text
    """

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = sorted(available)
        self.suggestions = get_close_matches(name, self.available, n=3, cutoff=0.6)

        message = f"Unknown lookup resolver: '{name}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Registered resolvers: {', '.join(self.available) or '<none>'}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RESOLVER_NOT_FOUND",
            "resolver": self.name,
            "suggestions": self.suggestions,
            "available": self.available,
        }


class LookupResolutionError(ConditionError):
    """A lookup resolver could not enrich a condition's values."""

    def __init__(self, message: str, condition_name: str | None = None) -> None:
        self.message = message
        self.condition_name = condition_name
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "LOOKUP_RESOLUTION_ERROR",
            "message": self.message,
            "condition": self.condition_name,
        }
