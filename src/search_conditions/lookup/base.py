"""
Lookup resolver strategy and its configuration.

A lookup resolver enriches opaque key entries (``{"key": "42"}``) with a
display label (``{"key": "42", "text": "Acme Inc"}``).  Conditions pick a
resolver by name from a :class:`LookupResolverRegistry`; new resolvers are
added by subclassing :class:`LookupResolver` and registering a factory.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

DEFAULT_RESOLVER = "text"

# Field every enriched entry carries its label under.
DISPLAY_FIELD = "text"

LOOKUP_OPTION_KEYS: frozenset[str] = frozenset({"key", "label", "resolver"})


class LookupOptions(BaseModel):
    """
    Lookup configuration attached to a condition.

    Attributes:
        key: Document field holding the entry keys.
        label: Document field holding the display label.
        resolver: Registered resolver name.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str | None = None
    label: str | None = None
    resolver: str = DEFAULT_RESOLVER

    def resolver_options(self) -> dict[str, Any]:
        """Constructor options for the resolver, without the resolver name."""
        options: dict[str, Any] = {}
        if self.key is not None:
            options["key_field"] = self.key
        if self.label is not None:
            options["label_field"] = self.label
        return options


class SearchContext(Protocol):
    """
    The search the default text lookup runs its label query against.

    ``search`` receives a compiled clause and returns matching documents
    as mappings.
    """

    def search(self, clause: dict[str, Any]) -> Iterable[Mapping[str, Any]]:
        ...


class LookupResolver(ABC):
    """
    Strategy interface for value enrichment.

    Implementations must return exactly one entry per input entry,
    in the same order, each carrying :data:`DISPLAY_FIELD`.
    """

    def __init__(
        self,
        *,
        key_field: str = "id",
        label_field: str = DISPLAY_FIELD,
        search_context: Any = None,
        condition_name: str | None = None,
    ) -> None:
        self.key_field = key_field
        self.label_field = label_field
        self.search_context = search_context
        self.condition_name = condition_name

    @abstractmethod
    def load(self, entries: list[Mapping[str, Any]]) -> list[dict[str, Any]]:
        """Return ``entries`` with their display field populated."""
        ...
