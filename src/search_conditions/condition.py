"""
The filter condition model.

A :class:`Condition` describes one filter of a search request: the field
it targets, the values it matches, and the modifiers that decide the shape
of the compiled clause.  Conditions are built either from a configuration
mapping::

    Condition.model_validate({"name": "tags", "values": ["a", "b"], "and": True})

or incrementally through :class:`~search_conditions.builder.ConditionBuilder`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .compiler import Clause, compile_clause, is_present, runtime_field_name
from .exceptions import LookupOptionError, LookupResolutionError
from .lookup import (
    DISPLAY_FIELD,
    LOOKUP_OPTION_KEYS,
    LookupOptions,
    LookupResolverRegistry,
    default_registry,
)

logger = logging.getLogger(__name__)

KEYWORDS_CONDITION = "keywords"

_SERIALIZED_BOUNDS: tuple[tuple[str, str], ...] = (
    ("from_eq", "from_eq"),
    ("from_", "from"),
    ("to_eq", "to_eq"),
    ("to", "to"),
)


def identity(value: Any) -> Any:
    return value


def coerce_values(value: Any) -> list[Any]:
    """Normalise a configured value (scalar, mapping or sequence) to a list."""
    if value is None:
        return []
    if isinstance(value, list | tuple):
        return list(value)
    return [value]


class Condition(BaseModel):
    """
    One declarative filter condition.

    ``and_`` and ``not_`` are tri-state: ``None`` means the modifier was
    never configured and produces no wrapper, ``False`` is an explicit
    choice and is kept distinct from ``None``.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    name: str
    query_name: str | None = None
    values: list[Any] = Field(default_factory=list)

    search_analyzed: bool = False
    prefix: bool = False
    any_text: bool = False
    autocomplete: bool = False
    single: bool = False
    range: bool = False

    and_: bool | None = Field(default=None, alias="and")
    not_: bool | None = Field(default=None, alias="not")

    from_eq: Any = None
    to_eq: Any = None
    from_: Any = Field(default=None, alias="from")
    to: Any = None

    fields: list[str] | None = None
    user_query: dict[str, Any] | None = None
    transform: Callable[[Any], Any] = Field(default=identity, exclude=True)
    lookup: LookupOptions | None = None

    resolvers: LookupResolverRegistry | None = Field(default=None, exclude=True)
    search_context: Any = Field(default=None, exclude=True)

    # -- validation ----------------------------------------------------------

    @model_validator(mode="before")
    @classmethod
    def _apply_defaults(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        if data.get("name") == KEYWORDS_CONDITION:
            data["single"] = True
        return data

    @field_validator("values", mode="before")
    @classmethod
    def _coerce_values(cls, value: Any) -> list[Any]:
        return coerce_values(value)

    @field_validator("lookup", mode="before")
    @classmethod
    def _check_lookup_keys(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            unknown = set(value) - LOOKUP_OPTION_KEYS
            if unknown:
                raise LookupOptionError(unknown, LOOKUP_OPTION_KEYS)
        return value

    @model_validator(mode="after")
    def _check_resolver(self) -> Condition:
        if self.lookup is not None:
            self.lookup_registry.resolve(self.lookup.resolver)
        return self

    @model_validator(mode="after")
    def _check_user_query(self) -> Condition:
        if self.user_query is not None:
            self.nested([])
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "values":
            value = coerce_values(value)
        super().__setattr__(name, value)

    # -- construction --------------------------------------------------------

    @classmethod
    def from_config(cls, name: str, config: Any, **defaults: Any) -> Condition:
        """
        Build a condition from the shorthand accepted in request configs.

        A mapping is read as attributes; anything else is taken as the
        condition's values.  ``defaults`` are condition-level settings that
        the config overrides.
        """
        if isinstance(config, Mapping):
            attrs = {**defaults, **config}
        else:
            attrs = {**defaults, "values": config}
        attrs["name"] = name
        return cls.model_validate(attrs)

    # -- derived -------------------------------------------------------------

    @property
    def field_name(self) -> str:
        """``query_name``, or the current ``name`` when none is set."""
        return self.query_name or self.name

    @property
    def runtime_field_name(self) -> str:
        return runtime_field_name(self)

    @property
    def lookup_registry(self) -> LookupResolverRegistry:
        return self.resolvers if self.resolvers is not None else default_registry()

    def set_values(self, values: Any) -> None:
        self.values = values

    def nested(self, values: list[Any]) -> Condition:
        """
        Build the user query override condition for ``values``.

        The nested condition inherits this condition's name, lookup
        context and transform unless ``user_query`` sets them.
        """
        config: dict[str, Any] = {
            "name": self.name,
            "transform": self.transform,
            "resolvers": self.resolvers,
            "search_context": self.search_context,
        }
        config.update(self.user_query or {})
        config["values"] = values
        return Condition.model_validate(config)

    def is_blank(self) -> bool:
        """True when every value is empty and the condition is not a range."""
        return all(v == "" or v is None for v in self.values) and not self.range

    # -- lookup --------------------------------------------------------------

    def requires_lookup(self) -> bool:
        if not self.values or not isinstance(self.values[0], Mapping):
            return False
        return any(
            isinstance(v, Mapping) and not v.get(DISPLAY_FIELD) for v in self.values
        )

    def resolve_lookup(self) -> bool:
        """
        Enrich structured values with display labels.

        Runs the configured resolver only when some entry still lacks its
        label, so repeated calls are no-ops.  Returns ``True`` if the
        values were replaced.
        """
        if not self.requires_lookup():
            return False

        options = self.lookup or LookupOptions()
        resolver = self.lookup_registry.create(
            options.resolver,
            **options.resolver_options(),
            search_context=self.search_context,
            condition_name=self.name,
        )
        logger.debug(
            "Resolving %d value(s) of %s with %s",
            len(self.values),
            self.name,
            type(resolver).__name__,
        )

        loaded = list(resolver.load(self.values))
        if len(loaded) != len(self.values):
            raise LookupResolutionError(
                f"{type(resolver).__name__} returned {len(loaded)} entries "
                f"for {len(self.values)} values",
                condition_name=self.name,
            )
        self.values = loaded
        return True

    # -- output --------------------------------------------------------------

    def serialize(self) -> Any:
        """Observable state of the condition (not the query clause)."""
        if self.single:
            return self.values[0] if self.values else None
        if self.range:
            return {
                key: getattr(self, attr)
                for attr, key in _SERIALIZED_BOUNDS
                if is_present(getattr(self, attr))
            }
        return {"values": self.values, "and": bool(self.and_)}

    def compile(self) -> Clause:
        """Compile to a search clause."""
        return compile_clause(self)
