"""
Condition → search clause compiler.

Turns a :class:`~search_conditions.condition.Condition` into one node of a
search engine's boolean query.  The produced shapes are a closed set::

    {field: value}                  # plain match (value or list)
    {field: {"all": [...]}}         # AND combinator
    {field: {"not": value}}         # exclusion
    {field: {"gte": ..., "lt": ...}}  # range
    {"or": [main, user_query]}      # user query override

Compilation never mutates the condition: values are copied before any
destructive step, so compiling twice yields equal clauses.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .condition import Condition

logger = logging.getLogger(__name__)

Clause = dict[str, Any]

USER_QUERY_MARKER = "user_query"

# First flag set wins.
_FIELD_SUFFIXES: tuple[tuple[str, str], ...] = (
    ("prefix", ".text_start"),
    ("any_text", ".text_middle"),
    ("search_analyzed", ".analyzed"),
    ("autocomplete", ".autocomplete"),
)

# (attribute, bound key), in output order.
_RANGE_BOUNDS: tuple[tuple[str, str], ...] = (
    ("from_eq", "gte"),
    ("from_", "gt"),
    ("to_eq", "lte"),
    ("to", "lt"),
)


def is_present(value: Any) -> bool:
    """A range bound is present unless it is ``None`` or ``False``."""
    return value is not None and value is not False


def runtime_field_name(condition: Condition) -> str:
    """Field name targeted by the clause, suffixed for analysed variants."""
    name = condition.field_name
    for flag, suffix in _FIELD_SUFFIXES:
        if getattr(condition, flag):
            return f"{name}{suffix}"
    return name


def _is_user_query(entry: Any) -> bool:
    return isinstance(entry, Mapping) and bool(entry.get(USER_QUERY_MARKER))


class ConditionCompiler:
    """Compiles a single condition to a clause."""

    def compile(self, condition: Condition) -> Clause:
        if condition.range:
            clause = self._compile_range(condition)
        else:
            clause = self._compile_values(condition)
        logger.debug("Compiled condition %s: %s", condition.name, clause)
        return clause

    # -- range ---------------------------------------------------------------

    def _compile_range(self, condition: Condition) -> Clause:
        bounds: dict[str, Any] = {}
        for attr, bound in _RANGE_BOUNDS:
            raw = getattr(condition, attr)
            if not is_present(raw):
                continue
            value = condition.transform(raw)
            if is_present(value):
                bounds[bound] = value
        return {runtime_field_name(condition): bounds}

    # -- values --------------------------------------------------------------

    def _compile_values(self, condition: Condition) -> Clause:
        entries = [
            dict(entry) if isinstance(entry, Mapping) else entry
            for entry in condition.values
        ]
        user_queries = [entry for entry in entries if _is_user_query(entry)]
        normal = [entry for entry in entries if not _is_user_query(entry)]

        main_clause = self._derive_main_clause(
            condition, self._transform_values(condition, normal)
        )
        user_query_clause = self._derive_user_query_clause(condition, user_queries)

        if user_query_clause:
            return {"or": [main_clause, user_query_clause]}
        return main_clause

    def _transform_values(self, condition: Condition, entries: list[Any]) -> Any:
        if not condition.single and any(isinstance(e, Mapping) for e in entries):
            entries = [e.get("key") if isinstance(e, Mapping) else e for e in entries]
        if condition.search_analyzed:
            entries = [e.lower() if isinstance(e, str) else e for e in entries]
        if len(entries) == 1:
            return entries[0]
        return entries

    def _derive_user_query_clause(
        self,
        condition: Condition,
        user_queries: list[dict[str, Any]],
    ) -> Clause | None:
        if not user_queries:
            return None

        for entry in user_queries:
            entry.pop(USER_QUERY_MARKER, None)
        return ConditionCompiler().compile(condition.nested(user_queries))

    def _derive_main_clause(self, condition: Condition, values: Any) -> Clause:
        field = runtime_field_name(condition)
        if condition.prefix:
            if condition.and_ is not None:
                return self._combinator_clause(condition, field, values)
            return {field: values}
        if condition.and_ is not None:
            return self._combinator_clause(condition, field, values)
        if condition.not_ is not None:
            if condition.not_:
                return {field: {"not": values}}
            return {field: values}
        return {field: values}

    @staticmethod
    def _combinator_clause(condition: Condition, field: str, values: Any) -> Clause:
        if condition.and_:
            return {field: {"all": values}}
        return {field: values}


def compile_clause(condition: Condition) -> Clause:
    """Compile ``condition`` with a fresh :class:`ConditionCompiler`."""
    return ConditionCompiler().compile(condition)
