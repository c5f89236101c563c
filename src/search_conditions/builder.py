"""
Fluent setters for incrementally configuring a condition.

Example::

    condition = Condition(name="tags")
    ConditionBuilder(condition).and_(["funny", "stupid"])
    condition.compile()
    # → {"tags": {"all": ["funny", "stupid"]}}

    ConditionBuilder(Condition(name="age")).gt(8).lte(34).build().compile()
    # → {"age": {"gt": 8, "lte": 34}}

Each setter mutates the wrapped condition and returns the builder, so
calls chain.  Range setters accumulate: ``gt`` then ``lte`` sets both
bounds.
"""

from __future__ import annotations

from typing import Any

from .condition import Condition


class ConditionBuilder:
    """Incremental, chainable mutation of a :class:`Condition`."""

    def __init__(self, condition: Condition) -> None:
        self._condition = condition

    @classmethod
    def for_name(cls, name: str, **attrs: Any) -> ConditionBuilder:
        """Start from a fresh condition called ``name``."""
        return cls(Condition(name=name, **attrs))

    # -- values --------------------------------------------------------------

    def eq(self, value: Any) -> ConditionBuilder:
        self._condition.set_values(value)
        return self

    def in_(self, values: Any) -> ConditionBuilder:
        return self.eq(values)

    def or_(self, values: Any) -> ConditionBuilder:
        """Match any of ``values``."""
        self._condition.and_ = False
        return self.eq(values)

    def and_(self, values: Any) -> ConditionBuilder:
        """Match all of ``values``."""
        self._condition.and_ = True
        return self.eq(values)

    def not_(self, values: Any) -> ConditionBuilder:
        """Exclude ``values``."""
        self._condition.not_ = True
        return self.eq(values)

    # -- analysed variants ---------------------------------------------------

    def starts_with(self, values: Any) -> ConditionBuilder:
        self._condition.prefix = True
        return self.eq(values)

    def any_text(self, values: Any) -> ConditionBuilder:
        self._condition.any_text = True
        return self.eq(values)

    def autocomplete(self, values: Any) -> ConditionBuilder:
        self._condition.autocomplete = True
        return self.eq(values)

    def analyzed(self, values: Any) -> ConditionBuilder:
        self._condition.search_analyzed = True
        return self.eq(values)

    # -- ranges --------------------------------------------------------------

    def gt(self, value: Any) -> ConditionBuilder:
        return self._bound("from_", value)

    def gte(self, value: Any) -> ConditionBuilder:
        return self._bound("from_eq", value)

    def lt(self, value: Any) -> ConditionBuilder:
        return self._bound("to", value)

    def lte(self, value: Any) -> ConditionBuilder:
        return self._bound("to_eq", value)

    def within(self, low: Any, high: Any) -> ConditionBuilder:
        """Exclusive range: ``low < value < high``."""
        return self.gt(low).lt(high)

    def within_eq(self, low: Any, high: Any) -> ConditionBuilder:
        """Inclusive range: ``low <= value <= high``."""
        return self.gte(low).lte(high)

    # -- build ---------------------------------------------------------------

    def build(self) -> Condition:
        return self._condition

    # -- internals -----------------------------------------------------------

    def _bound(self, attr: str, value: Any) -> ConditionBuilder:
        self._condition.range = True
        setattr(self._condition, attr, value)
        return self
