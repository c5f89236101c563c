"""Tests for the ConditionBuilder fluent API."""

from __future__ import annotations

import pytest

from search_conditions import Condition, ConditionBuilder


@pytest.fixture
def name() -> ConditionBuilder:
    return ConditionBuilder.for_name("name")


@pytest.fixture
def tags() -> ConditionBuilder:
    return ConditionBuilder.for_name("tags")


@pytest.fixture
def age() -> ConditionBuilder:
    return ConditionBuilder.for_name("age")


# -- Values ------------------------------------------------------------------


def test_eq(name: ConditionBuilder):
    assert name.eq("Homer").build().compile() == {"name": "Homer"}


def test_in(name: ConditionBuilder):
    assert name.in_(["Homer", "Bart"]).build().compile() == {"name": ["Homer", "Bart"]}


def test_or(tags: ConditionBuilder):
    condition = tags.or_(["funny", "stupid"]).build()
    assert condition.and_ is False
    assert condition.compile() == {"tags": ["funny", "stupid"]}


def test_and(tags: ConditionBuilder):
    condition = tags.and_(["funny", "stupid"]).build()
    assert condition.compile() == {"tags": {"all": ["funny", "stupid"]}}


def test_not(name: ConditionBuilder):
    assert name.not_("Bart").build().compile() == {"name": {"not": "Bart"}}
    assert name.not_(["Bart", "Lisa"]).build().compile() == {
        "name": {"not": ["Bart", "Lisa"]}
    }


def test_setting_values_replaces(name: ConditionBuilder):
    condition = name.eq("Homer").eq("Marge").build()
    assert condition.values == ["Marge"]


# -- Analysed variants -------------------------------------------------------


def test_starts_with(name: ConditionBuilder):
    assert name.starts_with(["ba", "li"]).build().compile() == {
        "name.text_start": ["ba", "li"]
    }


def test_any_text(name: ConditionBuilder):
    assert name.any_text("ar").build().compile() == {"name.text_middle": "ar"}


def test_autocomplete(name: ConditionBuilder):
    assert name.autocomplete("ba").build().compile() == {"name.autocomplete": "ba"}


def test_analyzed(name: ConditionBuilder):
    assert name.analyzed("Homer").build().compile() == {"name.analyzed": "homer"}


def test_starts_with_structured_entries(name: ConditionBuilder):
    condition = name.starts_with([{"id": 1, "key": "ho", "text": "Label"}]).build()
    assert condition.compile() == {"name.text_start": "ho"}


# -- Ranges ------------------------------------------------------------------


@pytest.mark.parametrize(
    ("setter", "key"),
    [("gt", "gt"), ("gte", "gte"), ("lt", "lt"), ("lte", "lte")],
)
def test_single_bound(age: ConditionBuilder, setter: str, key: str):
    condition = getattr(age, setter)(34).build()
    assert condition.range is True
    assert condition.compile() == {"age": {key: 34}}


def test_bounds_accumulate(age: ConditionBuilder):
    assert age.gt(8).lte(34).build().compile() == {"age": {"gt": 8, "lte": 34}}


def test_within(age: ConditionBuilder):
    assert age.within(10, 38).build().compile() == {"age": {"gt": 10, "lt": 38}}


def test_within_eq(age: ConditionBuilder):
    assert age.within_eq(10, 34).build().compile() == {"age": {"gte": 10, "lte": 34}}


def test_range_transform_via_builder():
    condition = (
        ConditionBuilder.for_name("age", transform=lambda v: int(v) + 2)
        .lt("11")
        .build()
    )
    assert condition.compile() == {"age": {"lt": 13}}


# -- Wrapping ----------------------------------------------------------------


def test_builder_mutates_wrapped_condition():
    condition = Condition(name="tags")
    ConditionBuilder(condition).and_(["a", "b"])
    assert condition.compile() == {"tags": {"all": ["a", "b"]}}


def test_keywords_stay_single():
    condition = ConditionBuilder.for_name("keywords").eq("homer").build()
    assert condition.single is True
    assert condition.serialize() == "homer"
