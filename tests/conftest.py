"""Shared fixtures for condition tests."""

from __future__ import annotations

from typing import Any

import pytest

from search_conditions.lookup import build_default_registry


class FakeSearchContext:
    """In-memory search that answers ``{field: value(s)}`` clauses."""

    def __init__(self, documents: list[dict[str, Any]]) -> None:
        self.documents = documents
        self.clauses: list[dict[str, Any]] = []

    def search(self, clause: dict[str, Any]) -> list[dict[str, Any]]:
        self.clauses.append(clause)
        ((field, wanted),) = clause.items()
        wanted = wanted if isinstance(wanted, list) else [wanted]
        wanted_keys = {str(w) for w in wanted}
        return [d for d in self.documents if str(d.get(field)) in wanted_keys]


@pytest.fixture
def registry():
    """Fresh resolver registry with the text lookup registered."""
    return build_default_registry()


@pytest.fixture
def companies() -> FakeSearchContext:
    return FakeSearchContext(
        [
            {"company_id": 1, "company_name": "Foo Inc"},
            {"company_id": 2, "company_name": "Bar Inc"},
            {"company_id": 3, "company_name": "Apex Inc"},
        ]
    )
