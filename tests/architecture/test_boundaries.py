"""Module boundary tests: no cross-layer imports."""

from pytest_archon import archrule


def test_exceptions_are_leaf() -> None:
    """
    Exceptions are the lowest level.
    They must not import from the model, the compiler or the lookup layer.
    """
    (
        archrule("exceptions_are_leaf")
        .match("search_conditions.exceptions")
        .should_not_import("search_conditions.condition")
        .should_not_import("search_conditions.compiler")
        .should_not_import("search_conditions.lookup*")
        .should_not_import("pydantic*")
        .check("search_conditions")
    )


def test_compiler_independent_of_lookup() -> None:
    """
    Compilation is a pure function of a condition's attributes.
    It must not reach into resolvers or the fluent builder.
    """
    (
        archrule("compiler_independence")
        .match("search_conditions.compiler")
        .should_not_import("search_conditions.lookup*")
        .should_not_import("search_conditions.builder")
        .check("search_conditions", only_direct_imports=True)
    )


def test_lookup_does_not_depend_on_builder() -> None:
    """Resolvers may compile conditions but never mutate them fluently."""
    (
        archrule("lookup_no_builder")
        .match("search_conditions.lookup*")
        .should_not_import("search_conditions.builder")
        .check("search_conditions", only_direct_imports=True)
    )
