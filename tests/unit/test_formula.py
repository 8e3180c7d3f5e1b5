"""Unit tests for formula construction."""

import pytest

from trellis.contexts.binding import TemplateValue
from trellis.contexts.rendering import (
    EmitMode,
    Formula,
    FormulaSealedError,
    Iterate,
    Literal,
    ResolveAndEmit,
)
from trellis.contexts.rendering.formula import TEXT, attribute, format_value


@pytest.mark.unit
def test_adjacent_literals_are_merged():
    """Consecutive literal writes become a single instruction."""
    formula = Formula()
    formula.add_literal("<p")
    formula.add_literal(">")
    formula.add_literal("Hi")

    assert formula.seal().instructions == (Literal("<p>Hi"),)


@pytest.mark.unit
def test_empty_literals_are_ignored():
    formula = Formula()
    formula.add_literal("")

    assert len(formula.seal()) == 0
    assert formula.is_static


@pytest.mark.unit
def test_constant_values_fold_into_literals():
    """Constants are formatted at prerender time and merged with surrounding text."""
    formula = Formula()
    formula.add_literal("<p")
    formula.add_value(TemplateValue.constant("Ann"), attribute("title"))
    formula.add_literal(">")
    formula.add_value(TemplateValue.constant("a < b"))
    formula.add_literal("</p>")

    assert formula.seal().instructions == (Literal('<p title="Ann">a &lt; b</p>'),)


@pytest.mark.unit
def test_constant_none_attribute_is_dropped():
    formula = Formula()
    formula.add_literal("<p")
    formula.add_value(TemplateValue.constant(None), attribute("title"))
    formula.add_literal(">")

    assert formula.literals() == ["<p>"]


@pytest.mark.unit
def test_dynamic_value_splits_literals():
    """Dynamic values become ResolveAndEmit between two literals."""
    name = TemplateValue.path("user", "name")

    formula = Formula()
    formula.add_literal("<p")
    formula.add_value(name, attribute("title"))
    formula.add_literal(">Hi</p>")
    formula.seal()

    assert formula.literals() == ["<p", ">Hi</p>"]
    assert formula.instructions[1] == ResolveAndEmit(name, attribute("title"))
    assert formula.dynamic_count == 1
    assert not formula.is_static


@pytest.mark.unit
def test_trusted_binding_is_emitted_raw():
    formula = Formula()
    formula.add_value(TemplateValue.path("body", trusted=True))
    formula.seal()

    assert formula.instructions[0].options.mode is EmitMode.RAW


@pytest.mark.unit
def test_iteration_seals_its_body():
    body = Formula()
    body.add_literal("<li>")

    formula = Formula()
    formula.add_literal("<ul>")
    formula.add_iteration(TemplateValue.path("items"), "item", body)
    formula.add_literal("</ul>")
    formula.seal()

    assert body.is_sealed
    assert isinstance(formula.instructions[1], Iterate)
    assert formula.instructions[1].scope == "item"
    assert formula.literals() == ["<ul>", "</ul>"]


@pytest.mark.unit
def test_sealed_formula_rejects_writes():
    """No instruction can be appended after sealing."""
    formula = Formula()
    formula.add_literal("<br>")
    formula.seal()

    with pytest.raises(FormulaSealedError):
        formula.add_literal("x")

    with pytest.raises(FormulaSealedError):
        formula.add_value(TemplateValue.path("user"))

    assert formula.instructions == (Literal("<br>"),)


@pytest.mark.unit
def test_seal_is_idempotent():
    formula = Formula()
    formula.add_literal("x")

    assert formula.seal() is formula
    assert formula.seal().instructions == (Literal("x"),)


@pytest.mark.unit
def test_open_formula_shows_pending_text():
    formula = Formula()
    formula.add_literal("<p>")

    assert not formula.is_sealed
    assert formula.instructions == (Literal("<p>"),)


@pytest.mark.unit
def test_formula_equality():
    def build():
        formula = Formula()
        formula.add_literal("<p>")
        formula.add_value(TemplateValue.path("name"))
        return formula.seal()

    assert build() == build()


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ""),
        ("Ann", "Ann"),
        (3, "3"),
        (True, "true"),
        ("<b>", "&lt;b&gt;"),
    ],
)
def test_format_text(value, expected):
    assert format_value(value, TEXT) == expected
