"""
Integration tests for two-phase rendering: build a node tree, prerender it
once, and render the resulting formula against different contexts.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest
from markupsafe import Markup

from trellis.contexts.binding import (
    ContextManager,
    MissingContextScope,
    PathNotFound,
    TemplateValue,
    TypeMismatch,
    load_context,
    optional,
)
from trellis.contexts.elements import (
    Body,
    Dd,
    Div,
    Dl,
    Document,
    Dt,
    ForEach,
    Head,
    Html,
    Paragraph,
    Span,
    Title,
)
from trellis.contexts.rendering import FormulaNotFound, Renderer

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def renderer():
    return Renderer()


def greeting():
    return Paragraph("Hi").title(TemplateValue.path("user", "name"))


@pytest.mark.integration
def test_bound_attribute(renderer):
    formula = renderer.prerender(greeting())

    assert renderer.render(formula, {"user": {"name": "Ann"}}) == '<p title="Ann">Hi</p>'


@pytest.mark.integration
def test_missing_required_value_fails(renderer):
    """A render with a missing required value raises instead of returning partial output."""
    formula = renderer.prerender(greeting())

    with pytest.raises(PathNotFound) as exc_info:
        renderer.render(formula, {"user": {}})

    assert exc_info.value.path == "user.name"


@pytest.mark.integration
def test_optional_attribute_is_omitted(renderer):
    node = Paragraph("Hi").title(TemplateValue.path("user", optional("nickname")))
    formula = renderer.prerender(node)

    assert renderer.render(formula, {"user": {}}) == "<p>Hi</p>"
    assert renderer.render(formula, {"user": {"nickname": "Annie"}}) == '<p title="Annie">Hi</p>'


@pytest.mark.integration
def test_formula_is_reused_across_contexts(renderer):
    """Static text is computed once; only the bound value changes between renders."""
    formula = renderer.prerender(greeting())

    assert formula.literals() == ["<p", ">Hi</p>"]
    assert renderer.render(formula, {"user": {"name": "Ann"}}) == '<p title="Ann">Hi</p>'
    assert renderer.render(formula, {"user": {"name": "Bob"}}) == '<p title="Bob">Hi</p>'


@pytest.mark.integration
def test_static_tree_compiles_to_a_single_literal(renderer):
    formula = renderer.prerender(Document(Html(Head(Title("T")), Body(Paragraph("x")))))

    assert formula.is_static
    assert formula.literals() == [
        "<!DOCTYPE html><html><head><title>T</title></head><body><p>x</p></body></html>"
    ]


@pytest.mark.integration
@pytest.mark.parametrize("context", [None, {}, {"user": {"name": "Ann"}}, ["unrelated"]])
def test_constant_tree_ignores_context(renderer, context):
    """Trees without bound values render the same whatever context is supplied."""
    node = Div(Paragraph("Hi").title("Greeting"), Span(TemplateValue.constant(3)))
    expected = '<div><p title="Greeting">Hi</p><span>3</span></div>'

    assert renderer.render(node, context) == expected
    assert renderer.render(renderer.prerender(node), context) == expected


@pytest.mark.integration
def test_prerender_is_idempotent(renderer):
    node = Dl(
        Dt(TemplateValue.path("title")),
        ForEach(TemplateValue.path("terms"), lambda term: Dd(term.narrow("name")), name="term"),
    )

    assert renderer.prerender(node) == renderer.prerender(node)


@pytest.mark.integration
def test_resolved_values_are_escaped(renderer):
    node = Paragraph(TemplateValue.path("comment")).title(TemplateValue.path("author"))
    context = {"comment": "<script>alert(1)</script>", "author": '"Ann" & co'}

    assert renderer.render(renderer.prerender(node), context) == (
        '<p title="&#34;Ann&#34; &amp; co">&lt;script&gt;alert(1)&lt;/script&gt;</p>'
    )


@pytest.mark.integration
def test_trusted_markup_is_emitted_raw(renderer):
    node = Div(TemplateValue.path("body"), TemplateValue.path("html", trusted=True))
    context = {"body": Markup("<em>safe</em>"), "html": "<b>trusted</b>"}

    assert renderer.render(renderer.prerender(node), context) == (
        "<div><em>safe</em><b>trusted</b></div>"
    )


@pytest.mark.integration
def test_typed_binding(renderer):
    node = Span(TemplateValue.path("count", expected=int))
    formula = renderer.prerender(node)

    assert renderer.render(formula, {"count": 3}) == "<span>3</span>"
    with pytest.raises(TypeMismatch):
        renderer.render(formula, {"count": "3"})


@pytest.mark.integration
@pytest.mark.parametrize(
    "context",
    [
        {"user": {"name": "Ann", "nickname": "Annie"}, "site": "Docs"},
        {"user": {"name": "Bob"}, "site": "Docs"},
        {"user": {"name": "<Eve>", "nickname": None}, "site": "Docs & Co"},
    ],
)
def test_direct_and_cached_rendering_agree(renderer, context):
    """Rendering a tree directly produces the same text as replaying its formula."""
    node = Document(
        Html(
            Head(Title(TemplateValue.path("site"))),
            Body(
                Paragraph(TemplateValue.path("user", "name")),
                Paragraph("Hi").title(TemplateValue.path("user", optional("nickname"))),
            ),
        )
    )

    cached = renderer.render(renderer.prerender(node), context)
    direct = renderer.render(node, context)

    assert cached == direct


@pytest.mark.integration
class TestForEach:
    """Iteration over sequences in the context."""

    def glossary(self):
        return Dl(
            ForEach(
                TemplateValue.path("terms"),
                lambda term: [Dt(term.narrow("name")), Dd(term.narrow("definition"))],
                name="term",
            )
        )

    def test_repeats_content_per_item(self, renderer):
        context = load_context(FIXTURES_PATH / "glossary.yaml")

        assert renderer.render(renderer.prerender(self.glossary()), context) == (
            "<dl>"
            "<dt>Formula</dt><dd>Compiled form of a node tree</dd>"
            "<dt>Scope</dt><dd>Data pushed for one iteration</dd>"
            "</dl>"
        )

    def test_empty_sequence(self, renderer):
        assert renderer.render(renderer.prerender(self.glossary()), {"terms": []}) == "<dl></dl>"

    def test_direct_rendering_matches(self, renderer):
        context = load_context(FIXTURES_PATH / "glossary.yaml")

        assert renderer.render(self.glossary(), context) == renderer.render(
            renderer.prerender(self.glossary()), context
        )

    def test_constant_sequence_is_unrolled(self, renderer):
        """A constant sequence folds into the surrounding literal text."""
        node = Div(ForEach(["a", "b"], lambda letter: Span(letter)))
        formula = renderer.prerender(node)

        assert formula.is_static
        assert formula.literals() == ["<div><span>a</span><span>b</span></div>"]
        assert renderer.render(formula) == renderer.render(node) == formula.literals()[0]

    def test_constant_items_can_be_narrowed(self, renderer):
        terms = [{"name": "Formula"}, {"name": "Scope"}]
        node = Dl(ForEach(terms, lambda term: Dt(term.narrow("name"))))

        assert renderer.prerender(node).literals() == ["<dl><dt>Formula</dt><dt>Scope</dt></dl>"]

    def test_constant_none_sequence_renders_nothing(self, renderer):
        assert renderer.render(Dl(ForEach(None, lambda term: Dt(term)))) == "<dl></dl>"

    def test_constant_non_sequence_fails_at_construction(self):
        with pytest.raises(TypeMismatch):
            ForEach("Formula", lambda term: Dt(term))

    def test_scalar_items_do_not_shadow_outer_paths(self, renderer):
        """Unscoped paths skip item scopes that do not hold them, even when items are strings."""
        node = Div(
            ForEach(
                TemplateValue.path("tags"),
                lambda tag: Span(tag, " ", TemplateValue.path("title")),
                name="tag",
            )
        )
        context = {"title": "Docs", "tags": ["a", "b"]}
        expected = "<div><span>a Docs</span><span>b Docs</span></div>"

        assert renderer.render(renderer.prerender(node), context) == expected
        assert renderer.render(node, context) == expected

    def test_item_is_not_visible_outside_loop(self, renderer):
        node = Paragraph(TemplateValue.path("name", into="term"))

        with pytest.raises(MissingContextScope):
            renderer.render(renderer.prerender(node), {"name": "Root"})

    def test_outer_scope_is_visible_inside_loop(self, renderer):
        node = Div(
            ForEach(
                TemplateValue.path("terms"),
                lambda term: Span(term.narrow("name"), " (", TemplateValue.path("title"), ")"),
                name="term",
            )
        )
        context = {"title": "Glossary", "terms": [{"name": "Formula"}]}

        assert renderer.render(renderer.prerender(node), context) == (
            "<div><span>Formula (Glossary)</span></div>"
        )

    def test_non_sequence_fails(self, renderer):
        with pytest.raises(TypeMismatch):
            renderer.render(renderer.prerender(self.glossary()), {"terms": "Formula"})

    def test_optional_absent_sequence_renders_nothing(self, renderer):
        node = Dl(ForEach(TemplateValue.path(optional("terms")), lambda term: Dt(term)))

        assert renderer.render(renderer.prerender(node), {}) == "<dl></dl>"

    def test_scope_is_popped_after_failure(self, renderer):
        """A failure inside the loop leaves the manager at its root scope."""
        manager = ContextManager({"terms": [{"name": "Formula"}]})

        with pytest.raises(PathNotFound):
            renderer.render(renderer.prerender(self.glossary()), manager)

        assert manager.depth == 1


@pytest.mark.integration
def test_shared_formula_across_threads(renderer):
    """A sealed formula can be rendered concurrently, one context per render."""
    formula = renderer.prerender(greeting())
    names = [f"user{i}" for i in range(50)]

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(
            executor.map(lambda name: renderer.render(formula, {"user": {"name": name}}), names)
        )

    assert results == [f'<p title="{name}">Hi</p>' for name in names]


@pytest.mark.integration
class TestRegistry:
    """Named formulas are compiled once and replayed on demand."""

    def test_render_named(self, renderer):
        renderer.add("greeting", greeting())

        assert renderer.is_cached("greeting")
        assert renderer.render_named("greeting", {"user": {"name": "Ann"}}) == (
            '<p title="Ann">Hi</p>'
        )

    def test_same_formula_is_returned(self, renderer):
        formula = renderer.add("greeting", greeting())

        assert renderer.get_formula("greeting") is formula

    def test_unknown_name(self, renderer):
        renderer.add("greeting", greeting())

        with pytest.raises(FormulaNotFound) as exc_info:
            renderer.render_named("farewell", {})

        assert exc_info.value.name == "farewell"
        assert exc_info.value.available == ["greeting"]

    def test_clear_cache(self, renderer):
        renderer.add("greeting", greeting())
        renderer.clear_cache()

        assert not renderer.is_cached("greeting")
