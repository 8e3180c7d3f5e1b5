"""
Renderer

Orchestrates both phases of rendering:
- prerender: walk a node tree once and compile it into a sealed Formula
- render: replay a Formula against runtime data, or walk a node tree directly

Both paths share the same formatting code, so rendering a node directly
produces exactly the output of prerendering it and replaying the result.
"""

from typing import Any, Dict, List

from trellis.contexts.binding.context_manager import ContextManager
from trellis.contexts.binding.exceptions import ResolutionError
from trellis.contexts.binding.recovery import recover
from trellis.contexts.binding.template_value import TemplateValue
from trellis.contexts.rendering.exceptions import FormulaNotFound
from trellis.contexts.rendering.formula import (
    TEXT,
    EmitOptions,
    Formula,
    Iterate,
    Literal,
    ResolveAndEmit,
    format_value,
    options_for,
)
from trellis.contexts.rendering.logger import (
    _log_debug,
    _log_info,
    log_prerender_result,
    log_render_failure,
)


def replay(formula: Formula, manager: ContextManager, output: List[str]) -> None:
    """
    Append the output of each instruction of a formula, in order.

    Raises:
        ResolutionError: On the first value that fails to resolve
    """
    for instruction in formula:
        if isinstance(instruction, Literal):
            output.append(instruction.text)
        elif isinstance(instruction, ResolveAndEmit):
            output.append(format_value(manager.resolve(instruction.value), instruction.options))
        elif isinstance(instruction, Iterate):
            iterate(instruction.value, instruction.scope, instruction.body, manager, output)
        else:
            raise TypeError(f"Unknown instruction: {instruction!r}")


def iterate(
    value: TemplateValue,
    scope: str,
    body: Formula,
    manager: ContextManager,
    output: List[str],
) -> None:
    """Replay body once per item, each item pushed as the named scope. Absent sequences emit nothing."""
    items = manager.resolve(value)
    if items is None:
        return

    path = getattr(value, "path", None)
    for item in recover(items, (list, tuple), str(path) if path is not None else None):
        with manager.push(item, name=scope):
            replay(body, manager, output)


class DirectWriter:
    """
    Single-pass writer used for one-shot rendering.

    Accepts the same calls a node makes on a Formula while it is built, but
    resolves values immediately instead of recording instructions.
    """

    def __init__(self, manager: ContextManager):
        self.manager = manager
        self._output: List[str] = []

    def add_literal(self, text: str) -> None:
        self._output.append(text)

    def add_value(self, value: TemplateValue, options: EmitOptions = TEXT) -> None:
        options = options_for(value, options)
        self._output.append(format_value(self.manager.resolve(value), options))

    def add_iteration(self, value: TemplateValue, scope: str, body: Formula) -> None:
        iterate(value, scope, body.seal(), self.manager, self._output)

    @property
    def output(self) -> str:
        return "".join(self._output)


def _as_manager(context: Any) -> ContextManager:
    if isinstance(context, ContextManager):
        return context
    return ContextManager(context)


class Renderer:
    """
    Compiles node trees into formulas and renders them against context data.

    Formulas can also be registered under a name, compiled once and replayed
    for every subsequent render.

    Example:
        renderer = Renderer()
        renderer.add("greeting", Paragraph("Hi").title(TemplateValue.path("user", "name")))

        renderer.render_named("greeting", {"user": {"name": "Ann"}})
        # '<p title="Ann">Hi</p>'
    """

    def __init__(self):
        self._cache: Dict[str, Formula] = {}

    def prerender(self, node: Any, formula: Formula = None) -> Formula:
        """
        Compile a node tree into a sealed formula.

        Args:
            node: Any node implementing prerender(formula)
            formula: Open formula to append to. A new one is created if omitted.

        Returns:
            The sealed formula
        """
        formula = formula if formula is not None else Formula()
        node.prerender(formula)
        formula.seal()

        log_prerender_result(type(node).__name__, len(formula), formula.dynamic_count)
        return formula

    def render(self, target: Any, context: Any = None) -> str:
        """
        Render a formula or a node against runtime data.

        Args:
            target: A Formula to replay, or a node to render in a single pass
            context: A ContextManager, or raw data to wrap in a new one

        Returns:
            The rendered text

        Raises:
            ResolutionError: If any value fails to resolve. No partial output
                             is returned.
        """
        manager = _as_manager(context)

        try:
            if isinstance(target, Formula):
                output: List[str] = []
                replay(target, manager, output)
                return "".join(output)
            return target.render(manager)
        except ResolutionError as e:
            log_render_failure(type(target).__name__, e)
            raise

    # Named formulas

    def add(self, name: str, node: Any) -> Formula:
        """Prerender a node and register the formula under a name, replacing any previous one."""
        formula = self.prerender(node)
        self._cache[name] = formula
        _log_info(f"Registered formula '{name}' ({len(formula)} instructions)")
        return formula

    def get_formula(self, name: str) -> Formula:
        """
        Get a registered formula.

        Raises:
            FormulaNotFound: If no formula was added under that name
        """
        if name not in self._cache:
            raise FormulaNotFound(name, sorted(self._cache))
        return self._cache[name]

    def render_named(self, name: str, context: Any = None) -> str:
        """Render a registered formula."""
        _log_debug(f"Rendering formula '{name}'")
        return self.render(self.get_formula(name), context)

    def is_cached(self, name: str) -> bool:
        return name in self._cache

    def clear_cache(self) -> None:
        """Forget every registered formula."""
        self._cache.clear()
