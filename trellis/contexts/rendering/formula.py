"""
Formula

The compiled, render-independent form of a node tree: an ordered list of
instructions produced by walking the tree once. Constant content is folded
into Literal instructions as it is written, so adjacent static output always
ends up in a single Literal. Context-bound values become ResolveAndEmit
instructions that are evaluated on every render.

A Formula is sealed once prerendering finishes. Sealed formulas carry no
per-render state and can be shared between threads.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Optional, Tuple, Union

from trellis.contexts.binding.template_value import Dynamic, TemplateValue
from trellis.contexts.rendering.exceptions import FormulaSealedError
from trellis.utils.escaping import escape_attribute, escape_text, raw


class EmitMode(Enum):
    """How a value is written to the output."""

    TEXT = "text"
    ATTRIBUTE = "attribute"
    RAW = "raw"


@dataclass(frozen=True)
class EmitOptions:
    """
    Formatting options for a single emitted value.

    Attributes:
        mode: Escaping mode
        name: Attribute name, required for ATTRIBUTE mode. The whole
              ` name="value"` pair is written, or nothing when the value is absent.
    """

    mode: EmitMode = EmitMode.TEXT
    name: Optional[str] = None


TEXT = EmitOptions()


def attribute(name: str) -> EmitOptions:
    return EmitOptions(mode=EmitMode.ATTRIBUTE, name=name)


def format_value(value: Any, options: EmitOptions) -> str:
    """
    Format a concrete value for output.

    None produces no output at all.
    """
    if value is None:
        return ""
    if options.mode is EmitMode.ATTRIBUTE:
        return f' {options.name}="{escape_attribute(value)}"'
    if options.mode is EmitMode.RAW:
        return raw(value)
    return escape_text(value)


def options_for(value: TemplateValue, options: EmitOptions) -> EmitOptions:
    """Switch text emission to RAW for values marked as trusted markup."""
    if options.mode is EmitMode.TEXT and getattr(value, "trusted", False):
        return EmitOptions(mode=EmitMode.RAW)
    return options


@dataclass(frozen=True)
class Literal:
    """Emit fixed text."""

    text: str


@dataclass(frozen=True)
class ResolveAndEmit:
    """Resolve a context-bound value at render time and emit its formatted form."""

    value: Dynamic
    options: EmitOptions = TEXT


@dataclass(frozen=True)
class Iterate:
    """Replay a body formula once per item of a sequence, with the item pushed as a named scope."""

    value: TemplateValue
    scope: str
    body: "Formula"


Instruction = Union[Literal, ResolveAndEmit, Iterate]


class Formula:
    """
    Ordered, append-only instruction sequence.

    Example:
        formula = Formula()
        formula.add_literal("<p>")
        formula.add_value(TemplateValue.path("user", "name"))
        formula.add_literal("</p>")
        formula.seal()
    """

    def __init__(self):
        self._instructions: List[Instruction] = []
        self._pending: List[str] = []
        self._sealed = False

    # Writing

    def add_literal(self, text: str) -> None:
        """Append fixed text, merging with any literal written just before."""
        self._check_writable()
        if text:
            self._pending.append(text)

    def add_value(self, value: TemplateValue, options: EmitOptions = TEXT) -> None:
        """
        Append a value.

        Constant values are formatted immediately and folded into the literal
        text. Dynamic values become ResolveAndEmit instructions.
        """
        self._check_writable()
        options = options_for(value, options)

        if not value.is_dynamic:
            self.add_literal(format_value(value.resolve(), options))
            return

        self._flush()
        self._instructions.append(ResolveAndEmit(value, options))

    def add_iteration(self, value: TemplateValue, scope: str, body: "Formula") -> None:
        """Append an iteration over a sequence value. The body is sealed if it isn't already."""
        self._check_writable()
        self._flush()
        self._instructions.append(Iterate(value, scope, body.seal()))

    def seal(self) -> "Formula":
        """Finish writing. Returns self for chaining."""
        if not self._sealed:
            self._flush()
            self._instructions = tuple(self._instructions)
            self._sealed = True
        return self

    def _flush(self) -> None:
        if self._pending:
            self._instructions.append(Literal("".join(self._pending)))
            self._pending = []

    def _check_writable(self) -> None:
        if self._sealed:
            raise FormulaSealedError("Formula is sealed and can no longer be written to")

    # Reading

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    @property
    def instructions(self) -> Tuple[Instruction, ...]:
        if self._sealed:
            return self._instructions
        return tuple(self._instructions) + (
            (Literal("".join(self._pending)),) if self._pending else ()
        )

    @property
    def is_static(self) -> bool:
        """True if rendering needs no context data."""
        return all(isinstance(instruction, Literal) for instruction in self.instructions)

    @property
    def dynamic_count(self) -> int:
        return sum(not isinstance(instruction, Literal) for instruction in self.instructions)

    def literals(self) -> List[str]:
        """Text of every Literal instruction, in order."""
        return [i.text for i in self.instructions if isinstance(i, Literal)]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __len__(self) -> int:
        return len(self.instructions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Formula):
            return NotImplemented
        return self.instructions == other.instructions

    __hash__ = None

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else "open"
        return f"Formula({len(self)} instructions, {state})"
