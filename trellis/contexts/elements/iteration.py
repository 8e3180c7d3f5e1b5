"""
Iteration

ForEach repeats its content once per item of a sequence value. For a
context-bound sequence the content is built once, against a binding to the
loop item, and compiled into a body formula that is replayed for every item
at render time. A constant sequence is already known, so its content is built
once per item, against that item as a constant, and folds into the
surrounding literals.
"""

from typing import Any, Callable

from trellis.contexts.binding.recovery import recover
from trellis.contexts.binding.template_value import TemplateValue
from trellis.contexts.elements.builders import build_content
from trellis.contexts.elements.node import Node, write_content
from trellis.contexts.rendering.formula import Formula


class ForEach(Node):
    """
    Repeat content for each item of a sequence.

    Args:
        sequence: TemplateValue resolving to a list or tuple (or a plain list)
        content: Called with a binding to the current item; returns the
                 content to repeat
        name: Scope name the item is pushed under. Paths built with
              ``into=name`` resolve against the item; outside the loop they
              fail with MissingContextScope. Constant sequences push no scope:
              content receives each item as a Constant instead.

    Raises:
        TypeMismatch: If a constant sequence is not a list or tuple

    Example:
        paragraphs = ForEach(
            TemplateValue.path("users"),
            lambda user: Paragraph(user.narrow("name")),
            name="user",
        )
    """

    def __init__(
        self,
        sequence: Any,
        content: Callable[[TemplateValue], Any],
        name: str = "item",
    ):
        if not isinstance(sequence, TemplateValue):
            sequence = TemplateValue.constant(sequence)
        object.__setattr__(self, "sequence", sequence)
        object.__setattr__(self, "scope", name)

        if sequence.is_dynamic:
            items = build_content(content(TemplateValue.path(into=name)))
        else:
            items = build_content(
                [content(TemplateValue.constant(item)) for item in self._constant_items()]
            )
        object.__setattr__(self, "_content", items)

    def _constant_items(self):
        items = self.sequence.value
        if items is None:
            return ()
        return recover(items, (list, tuple))

    @property
    def content(self):
        return self._content

    def build(self, writer: Any) -> None:
        if not self.sequence.is_dynamic:
            for item in self._content:
                write_content(writer, item)
            return

        body = Formula()
        for item in self._content:
            write_content(body, item)
        writer.add_iteration(self.sequence, self.scope, body)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.sequence, self.scope, self._content) == (
            other.sequence,
            other.scope,
            other._content,
        )

    __hash__ = None
