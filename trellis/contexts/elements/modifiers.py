"""
Modifier Engine

Conditional node transformations. Both modifiers return a new node (or the
original one unchanged); nodes are never modified in place.
"""

from typing import Any, Callable, TypeVar

from trellis.contexts.binding.template_value import TemplateValue

T = TypeVar("T", bound="Modifiable")


class Modifiable:
    """Mixin adding modify_if and modify_unwrap to nodes."""

    def modify_if(self: T, condition: bool, element: Callable[[T], T]) -> T:
        """
        Apply element to the node only if condition holds.

        element is not called at all when condition is False.

        Example:
            Paragraph("Hi").modify_if(is_admin, lambda p: p.class_("admin"))
        """
        if condition:
            return element(self)
        return self

    def modify_unwrap(self: T, value: Any, element: Callable[[T, TemplateValue], T]) -> T:
        """
        Apply element with the unwrapped form of an optional value.

        - Constant holding None (or a plain None): the node is returned unchanged
        - Constant holding a value (or a plain value): element is applied with
          that value wrapped as a Constant
        - Dynamic: element is applied immediately with the non-optional view of
          the binding. Whether the value is present is only known at render
          time, where an absent value produces no output.

        Example:
            Paragraph("Hi").modify_unwrap(
                TemplateValue.path("user", optional("nickname")),
                lambda p, nickname: p.title(nickname),
            )
        """
        if not isinstance(value, TemplateValue):
            value = TemplateValue.constant(value)

        if value.is_dynamic:
            return element(self, value.unwrapped())

        if value.value is None:
            return self

        return element(self, TemplateValue.constant(value.value))
