"""
Attribute Mixins

Convenience setters shared by element types. Every setter goes through
``mutate`` and therefore returns a new node.

Values typed as AttributeValue accept plain values as well as TemplateValues,
so any of them can be bound to the render context.
"""

import warnings
from typing import Any, TypeVar, Union

from trellis.contexts.binding.template_value import TemplateValue
from trellis.contexts.elements.types import (
    Capitalization,
    Decision,
    Direction,
    Hint,
    Language,
    Roles,
)

T = TypeVar("T")
AttributeValue = Union[str, TemplateValue]


class GlobalAttributes:
    """Attributes available on every HTML element."""

    def access_key(self: T, value: AttributeValue) -> T:
        return self.mutate("accesskey", value)

    def autocapitalize(self: T, type: Capitalization) -> T:
        return self.mutate("autocapitalize", type.value)

    def autofocus(self: T) -> T:
        return self.mutate("autofocus", "autofocus")

    def class_(self: T, value: AttributeValue) -> T:
        return self.mutate("class", value)

    def is_editable(self: T, condition: bool) -> T:
        return self.mutate("contenteditable", condition)

    def direction(self: T, type: Direction) -> T:
        return self.mutate("dir", type.value)

    def is_draggable(self: T, condition: bool) -> T:
        return self.mutate("draggable", condition)

    def enter_key_hint(self: T, type: Hint) -> T:
        return self.mutate("enterkeyhint", type.value)

    def hidden(self: T) -> T:
        return self.mutate("hidden", "hidden")

    def input_mode(self: T, value: AttributeValue) -> T:
        return self.mutate("inputmode", value)

    def is_(self: T, value: AttributeValue) -> T:
        return self.mutate("is", value)

    def item_id(self: T, value: AttributeValue) -> T:
        return self.mutate("itemid", value)

    def item_property(self: T, value: AttributeValue) -> T:
        return self.mutate("itemprop", value)

    def item_reference(self: T, value: AttributeValue) -> T:
        return self.mutate("itemref", value)

    def item_scope(self: T, value: AttributeValue) -> T:
        return self.mutate("itemscope", value)

    def item_type(self: T, value: AttributeValue) -> T:
        return self.mutate("itemtype", value)

    def id(self: T, value: AttributeValue) -> T:
        return self.mutate("id", value)

    def language(self: T, type: Language) -> T:
        return self.mutate("lang", type.value)

    def nonce(self: T, value: AttributeValue) -> T:
        return self.mutate("nonce", value)

    def role(self: T, value: Union[Roles, str]) -> T:
        if isinstance(value, str):
            warnings.warn(
                "Passing a string to role() is deprecated, use Roles instead",
                DeprecationWarning,
                stacklevel=2,
            )
            return self.mutate("role", value)
        return self.mutate("role", value.value)

    def has_spell_check(self: T, condition: bool) -> T:
        return self.mutate("spellcheck", condition)

    def style(self: T, value: AttributeValue) -> T:
        return self.mutate("style", value)

    def tab_index(self: T, value: Union[int, TemplateValue]) -> T:
        return self.mutate("tabindex", value)

    def title(self: T, value: AttributeValue) -> T:
        return self.mutate("title", value)

    def translate(self: T, value: Union[Decision, str]) -> T:
        if isinstance(value, str):
            warnings.warn(
                "Passing a string to translate() is deprecated, use Decision instead",
                DeprecationWarning,
                stacklevel=2,
            )
            return self.mutate("translate", value)
        return self.mutate("translate", value.value)

    def custom(self: T, key: str, value: Any) -> T:
        """Set an attribute that has no dedicated setter."""
        return self.mutate(key, value)


class BodyEventAttributes:
    """Window event handler attributes of the body element."""

    def on_after_print(self: T, value: AttributeValue) -> T:
        return self.mutate("onafterprint", value)

    def on_before_print(self: T, value: AttributeValue) -> T:
        return self.mutate("onbeforeprint", value)

    def on_before_unload(self: T, value: AttributeValue) -> T:
        return self.mutate("onbeforeunload", value)

    def on_hash_change(self: T, value: AttributeValue) -> T:
        return self.mutate("onhashchange", value)

    def on_load(self: T, value: AttributeValue) -> T:
        return self.mutate("onload", value)

    def on_offline(self: T, value: AttributeValue) -> T:
        return self.mutate("onoffline", value)

    def on_online(self: T, value: AttributeValue) -> T:
        return self.mutate("ononline", value)

    def on_page_show(self: T, value: AttributeValue) -> T:
        return self.mutate("onpageshow", value)

    def on_resize(self: T, value: AttributeValue) -> T:
        return self.mutate("onresize", value)
