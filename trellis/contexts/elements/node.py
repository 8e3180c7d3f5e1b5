"""
Nodes

Immutable values representing markup. Every node writes itself to a writer
(a Formula while prerendering, a DirectWriter while rendering in one pass)
through add_literal / add_value / add_iteration, so both rendering paths see
exactly the same sequence of calls.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, TypeVar

from trellis.contexts.binding.context_manager import ContextManager
from trellis.contexts.binding.template_value import TemplateValue
from trellis.contexts.elements.builders import build_content
from trellis.contexts.elements.modifiers import Modifiable
from trellis.contexts.rendering.formula import Formula, attribute
from trellis.contexts.rendering.renderer import DirectWriter

N = TypeVar("N", bound="ElementNode")


def write_content(writer: Any, item: Any) -> None:
    """Write one content item: a node, a TemplateValue, or a plain value."""
    if isinstance(item, Node):
        item.build(writer)
    elif isinstance(item, TemplateValue):
        writer.add_value(item)
    else:
        writer.add_value(TemplateValue.constant(item))


def write_attribute(writer: Any, name: str, value: Any) -> None:
    """Write one ` name="value"` pair. Constant None values are omitted."""
    if not isinstance(value, TemplateValue):
        value = TemplateValue.constant(value)
    writer.add_value(value, attribute(name))


class Node:
    """Base class for everything that can be prerendered and rendered."""

    def build(self, writer: Any) -> None:
        raise NotImplementedError

    def prerender(self, formula: Formula) -> None:
        """Append this node's instructions to a formula."""
        self.build(formula)

    def render(self, manager: ContextManager) -> str:
        """Render this node directly, without keeping a formula."""
        writer = DirectWriter(manager)
        self.build(writer)
        return writer.output

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")


class ElementNode(Node, Modifiable):
    """
    Base class for markup elements.

    Attributes keep insertion order. Subclasses set the class attribute
    ``name`` to their tag name.
    """

    name: str = ""

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None):
        object.__setattr__(self, "_attributes", dict(attributes or {}))
        object.__setattr__(self, "_content", ())

    @property
    def attributes(self) -> Mapping[str, Any]:
        """Read-only view of the attributes, in insertion order."""
        return MappingProxyType(self._attributes)

    @property
    def content(self) -> Tuple[Any, ...]:
        return self._content

    def mutate(self: N, key: str, value: Any) -> N:
        """
        Return a new node with one attribute added or overwritten.

        An overwritten attribute keeps its original position. All other
        attributes and the content are unchanged (and shared).
        """
        attributes = dict(self._attributes)
        attributes[key] = value
        return self._copy(attributes=attributes)

    def _copy(self: N, attributes: Dict[str, Any] = None, content: Tuple[Any, ...] = None) -> N:
        clone = object.__new__(type(self))
        object.__setattr__(clone, "_attributes", self._attributes if attributes is None else attributes)
        object.__setattr__(clone, "_content", self._content if content is None else content)
        return clone

    def _build_open_tag(self, writer: Any) -> None:
        writer.add_literal(f"<{self.name}")
        for key, value in self._attributes.items():
            write_attribute(writer, key, value)
        writer.add_literal(">")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._attributes == other._attributes and self._content == other._content

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(attributes={self._attributes!r}, content={self._content!r})"


class ContentNode(ElementNode):
    """An element with content: ``<name ...>content</name>``."""

    def __init__(self, *content: Any, attributes: Optional[Mapping[str, Any]] = None):
        super().__init__(attributes)
        object.__setattr__(self, "_content", build_content(*content))

    def build(self, writer: Any) -> None:
        self._build_open_tag(writer)
        for item in self._content:
            write_content(writer, item)
        writer.add_literal(f"</{self.name}>")


class EmptyNode(ElementNode):
    """A void element without content or end tag: ``<name ...>``."""

    def build(self, writer: Any) -> None:
        self._build_open_tag(writer)


class Document(Node):
    """
    A complete HTML document.

    ```html
    <!DOCTYPE html>
    ```
    """

    def __init__(self, *content: Any):
        object.__setattr__(self, "_content", build_content(*content))

    @property
    def content(self) -> Tuple[Any, ...]:
        return self._content

    def build(self, writer: Any) -> None:
        writer.add_literal("<!DOCTYPE html>")
        for item in self._content:
            write_content(writer, item)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._content == other._content

    __hash__ = None
