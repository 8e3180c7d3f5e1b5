"""
Elements Context

Responsibilities:
- Represents markup as immutable nodes with ordered attributes and content
- Provides the mutate primitive and the attribute setters built on it
- Applies conditional modifications (modify_if, modify_unwrap)
- Repeats content over sequences (ForEach)

Owns: Node types, attribute setters, element catalogue
Never: Resolves context data itself (delegates to the rendering context)
"""

from trellis.contexts.elements.attributes import BodyEventAttributes, GlobalAttributes
from trellis.contexts.elements.body_elements import (
    Br,
    Div,
    Division,
    LineBreak,
    P,
    Paragraph,
    Span,
)
from trellis.contexts.elements.builders import build_content
from trellis.contexts.elements.definition_elements import (
    Dd,
    DescriptionList,
    Dl,
    Dt,
    TermDefinition,
    TermName,
)
from trellis.contexts.elements.html_elements import Body, Head, Html, Title
from trellis.contexts.elements.iteration import ForEach
from trellis.contexts.elements.modifiers import Modifiable
from trellis.contexts.elements.node import ContentNode, Document, ElementNode, EmptyNode, Node
from trellis.contexts.elements.ruby_elements import Rp, Rt, Ruby, RubyPronunciation, RubyText
from trellis.contexts.elements.types import (
    Capitalization,
    Decision,
    Direction,
    Hint,
    Language,
    Roles,
)

__all__ = [
    # Node base classes
    "Node",
    "ElementNode",
    "ContentNode",
    "EmptyNode",
    "Document",
    "ForEach",
    "Modifiable",
    "build_content",
    # Attribute mixins and values
    "GlobalAttributes",
    "BodyEventAttributes",
    "Capitalization",
    "Decision",
    "Direction",
    "Hint",
    "Language",
    "Roles",
    # Elements
    "Html",
    "Head",
    "Title",
    "Body",
    "Paragraph",
    "P",
    "Division",
    "Div",
    "Span",
    "LineBreak",
    "Br",
    "Ruby",
    "RubyText",
    "Rt",
    "RubyPronunciation",
    "Rp",
    "DescriptionList",
    "Dl",
    "TermName",
    "Dt",
    "TermDefinition",
    "Dd",
]
