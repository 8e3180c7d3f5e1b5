"""Flow and phrasing elements used inside the body."""

from trellis.contexts.elements.attributes import GlobalAttributes
from trellis.contexts.elements.node import ContentNode, EmptyNode


class Paragraph(ContentNode, GlobalAttributes):
    """
    The element represents a paragraph.

    ```html
    <p></p>
    ```
    """

    name = "p"


class Division(ContentNode, GlobalAttributes):
    """
    The element is a generic container for flow content.

    ```html
    <div></div>
    ```
    """

    name = "div"


class Span(ContentNode, GlobalAttributes):
    """
    The element is a generic container for phrasing content.

    ```html
    <span></span>
    ```
    """

    name = "span"


class LineBreak(EmptyNode, GlobalAttributes):
    """
    The element represents a line break.

    ```html
    <br>
    ```
    """

    name = "br"


# Aliases with the official tag names
P = Paragraph
Div = Division
Br = LineBreak
