"""
Document-level elements. The html element only allows these elements as its descendants.
"""

from trellis.contexts.elements.attributes import BodyEventAttributes, GlobalAttributes
from trellis.contexts.elements.node import ContentNode


class Html(ContentNode, GlobalAttributes):
    """
    The element is the root of a document.

    ```html
    <html></html>
    ```
    """

    name = "html"


class Head(ContentNode, GlobalAttributes):
    """
    The element contains the information about the document's content.

    ```html
    <head></head>
    ```
    """

    name = "head"


class Title(ContentNode, GlobalAttributes):
    """
    The element represents the document's title.

    ```html
    <title></title>
    ```
    """

    name = "title"


class Body(ContentNode, GlobalAttributes, BodyEventAttributes):
    """
    The element contains the document's content.

    ```html
    <body></body>
    ```
    """

    name = "body"
