"""
Description list elements. The dl element only allows these elements as its descendants.
"""

from trellis.contexts.elements.attributes import GlobalAttributes
from trellis.contexts.elements.node import ContentNode


class DescriptionList(ContentNode, GlobalAttributes):
    """
    The element represents a list of term/description groups.

    ```html
    <dl></dl>
    ```
    """

    name = "dl"


class TermName(ContentNode, GlobalAttributes):
    """
    The element specifies a term name.

    ```html
    <dt></dt>
    ```
    """

    name = "dt"


class TermDefinition(ContentNode, GlobalAttributes):
    """
    The element specifies a term definition.

    ```html
    <dd></dd>
    ```
    """

    name = "dd"


# Dl, Dt and Dd are the official tags and can be used instead
Dl = DescriptionList
Dt = TermName
Dd = TermDefinition
