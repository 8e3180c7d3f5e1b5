"""
Ruby annotation elements. The ruby element only allows these elements as its descendants.
"""

from trellis.contexts.elements.attributes import GlobalAttributes
from trellis.contexts.elements.node import ContentNode


class Ruby(ContentNode, GlobalAttributes):
    """
    The element marks a base text with a ruby annotation.

    ```html
    <ruby></ruby>
    ```
    """

    name = "ruby"


class RubyText(ContentNode, GlobalAttributes):
    """
    The element marks the ruby text component of a ruby annotation.

    ```html
    <rt></rt>
    ```
    """

    name = "rt"


class RubyPronunciation(ContentNode, GlobalAttributes):
    """
    The element provides fallback parentheses for browsers without ruby support.

    ```html
    <rp></rp>
    ```
    """

    name = "rp"


# Rt and Rp are the official tags and can be used instead
Rt = RubyText
Rp = RubyPronunciation
