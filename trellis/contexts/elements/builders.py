"""Content flattening for node constructors."""

from types import GeneratorType
from typing import Any, Tuple


def build_content(*items: Any) -> Tuple[Any, ...]:
    """
    Flatten constructor arguments into an ordered content tuple.

    Single items are kept as they are, lists, tuples and generators are
    expanded in place (recursively) and None is dropped, so optional content
    can be passed inline.

    Examples:
        >>> build_content("a", ["b", None, ("c",)], "d")
        ('a', 'b', 'c', 'd')
        >>> build_content()
        ()
    """
    content = []
    for item in items:
        if item is None:
            continue
        if isinstance(item, (list, tuple, GeneratorType)):
            content.extend(build_content(*item))
        else:
            content.append(item)
    return tuple(content)
