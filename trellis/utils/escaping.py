"""
HTML escaping utilities.

All text destined for markup output passes through these helpers. Escaping is
delegated to markupsafe, so values implementing ``__html__`` (such as
``markupsafe.Markup``) are treated as pre-trusted and emitted unchanged.
"""

from enum import Enum
from typing import Any

from markupsafe import Markup, escape


def is_trusted_markup(value: Any) -> bool:
    """Return True if value declares itself as safe markup via ``__html__``."""
    return hasattr(value, "__html__")


def to_text(value: Any) -> str:
    """
    Convert a resolved value to its textual form before escaping.

    Args:
        value: Any concrete value (str, number, bool, Enum, Markup, ...)

    Returns:
        Text form of the value. Booleans become "true"/"false", enums use their
        value, trusted markup is returned as-is.

    Examples:
        >>> to_text(True)
        'true'
        >>> to_text(3)
        '3'
    """
    if is_trusted_markup(value):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return to_text(value.value)
    return str(value)


def escape_text(value: Any) -> str:
    """
    Escape a value for use as element text content.

    Escapes &, <, >, " and '. Trusted markup passes through untouched.

    Examples:
        >>> escape_text("a < b & c")
        'a &lt; b &amp; c'
    """
    return str(escape(to_text(value)))


def escape_attribute(value: Any) -> str:
    """
    Escape a value for use inside a double-quoted attribute value.

    Quote characters are always escaped, so the result can never terminate the
    surrounding quotes, even for trusted markup.
    """
    text = to_text(value)
    if is_trusted_markup(text):
        return str(text).replace('"', "&#34;")
    return str(escape(text))


def raw(value: Any) -> str:
    """Return the unescaped text form of a pre-trusted value."""
    return str(Markup(to_text(value)))
