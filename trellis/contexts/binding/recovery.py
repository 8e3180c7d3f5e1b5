"""
Erased Value Recovery

Runtime data is held without static type information. Each use site declares
the type it expects, and the value is checked against it when resolved.
Mismatches fail; nothing is coerced.
"""

from typing import Any, Optional, Tuple, Type, Union

from trellis.contexts.binding.exceptions import TypeMismatch

ExpectedType = Union[Type, Tuple[Type, ...]]


def _type_names(expected: ExpectedType) -> str:
    types = expected if isinstance(expected, tuple) else (expected,)
    return " | ".join(t.__name__ for t in types)


def recover(value: Any, expected: ExpectedType = object, path: Optional[str] = None) -> Any:
    """
    Recover a type-erased value as the type expected at its use site.

    Args:
        value: The value found in the context
        expected: A type or tuple of types. ``object`` and ``typing.Any``
                  accept every value.
        path: Path the value was found at, used in error messages

    Returns:
        The value, unchanged

    Raises:
        TypeMismatch: If the value is not an instance of the expected type.
                      bool is never accepted where only int or float is expected.

    Examples:
        >>> recover("Ann", str)
        'Ann'
        >>> recover(True, int)
        Traceback (most recent call last):
        ...
        TypeMismatch: Expected int, got bool
    """
    if expected is object or expected is Any:
        return value

    expected_types = expected if isinstance(expected, tuple) else (expected,)

    matches = isinstance(value, expected_types)
    if isinstance(value, bool) and bool not in expected_types and object not in expected_types:
        matches = False

    if not matches:
        raise TypeMismatch(
            f"Expected {_type_names(expected)}, got {type(value).__name__}",
            path=path,
            expected=expected,
            actual=type(value),
        )

    return value
