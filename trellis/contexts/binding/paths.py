"""
Context Paths

Defines accessor paths into runtime data and the segment-by-segment traversal
shared by context-bound values and constant narrowing.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple, Union

from trellis.contexts.binding.exceptions import NullTraversal, PathNotFound

Key = Union[str, int]


class _Sentinel:
    """Named marker object for traversal outcomes that are not data."""

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return self.name


# A key that does not exist in the data being traversed
MISSING = _Sentinel("MISSING")

# An optional segment short-circuited the traversal
ABSENT = _Sentinel("ABSENT")


@dataclass(frozen=True)
class PathSegment:
    """
    One step of a context path.

    Attributes:
        key: Mapping key, attribute name, or sequence index
        optional: Whether the value at this step may be missing or None
    """

    key: Key
    optional: bool = False

    def __str__(self) -> str:
        text = f"[{self.key}]" if isinstance(self.key, int) else str(self.key)
        return f"{text}?" if self.optional else text


def optional(key: Key) -> PathSegment:
    """
    Mark a path segment as optional.

    Example:
        >>> TemplateValue.path("user", optional("nickname"))
    """
    return PathSegment(key, optional=True)


@dataclass(frozen=True)
class ContextPath:
    """
    Accessor path into a context.

    Attributes:
        segments: Ordered steps from the scope's data to the bound value
        scope: Name of the scope the path starts from. None means the
               innermost scope that defines the first segment.
    """

    segments: Tuple[PathSegment, ...] = field(default_factory=tuple)
    scope: Optional[str] = None

    @property
    def traverses_optional(self) -> bool:
        return any(segment.optional for segment in self.segments)

    @property
    def terminal_optional(self) -> bool:
        return bool(self.segments) and self.segments[-1].optional

    def appending(self, segment: PathSegment) -> "ContextPath":
        """Return a new path one segment deeper."""
        return ContextPath(segments=self.segments + (segment,), scope=self.scope)

    def __str__(self) -> str:
        dotted = ".".join(str(segment) for segment in self.segments)
        if self.scope is None:
            return dotted or "<current>"
        return f"{self.scope}:{dotted}" if dotted else f"{self.scope}:"


# Values whose attributes are never context data
SCALAR_TYPES = (str, bytes, int, float, complex, bool, type(None))


def step(current: Any, key: Key) -> Any:
    """
    Look up a single key in a piece of data.

    Mappings are indexed by key, sequences (other than strings) by integer
    index, and plain data objects by attribute name. Attribute lookup never
    reaches into scalars, containers, callables or underscore names, so
    ``"a".title`` or ``[].count`` are MISSING rather than bound methods.

    Returns:
        The value found, or MISSING
    """
    if isinstance(current, Mapping):
        return current.get(key, MISSING)

    if isinstance(current, SCALAR_TYPES):
        return MISSING

    if isinstance(current, Sequence):
        if isinstance(key, int):
            try:
                return current[key]
            except IndexError:
                return MISSING
        return MISSING

    if not isinstance(key, str) or key.startswith("_"):
        return MISSING

    found = getattr(current, key, MISSING)
    if callable(found):
        return MISSING
    return found


def walk(data: Any, path: ContextPath, short_circuit: bool) -> Any:
    """
    Traverse a path segment by segment.

    Args:
        data: Data the path starts from
        path: Path to traverse
        short_circuit: Whether optional segments may end the traversal early

    Returns:
        The value at the end of the path (possibly None), or ABSENT when an
        optional segment was missing or None

    Raises:
        PathNotFound: If a required segment is missing
        NullTraversal: If a required intermediate segment is None
    """
    current = data
    last = len(path.segments) - 1

    for index, segment in enumerate(path.segments):
        found = step(current, segment.key)

        if found is MISSING:
            if segment.optional and short_circuit:
                return ABSENT
            raise PathNotFound(
                f"Key '{segment.key}' not found in {type(current).__name__}",
                path=str(path),
                segment=segment.key,
            )

        if found is None and index < last:
            if segment.optional and short_circuit:
                return ABSENT
            raise NullTraversal(
                f"Cannot traverse past '{segment.key}': value is None",
                path=str(path),
                segment=segment.key,
            )

        current = found

    return current
