"""Resolution errors raised when a context-bound value cannot be recovered."""

from typing import Any, Optional


class ResolutionError(Exception):
    """
    Base exception for failures while resolving a value against runtime data.

    Resolution errors are only raised while rendering (or while narrowing a
    constant value) and always abort the current render.

    Attributes:
        message: Error description
        path: Dotted representation of the path being resolved
        segment: The segment at which resolution failed
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        segment: Any = None,
    ):
        self.message = message
        self.path = path
        self.segment = segment

        # Build enhanced error message
        parts = [message]

        if path:
            parts.append(f"Path: {path}")

        if segment is not None:
            parts.append(f"Segment: {segment!r}")

        super().__init__("\n".join(parts))


class PathNotFound(ResolutionError):
    """A named segment is absent from the data it is looked up in."""

    pass


class NullTraversal(ResolutionError):
    """A required intermediate segment resolved to None."""

    pass


class TypeMismatch(ResolutionError):
    """
    A resolved value does not have the type expected at the binding's use site.

    Attributes:
        expected: The expected type
        actual: The type of the value actually found
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        segment: Any = None,
        expected: Optional[type] = None,
        actual: Optional[type] = None,
    ):
        self.expected = expected
        self.actual = actual
        super().__init__(message, path=path, segment=segment)


class MissingContextScope(ResolutionError):
    """
    A path names a scope that was never pushed.

    Typically raised when an iteration-local value is resolved outside the
    loop that provides it.
    """

    pass
