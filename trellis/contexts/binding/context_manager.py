"""
Context Manager

Holds the runtime data for one render pass: a root context plus a stack of
nested scopes pushed for iterations or sub-documents. Paths are resolved
against the innermost scope first, falling back outward.

A ContextManager is owned by a single render call and is not thread-safe.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, List, Optional

from trellis.contexts.binding.exceptions import MissingContextScope, TypeMismatch
from trellis.contexts.binding.paths import ABSENT, MISSING, ContextPath, step, walk
from trellis.contexts.binding.recovery import ExpectedType, recover
from trellis.contexts.binding.template_value import TemplateValue


@dataclass
class Scope:
    """One level of the scope stack."""

    data: Any
    name: Optional[str] = None


class ContextManager:
    """
    Resolves context paths against a stack of scopes.

    Example:
        manager = ContextManager({"user": {"name": "Ann"}})
        manager.resolve(TemplateValue.path("user", "name"))  # "Ann"

        with manager.push({"title": "Intro"}, name="chapter"):
            manager.resolve(TemplateValue.path("title", into="chapter"))  # "Intro"
    """

    def __init__(self, context: Any = None, name: str = "root"):
        self._scopes: List[Scope] = [Scope(context, name)]

    @classmethod
    def from_file(cls, path: Path, name: str = "root") -> "ContextManager":
        """Create a manager whose root context is loaded from a YAML or JSON file."""
        from trellis.contexts.binding.data_loader import load_context

        return cls(load_context(path), name=name)

    @property
    def depth(self) -> int:
        """Number of scopes on the stack, including the root."""
        return len(self._scopes)

    @property
    def current(self) -> Any:
        """Data of the innermost scope."""
        return self._scopes[-1].data

    @contextmanager
    def push(self, context: Any, name: Optional[str] = None) -> Iterator["ContextManager"]:
        """
        Enter a nested scope for the duration of a with-block.

        The scope is popped on every exit path, including exceptions.

        Args:
            context: Data visible inside the scope
            name: Optional scope name that paths can target with ``into=``
        """
        self._scopes.append(Scope(context, name))
        try:
            yield self
        finally:
            self._scopes.pop()

    def resolve(self, value: TemplateValue) -> Any:
        """
        Resolve a constant or context-bound value.

        Returns:
            The concrete value, or None if an optional value is absent

        Raises:
            ResolutionError: PathNotFound, NullTraversal, TypeMismatch or
                             MissingContextScope
        """
        if not isinstance(value, TemplateValue):
            raise TypeError(f"Expected a TemplateValue, got {type(value).__name__}")
        return value.resolve(self)

    def resolve_path(
        self,
        path: ContextPath,
        expected: ExpectedType = object,
        short_circuit: bool = False,
        nullable: bool = False,
    ) -> Any:
        """
        Walk a path and recover the value found as the expected type.

        Args:
            path: Path to resolve
            expected: Type the value must have
            short_circuit: Whether missing or None values at optional segments
                           resolve to "absent" instead of failing
            nullable: Whether a None at the end of the path is "absent" rather
                      than a TypeMismatch

        Returns:
            The recovered value, or None when absent
        """
        data = self._locate(path)
        result = walk(data, path, short_circuit)

        if result is ABSENT:
            return None

        if result is None:
            if nullable or (short_circuit and path.terminal_optional):
                return None
            raise TypeMismatch(
                "Required value resolved to None",
                path=str(path),
                expected=expected,
                actual=type(None),
            )

        return recover(result, expected, str(path))

    def _locate(self, path: ContextPath) -> Any:
        """Find the scope data a path starts from."""
        if path.scope is not None:
            for scope in reversed(self._scopes):
                if scope.name == path.scope:
                    return scope.data
            raise MissingContextScope(
                f"Scope '{path.scope}' is not active", path=str(path)
            )

        if not path.segments:
            return self.current

        first = path.segments[0].key
        for scope in reversed(self._scopes):
            if step(scope.data, first) is not MISSING:
                return scope.data

        # Nothing defines the first segment, let the walk report it
        return self.current
