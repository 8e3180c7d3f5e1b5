"""
Template Values

A TemplateValue is a piece of data used while constructing a node. It is
either a Constant, known when the tree is built, or Dynamic, a path into a
context that is only supplied at render time.

Example:
    >>> name = TemplateValue.path("user", "name", expected=str)
    >>> nickname = TemplateValue.path("user", optional("nickname"))
    >>> greeting = TemplateValue.constant("Hello")
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Union

from trellis.contexts.binding.exceptions import NullTraversal, TypeMismatch
from trellis.contexts.binding.paths import ABSENT, ContextPath, Key, PathSegment, walk
from trellis.contexts.binding.recovery import ExpectedType, recover

if TYPE_CHECKING:
    from trellis.contexts.binding.context_manager import ContextManager


class Optionality(Enum):
    """Whether resolution may stop early at an optional segment ("mascading optional")."""

    REQUIRED = "required"
    SHORT_CIRCUIT = "short_circuit"


class TemplateValue:
    """Base class for constant and context-bound values."""

    is_dynamic = False

    @staticmethod
    def constant(value: Any) -> "Constant":
        """Wrap a value known at construction time."""
        return Constant(value)

    @staticmethod
    def path(
        *segments: Union[Key, PathSegment],
        into: Optional[str] = None,
        expected: ExpectedType = object,
        trusted: bool = False,
    ) -> "Dynamic":
        """
        Bind to a path into the runtime context.

        Args:
            *segments: Keys, indices, or optional(...) markers
            into: Name of the scope the path starts from (e.g. a loop variable)
            expected: Type the resolved value must have
            trusted: Emit the resolved value without escaping

        Returns:
            Dynamic value. Its optionality is SHORT_CIRCUIT when any segment is
            optional, and it is nullable when the last segment is optional.
        """
        path = ContextPath(
            segments=tuple(s if isinstance(s, PathSegment) else PathSegment(s) for s in segments),
            scope=into,
        )
        return Dynamic(
            path=path,
            expected=expected,
            optionality=(
                Optionality.SHORT_CIRCUIT if path.traverses_optional else Optionality.REQUIRED
            ),
            nullable=path.terminal_optional,
            trusted=trusted,
        )

    def resolve(self, manager: "ContextManager") -> Any:
        raise NotImplementedError

    def narrow(self, key: Key, optional: bool = False, expected: ExpectedType = object):
        raise NotImplementedError

    def unwrapped(self) -> "TemplateValue":
        raise NotImplementedError


@dataclass(frozen=True)
class Constant(TemplateValue):
    """A value fixed at tree-construction time."""

    value: Any

    def resolve(self, manager: "ContextManager" = None) -> Any:
        return self.value

    def narrow(self, key: Key, optional: bool = False, expected: ExpectedType = object) -> "Constant":
        """
        Project a sub-field of the constant.

        A missing optional sub-field, or one holding None, yields Constant(None).
        Narrowing an optional sub-field of a None constant also yields
        Constant(None).

        Raises:
            NullTraversal: If the constant is None and the sub-field is not optional
            PathNotFound: If the sub-field does not exist and is not optional
            TypeMismatch: If the sub-field is not of the expected type, or is a
                          required sub-field holding None
        """
        path = ContextPath(segments=(PathSegment(key, optional),))

        if self.value is None:
            if optional:
                return Constant(None)
            raise NullTraversal(
                f"Cannot traverse to '{key}': value is None", path=str(path), segment=key
            )

        result = walk(self.value, path, short_circuit=optional)

        if result is ABSENT:
            return Constant(None)

        if result is None:
            if optional:
                return Constant(None)
            raise TypeMismatch(
                "Required value resolved to None",
                path=str(path),
                expected=expected,
                actual=type(None),
            )

        return Constant(recover(result, expected, str(path)))

    def unwrapped(self) -> "Constant":
        return self


@dataclass(frozen=True)
class Dynamic(TemplateValue):
    """
    A reference into a not-yet-known context.

    Attributes:
        path: Where the value lives in the context
        expected: Type the value is recovered as when resolved
        optionality: Whether resolution short-circuits at optional segments
        nullable: Whether the bound value itself is optional. A nullable
                  binding resolves a terminal None to "absent".
        trusted: Whether the resolved value is emitted without escaping
    """

    path: ContextPath = field(default_factory=ContextPath)
    expected: ExpectedType = object
    optionality: Optionality = Optionality.REQUIRED
    nullable: bool = False
    trusted: bool = False

    is_dynamic = True

    @property
    def is_mascading_optional(self) -> bool:
        return self.optionality is Optionality.SHORT_CIRCUIT

    def resolve(self, manager: "ContextManager") -> Any:
        """Resolve against a context manager; None means the optional value is absent."""
        return manager.resolve_path(
            self.path,
            expected=self.expected,
            short_circuit=self.is_mascading_optional,
            nullable=self.nullable,
        )

    def narrow(self, key: Key, optional: bool = False, expected: ExpectedType = object) -> "Dynamic":
        """Compose a new binding one segment deeper. The optionality flag is carried forward."""
        short_circuit = optional or self.is_mascading_optional
        return replace(
            self,
            path=self.path.appending(PathSegment(key, optional)),
            expected=expected,
            optionality=Optionality.SHORT_CIRCUIT if short_circuit else Optionality.REQUIRED,
            nullable=optional,
        )

    def unwrapped(self) -> "Dynamic":
        """
        Non-optional view of this binding.

        The view no longer accepts a terminal None on its own account. The
        optionality flag is kept, so a value that is absent at an optional
        segment still resolves to "no output" instead of failing.
        """
        if not self.nullable:
            return self
        return replace(self, nullable=False)
