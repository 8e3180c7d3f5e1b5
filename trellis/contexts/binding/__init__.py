"""
Binding Context

Responsibilities:
- Represents values used in nodes as Constant or Dynamic (context-bound)
- Holds runtime data for a render pass in a stack of scopes
- Resolves paths and recovers the expected type of erased values
- Loads context data from YAML/JSON files

Owns: TemplateValue, ContextManager, resolution errors
Never: Produces markup
"""

from trellis.contexts.binding.context_manager import ContextManager, Scope
from trellis.contexts.binding.data_loader import load_context, load_contexts
from trellis.contexts.binding.exceptions import (
    MissingContextScope,
    NullTraversal,
    PathNotFound,
    ResolutionError,
    TypeMismatch,
)
from trellis.contexts.binding.paths import ContextPath, PathSegment, optional
from trellis.contexts.binding.recovery import recover
from trellis.contexts.binding.template_value import (
    Constant,
    Dynamic,
    Optionality,
    TemplateValue,
)

__all__ = [
    # Values
    "TemplateValue",
    "Constant",
    "Dynamic",
    "Optionality",
    "ContextPath",
    "PathSegment",
    "optional",
    # Resolution
    "ContextManager",
    "Scope",
    "recover",
    "load_context",
    "load_contexts",
    # Errors
    "ResolutionError",
    "PathNotFound",
    "NullTraversal",
    "TypeMismatch",
    "MissingContextScope",
]
