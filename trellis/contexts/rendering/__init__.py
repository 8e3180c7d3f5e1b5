"""
Rendering Context

Responsibilities:
- Compiles node trees into reusable Formulas (prerender)
- Replays Formulas against runtime data (render)
- Renders node trees in a single pass for one-shot use
- Keeps a registry of named Formulas

Owns: Formula, Renderer, output escaping decisions
Never: Builds or modifies nodes
"""

from trellis.contexts.rendering.exceptions import FormulaNotFound, FormulaSealedError
from trellis.contexts.rendering.formula import (
    EmitMode,
    EmitOptions,
    Formula,
    Iterate,
    Literal,
    ResolveAndEmit,
)
from trellis.contexts.rendering.renderer import DirectWriter, Renderer

__all__ = [
    # Compiled form
    "Formula",
    "Literal",
    "ResolveAndEmit",
    "Iterate",
    "EmitMode",
    "EmitOptions",
    # Rendering
    "Renderer",
    "DirectWriter",
    # Errors
    "FormulaNotFound",
    "FormulaSealedError",
]
