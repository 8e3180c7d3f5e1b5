"""
TRELLIS - Typed Rendering of Element Layouts with Late-bound Input Substitution

A typed HTML construction library: user code assembles an immutable tree of
element nodes, the tree is compiled once into a reusable Formula, and the
Formula is rendered against any number of runtime data contexts.

Architecture:
- Binding Context: Constant and context-bound values, path resolution, type recovery
- Elements Context: Immutable nodes, attribute mutation, modifiers, element catalogue
- Rendering Context: Formula compilation (prerender) and replay (render)
"""

from loguru import logger

__version__ = "0.1.0"

# Library logging stays silent until an application calls setup_logger()
logger.disable("trellis")
