"""Custom exceptions for the rendering context."""

from typing import List, Optional


class FormulaSealedError(RuntimeError):
    """Raised when an instruction is written to a formula after prerendering finished."""

    pass


class FormulaNotFound(LookupError):
    """
    Raised when a named formula has not been added to a Renderer.

    Attributes:
        name: The requested formula name
        available: Names currently registered
    """

    def __init__(self, name: str, available: Optional[List[str]] = None):
        self.name = name
        self.available = available or []

        message = f"Formula '{name}' not found"
        if self.available:
            message += f". Available formulas: {self.available}"

        super().__init__(message)
