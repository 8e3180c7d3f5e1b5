"""
Shared utilities for TRELLIS.

Common functionality used across contexts:
- HTML escaping
- Logger configuration
"""

from trellis.utils.escaping import escape_attribute, escape_text, is_trusted_markup

__all__ = ["escape_attribute", "escape_text", "is_trusted_markup"]
