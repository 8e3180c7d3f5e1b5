"""
Context Data Loading

Loads render contexts from YAML or JSON files. Loaded data is converted to
plain dicts and lists so that path traversal sees ordinary containers.
"""

from pathlib import Path
from typing import Any, List

from omegaconf import OmegaConf


def load_context(path: Path) -> Any:
    """
    Load a context data file.

    Args:
        path: Path to a YAML or JSON file

    Returns:
        Plain Python containers with interpolations resolved

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Context file not found: {path}")

    return OmegaConf.to_container(OmegaConf.load(path), resolve=True)


def load_contexts(paths: List[Path]) -> List[Any]:
    """Load several context files, preserving order."""
    return [load_context(path) for path in paths]
