"""Path configuration utilities."""

from pathlib import Path
from typing import Union


def get_repo_root(marker: str = "pyproject.toml") -> Path:
    """Find the repository root (the first parent holding ``marker``).

    Returns
    -------
    Path
        Path to repository root.
    """
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / marker).exists():
            return parent
    # Fallback: src/utils/config/paths.py -> repo root
    return current.parents[3]


def resolve_path(path: Union[str, Path]) -> Path:
    """Absolute paths pass through; relative paths are taken from the repo root."""
    path = Path(path).expanduser()
    return path if path.is_absolute() else get_repo_root() / path
