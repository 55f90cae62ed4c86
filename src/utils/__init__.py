"""Utility modules for project configuration and visualization.

Submodules:
- plotting: Plot styling and palettes
- config: Project configuration and repository paths

Import examples:
    from utils import plotting     # Auto-applies plot styles
    from utils.config import get_repo_root, load_project_config
"""

from . import plotting, config

# Re-export common config functions for convenience
from .config import get_repo_root

__all__ = [
    "plotting",
    "config",
    "get_repo_root",
]
