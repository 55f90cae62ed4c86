"""Configuration utilities.

This package contains project configuration and path utilities.
"""

from .paths import get_repo_root, resolve_path
from .project import load_project_config, get_config_section

__all__ = ["get_repo_root", "resolve_path", "load_project_config", "get_config_section"]
