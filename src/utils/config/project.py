"""Project configuration utilities.

Loads optional project settings from a YAML file in the repository root,
merged over built-in defaults.
"""

from typing import Any, Dict

import yaml

from .paths import get_repo_root

DEFAULT_CONFIG = {
    "output": {
        "figures_dir": "figures",
    },
}


def load_project_config(config_name: str = "project_config.yaml") -> Dict[str, Any]:
    """Load project configuration from YAML.

    Parameters
    ----------
    config_name : str
        Name of the config file in repo root.

    Returns
    -------
    dict
        Parsed configuration combined with defaults.
    """
    config_path = get_repo_root() / config_name

    config = {k: dict(v) for k, v in DEFAULT_CONFIG.items()}

    if config_path.exists():
        with open(config_path, "r") as f:
            user_config = yaml.safe_load(f) or {}
        # Merge one level deep so partial sections keep their defaults
        for section, values in user_config.items():
            if isinstance(values, dict):
                config.setdefault(section, {}).update(values)
            else:
                config[section] = values

    return config


def get_config_section(section: str) -> Dict[str, Any]:
    """Get a specific section from project config.

    Parameters
    ----------
    section : str
        Section name (e.g., "output").

    Returns
    -------
    dict
        Section contents, or empty dict if not found.
    """
    return load_project_config().get(section, {})
