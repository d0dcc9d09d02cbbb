"""Locations of the packaged, user and project config files."""

from pathlib import Path
from typing import Optional


def get_defaults_path() -> Path:
    """Packaged defaults shipped next to this module."""
    return Path(__file__).parent / "defaults.yaml"


def get_user_config_path() -> Path:
    """Get user config path: ~/.planimpact/config.yaml"""
    return Path.home() / ".planimpact" / "config.yaml"


def get_project_config_path() -> Optional[Path]:
    """Get project config path: .planimpact/config.yaml (from current working directory)"""
    project_config = Path.cwd() / ".planimpact" / "config.yaml"
    if project_config.exists():
        return project_config
    return None
