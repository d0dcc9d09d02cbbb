"""Configuration module: layered YAML settings and environment credentials."""

from .credentials import ScalewayCredentials, load_credentials
from .manager import load_config, validate_config, get_catalog_config, ENV_API_BASE_URL
from .paths import get_defaults_path, get_user_config_path, get_project_config_path

__all__ = [
    "ScalewayCredentials",
    "load_credentials",
    "load_config",
    "validate_config",
    "get_catalog_config",
    "ENV_API_BASE_URL",
    "get_defaults_path",
    "get_user_config_path",
    "get_project_config_path",
]
