"""Layered configuration: packaged defaults, user, project, explicit file, environment."""

import os
from pathlib import Path
from typing import Dict, Any, Optional, Union
from urllib.parse import urlparse
import yaml
from .paths import get_defaults_path, get_user_config_path, get_project_config_path
from ..presentation.planview import SORT_KEYS
from ..report import FORMATS
from ..utils.errors import ConfigError
from ..utils.logging import get_logger

logger = get_logger("config.manager")

ENV_API_BASE_URL = "IMPACT_SCW_API_BASE_URL"


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load the full config tree.
    
    Later layers override earlier ones: packaged defaults, user config,
    project config, `config_path`, then the IMPACT_SCW_API_BASE_URL
    environment variable.
    
    Args:
        config_path: Optional explicit config file (must exist)
        
    Returns:
        Validated configuration dictionary
        
    Raises:
        ConfigError: If a file is invalid or the catalog URL is not https
    """
    config = _read_yaml(get_defaults_path())
    
    user_config_path = get_user_config_path()
    if user_config_path.exists():
        _deep_merge(config, _read_yaml(user_config_path))
        logger.debug(f"Loaded user config from {user_config_path}")
    
    project_config_path = get_project_config_path()
    if project_config_path:
        _deep_merge(config, _read_yaml(project_config_path))
        logger.info(f"Loaded project config from {project_config_path}")
    
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        _deep_merge(config, _read_yaml(path))
        logger.info(f"Loaded configuration from {path}")
    
    env_base_url = os.getenv(ENV_API_BASE_URL)
    if env_base_url:
        config.setdefault("catalog", {})["api_base_url"] = env_base_url.strip()
    
    validate_config(config)
    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate the sections planimpact reads.
    
    Raises:
        ConfigError: On the first invalid value
    """
    catalog = config.get("catalog")
    if not isinstance(catalog, dict):
        raise ConfigError("Config section 'catalog' must be a mapping")
    
    base_url = str(catalog.get("api_base_url") or "")
    parsed = urlparse(base_url)
    if not parsed.scheme or not parsed.netloc:
        raise ConfigError(
            f"Invalid catalog api_base_url '{base_url}': must be a valid absolute URL "
            f"(set catalog.api_base_url or {ENV_API_BASE_URL})"
        )
    if parsed.scheme != "https":
        raise ConfigError(f"Invalid catalog api_base_url '{base_url}': https scheme is required")
    
    for key in ("timeout_seconds", "page_size"):
        value = catalog.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ConfigError(f"Config catalog.{key} must be a positive number")
    
    plan = config.get("plan", {})
    timeout = plan.get("terraform_show_timeout_seconds") if isinstance(plan, dict) else None
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError("Config plan.terraform_show_timeout_seconds must be a positive number")
    
    footprint = config.get("footprint", {})
    if not isinstance(footprint, dict):
        raise ConfigError("Config section 'footprint' must be a mapping")
    for key in ("timeout_seconds", "doctor_window_days"):
        value = footprint.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ConfigError(f"Config footprint.{key} must be a positive number")
    
    output = config.get("output", {})
    if not isinstance(output, dict):
        raise ConfigError("Config section 'output' must be a mapping")
    output_format = str(output.get("format", "table")).strip().lower()
    if output_format not in FORMATS:
        raise ConfigError(
            f"Invalid output.format '{output.get('format')}' (use {', '.join(FORMATS)})"
        )
    sort_key = str(output.get("sort", "co2")).strip().lower()
    if sort_key not in SORT_KEYS:
        raise ConfigError(
            f"Invalid output.sort '{output.get('sort')}' (use {', '.join(SORT_KEYS)})"
        )


def get_catalog_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the catalog subsection (loads config when not given)."""
    if config is None:
        config = load_config()
    return config.get("catalog", {})


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}") from e
    
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Deep merge override into base (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
