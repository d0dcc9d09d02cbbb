"""Typed reads from Terraform attribute maps."""

from typing import Any, Dict


def get_string(attrs: Dict[str, Any], key: str) -> str:
    """Return attrs[key] when it is a string, else empty string."""
    value = attrs.get(key)
    return value if isinstance(value, str) else ""


def get_number(attrs: Dict[str, Any], key: str, default: float) -> float:
    """Return attrs[key] as float when it is numeric, else default."""
    value = attrs.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return float(value)


def get_count(attrs: Dict[str, Any], key: str, default: int = 1) -> int:
    """Return a node count floored to an integer of at least 1."""
    value = get_number(attrs, key, default)
    if value < 1:
        return 1
    return int(value)
