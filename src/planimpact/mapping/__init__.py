"""Resource-to-catalog resolution."""

from .models import Match, Resolution
from .resolver import resolve
from .rules import RESOURCE_RULES, ResourceRule, RoleRule, supported_resource_types
from .selection import find_best_product, normalize_token, region_from_zone, score_locality

__all__ = [
    "Match",
    "Resolution",
    "resolve",
    "RESOURCE_RULES",
    "ResourceRule",
    "RoleRule",
    "supported_resource_types",
    "find_best_product",
    "normalize_token",
    "region_from_zone",
    "score_locality",
]
