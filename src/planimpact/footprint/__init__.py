"""Measured environmental footprint: query models, filters and API client."""

from .client import FootprintClient
from .models import (
    ImpactDataResponse,
    ImpactQuery,
    Impact,
    ProductCategory,
    ProjectImpact,
    ServiceCategory,
)
from .query import (
    parse_csv,
    parse_date,
    parse_product_categories,
    parse_service_categories,
    trailing_window,
)

__all__ = [
    "FootprintClient",
    "ImpactDataResponse",
    "ImpactQuery",
    "Impact",
    "ProductCategory",
    "ProjectImpact",
    "ServiceCategory",
    "parse_csv",
    "parse_date",
    "parse_product_categories",
    "parse_service_categories",
    "trailing_window",
]
