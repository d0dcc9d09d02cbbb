"""Product catalog: models, API client and snapshot loader."""

from .models import CatalogProduct, Locality, UnitOfMeasure, EnvironmentalImpactEstimation
from .client import CatalogClient
from .loader import load_catalog_json, dump_products

__all__ = [
    "CatalogProduct",
    "Locality",
    "UnitOfMeasure",
    "EnvironmentalImpactEstimation",
    "CatalogClient",
    "load_catalog_json",
    "dump_products",
]
