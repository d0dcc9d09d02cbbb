"""Load catalog snapshots saved as JSON."""

import json
from pathlib import Path
from typing import Any, Dict, List, Union
from pydantic import ValidationError
from .models import CatalogProduct
from ..utils.errors import CatalogError
from ..utils.logging import get_logger

logger = get_logger("catalog.loader")


def load_catalog_json(catalog_path: Union[str, Path]) -> List[CatalogProduct]:
    """
    Load catalog products from a JSON snapshot.
    
    The file holds either a list of products or an object with a `products`
    list, as returned by the public catalog API.
    
    Args:
        catalog_path: Path to catalog JSON file
        
    Returns:
        Products in file order
        
    Raises:
        CatalogError: If the file is missing or not a catalog
    """
    path = Path(catalog_path)
    if not path.is_file():
        raise CatalogError(f"Catalog file not found: {catalog_path}")
    
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in catalog file: {e}") from e
    except OSError as e:
        raise CatalogError(f"Error reading catalog file: {e}") from e
    
    if isinstance(data, dict):
        data = data.get("products")
    if not isinstance(data, list):
        raise CatalogError("Catalog JSON must be a list of products or an object with 'products'")
    
    products = parse_products(data)
    logger.info(f"Loaded {len(products)} catalog product(s) from {catalog_path}")
    return products


def parse_products(raw_products: List[Any]) -> List[CatalogProduct]:
    """Validate raw product dictionaries, skipping null entries."""
    products = []
    for raw in raw_products:
        if raw is None:
            continue
        try:
            products.append(CatalogProduct.model_validate(raw))
        except ValidationError as e:
            sku = raw.get("sku") if isinstance(raw, dict) else None
            raise CatalogError(f"Invalid catalog product {sku or '<unknown>'}: {e}") from e
    return products


def dump_products(products: List[CatalogProduct]) -> Dict[str, Any]:
    """Serialize products into the snapshot layout read by load_catalog_json."""
    return {
        "products": [p.model_dump(mode="json", by_alias=True) for p in products],
        "total_count": len(products),
    }
