"""Deterministic catalog product selection: tokens, locality scoring, best match."""

from typing import Callable, Optional, Sequence, Tuple
from ..catalog.models import CatalogProduct, Locality

ProductPredicate = Callable[[CatalogProduct], bool]

ZONE_EXACT_SCORE = 50
SAME_REGION_SCORE = 35
SIBLING_ZONE_SCORE = 30
REGION_EXACT_SCORE = 40
GLOBAL_SCORE = 5
UNSCOPED_SCORE = 1
TOKEN_MATCH_SCORE = 100


def normalize_token(value: str) -> str:
    """Lower-case and strip separators so 'POP2-HC-2C-4G' == 'pop2_hc_2c_4g'."""
    value = (value or "").strip().lower()
    for sep in ("-", "_", " ", "/"):
        value = value.replace(sep, "")
    return value


def region_from_zone(zone: str) -> str:
    """Derive the region of a zone ('fr-par-1' -> 'fr-par'); empty if not derivable."""
    parts = (zone or "").strip().lower().split("-")
    if len(parts) < 2:
        return ""
    return f"{parts[0]}-{parts[1]}"


def _same(a: str, b: str) -> bool:
    return a.lower() == b.lower()


def score_locality(locality: Locality, zone: str, region: str) -> Tuple[int, bool]:
    """
    Score how well a product's locality fits the requested zone/region.
    
    Args:
        locality: Product locality
        zone: Requested zone (may be empty)
        region: Requested region (may be empty)
        
    Returns:
        (score, accepted); rejected products score 0
    """
    if zone:
        if _same(locality.zone, zone):
            return ZONE_EXACT_SCORE, True
        
        zone_region = region_from_zone(zone)
        if zone_region and _same(locality.region, zone_region):
            return SAME_REGION_SCORE, True
        
        if region and _same(locality.region, region):
            return SAME_REGION_SCORE, True
        
        if zone_region and _same(region_from_zone(locality.zone), zone_region):
            return SIBLING_ZONE_SCORE, True
        
        if locality.is_global:
            return GLOBAL_SCORE, True
        
        return 0, False
    
    if region:
        if _same(locality.region, region):
            return REGION_EXACT_SCORE, True
        
        if _same(region_from_zone(locality.zone), region):
            return SAME_REGION_SCORE, True
        
        if locality.is_global:
            return GLOBAL_SCORE, True
        
        return 0, False
    
    return UNSCOPED_SCORE, True


def matches_token(product: CatalogProduct, token: str) -> bool:
    """Check whether a normalized token occurs in the product's searchable text."""
    haystack = normalize_token(
        " ".join((product.sku, product.product, product.variant, product.description))
    )
    return token in haystack


def find_best_product(
    products: Sequence[CatalogProduct],
    predicate: ProductPredicate,
    zone: str,
    region: str,
    type_token: str = "",
    require_token: bool = False
) -> Optional[CatalogProduct]:
    """
    Pick the best catalog product for a resource.
    
    Products failing the predicate or the locality filter are skipped. The
    score is the locality score plus a bonus when the type token matches.
    Ties go to the lexicographically smallest SKU, so the result does not
    depend on anything but the inputs.
    
    Args:
        products: Candidate products in catalog order
        predicate: Category filter for the resource family
        zone: Requested zone
        region: Requested region
        type_token: Normalized type token ("" for none)
        require_token: Reject products that do not contain the token
        
    Returns:
        Best product, or None when nothing qualifies
    """
    best: Optional[CatalogProduct] = None
    best_score = -1
    
    for product in products:
        if not predicate(product):
            continue
        
        locality_score, accepted = score_locality(product.locality, zone, region)
        if not accepted:
            continue
        
        score = locality_score
        if type_token:
            if matches_token(product, type_token):
                score += TOKEN_MATCH_SCORE
            elif require_token:
                continue
        
        if best is None or score > best_score or (score == best_score and product.sku < best.sku):
            best = product
            best_score = score
    
    return best
