"""Resolve a resource change to the catalog products it will be billed as."""

from typing import Dict, Mapping, Optional, Sequence
from ..catalog.models import CatalogProduct
from ..ingest.models import ResourceChange
from ..utils.errors import (
    MissingRequiredAttributeError,
    NoCatalogMatchError,
    NotImplementedResourceError,
)
from ..utils.logging import get_logger
from .attributes import get_string
from .models import Match, Resolution
from .rules import RESOURCE_RULES, ResourceRule
from .selection import find_best_product, normalize_token

logger = get_logger("mapping.resolver")


def resolve(
    change: ResourceChange,
    products: Sequence[CatalogProduct],
    rules: Optional[Mapping[str, ResourceRule]] = None
) -> Resolution:
    """
    Map a resource change onto catalog products.
    
    Attributes are read from `after` when non-empty, else `before`. Zone and
    region fall back to the plan-level defaults carried by the change.
    
    Args:
        change: Resource change to resolve
        products: Catalog products in catalog order
        rules: Rule registry (default: RESOURCE_RULES)
        
    Returns:
        Resolution with one match per billed role
        
    Raises:
        NotImplementedResourceError: No rule for the resource type
        MissingRequiredAttributeError: The rule's type attribute is missing
        NoCatalogMatchError: No catalog product passed the rule's filters
    """
    registry = RESOURCE_RULES if rules is None else rules
    rule = registry.get(change.type)
    if rule is None:
        raise NotImplementedResourceError("not implemented")
    
    attrs = change.attributes()
    zone = get_string(attrs, "zone") or change.zone
    region = get_string(attrs, "region") or change.region
    
    raw_type = ""
    type_token = ""
    if rule.token_attribute:
        raw_type = get_string(attrs, rule.token_attribute).strip()
        if rule.token_required and not normalize_token(raw_type):
            raise MissingRequiredAttributeError(
                f"missing required attribute: {rule.token_attribute}"
            )
        if raw_type:
            type_token = rule.token_normalizer(raw_type)
    
    if rule.roles:
        return _resolve_roles(rule, attrs, products, zone, region, raw_type, type_token)
    
    product = find_best_product(
        products, rule.predicate, zone, region, type_token, require_token=bool(type_token)
    )
    if product is None:
        raise _no_catalog_match(zone, region, rule.token_attribute, raw_type)
    
    logger.debug(f"{change.address}: matched {product.sku}")
    return Resolution(matches=[Match(product=product, quantity=rule.quantity(attrs))])


def _resolve_roles(
    rule: ResourceRule,
    attrs: Dict,
    products: Sequence[CatalogProduct],
    zone: str,
    region: str,
    raw_type: str,
    type_token: str
) -> Resolution:
    """Resolve each billed role separately; roles with no quantity are not looked up."""
    matches = []
    for role in rule.roles:
        quantity = role.quantity(attrs)
        if quantity <= 0:
            continue
        
        product = find_best_product(
            role.candidates(products),
            rule.predicate,
            zone,
            region,
            type_token,
            require_token=bool(type_token)
        )
        if product is None:
            raise _no_catalog_match(zone, region, rule.token_attribute, raw_type)
        matches.append(Match(product=product, quantity=quantity))
    
    return Resolution(matches=matches)


def _no_catalog_match(
    zone: str,
    region: str,
    type_key: Optional[str],
    type_value: str
) -> NoCatalogMatchError:
    """Build a no-match error listing the filter values that were tried."""
    parts = []
    if type_key:
        parts.append(f"{type_key}={type_value}")
    if zone:
        parts.append(f"zone={zone}")
    if region:
        parts.append(f"region={region}")
    
    reason = "no catalog match"
    if parts:
        reason += f" ({', '.join(parts)})"
    return NoCatalogMatchError(reason)
