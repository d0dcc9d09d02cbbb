"""Declarative resolution rules, one per supported resource type."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple
from ..catalog.models import CatalogProduct
from .attributes import get_count, get_number
from .selection import ProductPredicate, normalize_token


def _category(product: CatalogProduct) -> str:
    return normalize_token(product.product_category)


def _sku(product: CatalogProduct) -> str:
    return product.sku.lower()


def is_instance_product(product: CatalogProduct) -> bool:
    return _category(product) in ("instance", "instances") or "/compute/" in _sku(product)


def is_baremetal_product(product: CatalogProduct) -> bool:
    sku = _sku(product)
    return (
        _category(product) in ("elasticmetal", "baremetal")
        or "/elastic-metal/" in sku
        or "/apple-silicon/" in sku
    )


def is_load_balancer_product(product: CatalogProduct) -> bool:
    sku = _sku(product)
    return _category(product) == "loadbalancer" or "/network/lb/" in sku or "/loadbalancer/" in sku


def is_block_storage_product(product: CatalogProduct) -> bool:
    return _category(product) == "blockstorage" or "/storage/block/" in _sku(product)


def is_rdb_product(product: CatalogProduct) -> bool:
    return "/storage/rdb/" in _sku(product)


def is_redis_product(product: CatalogProduct) -> bool:
    return "/storage/redis/" in _sku(product)


def normalize_load_balancer_type(raw: str) -> str:
    """Map 'LB-S' / 'lb_gp_m' style types onto catalog 'loadbalancer-...' tokens."""
    value = raw.strip().lower()
    if not value:
        return ""
    if value.startswith("lb-"):
        value = value[len("lb-"):]
    value = value.replace("_", "-").replace(" ", "")
    return normalize_token(f"loadbalancer-{value}")


def _one(attrs: Dict[str, Any]) -> float:
    return 1.0


def _attribute_quantity(key: str) -> Callable[[Dict[str, Any]], float]:
    def quantity(attrs: Dict[str, Any]) -> float:
        return get_number(attrs, key, 1.0)
    return quantity


def _additional_nodes(attrs: Dict[str, Any]) -> float:
    return float(get_count(attrs, "cluster_size") - 1)


@dataclass(frozen=True)
class RoleRule:
    """A billed role of a multi-role resource, selected by SKU path segment."""
    name: str
    sku_segment: str
    quantity: Callable[[Dict[str, Any]], float]

    def candidates(self, products):
        """Products whose SKU carries this role's path segment."""
        segment = self.sku_segment.lower()
        return [p for p in products if segment in p.sku.lower()]


@dataclass(frozen=True)
class ResourceRule:
    """How one resource type maps onto catalog products."""
    resource_type: str
    predicate: ProductPredicate
    token_attribute: Optional[str] = None
    token_required: bool = False
    token_normalizer: Callable[[str], str] = normalize_token
    quantity: Callable[[Dict[str, Any]], float] = _one
    roles: Tuple[RoleRule, ...] = field(default_factory=tuple)


RULES = (
    ResourceRule(
        resource_type="scaleway_instance_server",
        predicate=is_instance_product,
        token_attribute="type",
        token_required=True,
    ),
    ResourceRule(
        resource_type="scaleway_baremetal_server",
        predicate=is_baremetal_product,
        token_attribute="type",
    ),
    ResourceRule(
        resource_type="scaleway_k8s_pool",
        predicate=is_instance_product,
        token_attribute="node_type",
        token_required=True,
        quantity=_attribute_quantity("size"),
    ),
    ResourceRule(
        resource_type="scaleway_lb",
        predicate=is_load_balancer_product,
        token_attribute="type",
        token_required=True,
        token_normalizer=normalize_load_balancer_type,
    ),
    ResourceRule(
        resource_type="scaleway_block_volume",
        predicate=is_block_storage_product,
        quantity=_attribute_quantity("size_in_gb"),
    ),
    ResourceRule(
        resource_type="scaleway_rdb_instance",
        predicate=is_rdb_product,
        token_attribute="node_type",
        token_required=True,
    ),
    ResourceRule(
        resource_type="scaleway_redis_cluster",
        predicate=is_redis_product,
        token_attribute="node_type",
        token_required=True,
        roles=(
            RoleRule("main-node", "/storage/redis/main-node/", _one),
            RoleRule("additional-node", "/storage/redis/additional-node/", _additional_nodes),
        ),
    ),
)

RESOURCE_RULES: Dict[str, ResourceRule] = {rule.resource_type: rule for rule in RULES}


def supported_resource_types():
    """Resource types with a resolution rule, sorted."""
    return sorted(RESOURCE_RULES)
