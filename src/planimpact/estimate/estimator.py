"""Turn resolved catalog matches into signed monthly impact rows and totals."""

from functools import reduce
from typing import Iterable, List, NamedTuple, Optional, Sequence
from ..catalog.models import CatalogProduct
from ..contracts.report import Report, Row, Totals, UnsupportedResource
from ..ingest.models import ResourceChange
from ..mapping.models import Match, Resolution
from ..mapping.resolver import resolve
from ..utils.errors import NoCatalogMatchError, ResolutionError
from ..utils.logging import get_logger
from .transitions import ActionTransition, action_transitions

logger = get_logger("estimate.estimator")

MONTHLY_HOURS = 730.0
DEFAULT_UNSUPPORTED_REASON = "no matching catalog product"


def unit_to_month_multiplier(unit: str) -> float:
    """Factor projecting a per-unit rate onto one month."""
    unit = (unit or "").lower()
    if unit == "hour":
        return MONTHLY_HOURS
    if unit == "month":
        return 1.0
    if unit == "year":
        return 1.0 / 12.0
    return 1.0


def normalize_quantity(quantity: float, size: int) -> float:
    """Express a quantity in bundles of `size` (rates priced per 100 GB, etc.)."""
    if size in (0, 1):
        return quantity
    return quantity / size


def row_from_match(transition: ActionTransition, match: Match) -> Row:
    """
    Compute one impact row.
    
    Each metric is computed only when the catalog has a rate for it; an
    unknown metric stays None and is flagged, never counted as zero.
    """
    product = match.product
    billed = normalize_quantity(match.quantity, product.unit_of_measure.size)
    factor = billed * unit_to_month_multiplier(product.unit_of_measure.unit) * transition.multiplier
    
    kg = product.kg_co2_equivalent
    m3 = product.m3_water_usage
    change = transition.change
    
    return Row(
        address=change.address,
        type=change.type,
        action=transition.action,
        sku=product.sku,
        kgco2e_month=None if kg is None else kg * factor,
        kgco2e_known=kg is not None,
        m3_water_month=None if m3 is None else m3 * factor,
        m3_water_known=m3 is not None
    )


def rows_from_resolution(transition: ActionTransition, resolution: Resolution) -> List[Row]:
    """One row per matched role."""
    return [row_from_match(transition, match) for match in resolution.matches]


def unsupported_from_error(address: str, error: Optional[Exception]) -> UnsupportedResource:
    """Classify a resolution failure; unknown failures count as no catalog match."""
    if isinstance(error, ResolutionError):
        return UnsupportedResource(address=address, code=error.code, reason=error.reason)
    return UnsupportedResource(
        address=address,
        code=NoCatalogMatchError.code,
        reason=DEFAULT_UNSUPPORTED_REASON
    )


class _Tally(NamedTuple):
    kgco2e_month: float = 0.0
    m3_water_month: float = 0.0
    unknown_rows: int = 0
    unknown_kg_rows: int = 0
    unknown_water_rows: int = 0


def _tally_row(tally: _Tally, row: Row) -> _Tally:
    return _Tally(
        kgco2e_month=tally.kgco2e_month + (row.kgco2e_month if row.kgco2e_known else 0.0),
        m3_water_month=tally.m3_water_month + (row.m3_water_month if row.m3_water_known else 0.0),
        unknown_rows=tally.unknown_rows + (1 if row.has_unknown else 0),
        unknown_kg_rows=tally.unknown_kg_rows + (0 if row.kgco2e_known else 1),
        unknown_water_rows=tally.unknown_water_rows + (0 if row.m3_water_known else 1)
    )


def summarize_rows(rows: Iterable[Row]) -> Totals:
    """Fold rows into totals; each known flag is independent of the other metric."""
    tally = reduce(_tally_row, rows, _Tally())
    return Totals(
        kgco2e_month=tally.kgco2e_month,
        kgco2e_known=tally.unknown_kg_rows == 0,
        m3_water_month=tally.m3_water_month,
        m3_water_known=tally.unknown_water_rows == 0,
        unknown_rows=tally.unknown_rows
    )


def build_report(changes: Sequence[ResourceChange], products: Sequence[CatalogProduct]) -> Report:
    """
    Estimate the monthly footprint of a set of planned changes.
    
    Resolution failures are recorded per resource and never abort the batch.
    
    Args:
        changes: Resource changes in plan order
        products: Catalog products in catalog order
        
    Returns:
        Report with rows, unsupported resources and totals
    """
    rows: List[Row] = []
    unsupported: List[UnsupportedResource] = []
    
    for change in changes:
        for transition in action_transitions(change):
            try:
                resolution = resolve(transition.change, products)
            except ResolutionError as e:
                logger.debug(f"{change.address} ({transition.action}): {e}")
                unsupported.append(unsupported_from_error(change.address, e))
                continue
            
            if not resolution.matches:
                unsupported.append(unsupported_from_error(change.address, None))
                continue
            
            logger.debug(
                f"{change.address} ({transition.action}): {resolution.product.sku} "
                f"x{resolution.quantity:g} across {len(resolution.matches)} role(s)"
            )
            rows.extend(rows_from_resolution(transition, resolution))
    
    totals = summarize_rows(rows)
    logger.info(
        f"Estimated {len(rows)} row(s) from {len(changes)} change(s); "
        f"{len(unsupported)} unsupported, {totals.unknown_rows} with unknown footprint"
    )
    return Report(rows=rows, unsupported=unsupported, totals=totals)
