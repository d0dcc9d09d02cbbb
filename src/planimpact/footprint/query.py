"""Parse command-line filters into a footprint query."""

from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple
from ..utils.errors import QueryValidationError
from .models import ProductCategory, ServiceCategory

DATE_LAYOUT = "%Y-%m-%d"

_SERVICE_CATEGORIES = {
    "baremetal": ServiceCategory.BAREMETAL,
    "compute": ServiceCategory.COMPUTE,
    "storage": ServiceCategory.STORAGE,
}

_PRODUCT_CATEGORIES = {
    "applesilicon": ProductCategory.APPLE_SILICON,
    "blockstorage": ProductCategory.BLOCK_STORAGE,
    "dedibox": ProductCategory.DEDIBOX,
    "elasticmetal": ProductCategory.ELASTIC_METAL,
    "instances": ProductCategory.INSTANCES,
    "objectstorage": ProductCategory.OBJECT_STORAGE,
}


def parse_csv(*values: Optional[str]) -> List[str]:
    """Split comma-separated values, dropping blanks ("a, ,b" -> ["a", "b"])."""
    out = []
    for value in values:
        for part in (value or "").split(","):
            part = part.strip()
            if part:
                out.append(part)
    return out


def parse_date(raw: str) -> datetime:
    """
    Parse a YYYY-MM-DD or RFC3339 date into an aware UTC datetime.
    
    Raises:
        QueryValidationError: If the value matches neither layout
    """
    raw = (raw or "").strip()
    if not raw:
        raise QueryValidationError("could not parse date: date is empty")
    
    candidate = raw[:-1] + "+00:00" if raw.endswith(("Z", "z")) else raw
    if "T" in candidate or "t" in candidate:
        try:
            parsed = datetime.fromisoformat(candidate.replace("t", "T"))
        except ValueError:
            parsed = None
        if parsed is not None and parsed.tzinfo is not None:
            return parsed.astimezone(timezone.utc)
    
    try:
        return datetime.strptime(raw, DATE_LAYOUT).replace(tzinfo=timezone.utc)
    except ValueError:
        pass
    
    raise QueryValidationError(f"could not validate date {raw!r} (use YYYY-MM-DD or RFC3339)")


def _enum_token(value: str) -> str:
    value = value.strip().lower()
    for sep in ("_", "-", " "):
        value = value.replace(sep, "")
    return value


def parse_service_categories(raw: Optional[str]) -> List[ServiceCategory]:
    """Map --service-category values onto API categories."""
    out = []
    for value in parse_csv(raw):
        category = _SERVICE_CATEGORIES.get(_enum_token(value))
        if category is None:
            raise QueryValidationError(
                f"could not validate --service-category value {value!r} "
                f"(allowed: {', '.join(_SERVICE_CATEGORIES)})"
            )
        out.append(category)
    return out


def parse_product_categories(raw: Optional[str]) -> List[ProductCategory]:
    """Map --product-category values onto API categories."""
    out = []
    for value in parse_csv(raw):
        category = _PRODUCT_CATEGORIES.get(_enum_token(value))
        if category is None:
            raise QueryValidationError(
                f"could not validate --product-category value {value!r} "
                f"(allowed: {', '.join(_PRODUCT_CATEGORIES)})"
            )
        out.append(category)
    return out


def trailing_window(now: datetime, days: int) -> Tuple[datetime, datetime]:
    """Return (now - days, now) in UTC, truncated to the second."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    end = now.astimezone(timezone.utc).replace(microsecond=0)
    return end - timedelta(days=days), end
