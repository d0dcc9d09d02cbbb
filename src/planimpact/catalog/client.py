"""Public product catalog client (read-only, unauthenticated)."""

from typing import Any, Dict, List, Optional
import requests
from .loader import parse_products
from .models import CatalogProduct
from ..utils.errors import CatalogError
from ..utils.logging import get_logger

logger = get_logger("catalog.client")

DEFAULT_BASE_URL = "https://api.scaleway.com"
PRODUCTS_PATH = "/product-catalog/v2alpha1/public-catalog/products"
DEFAULT_PAGE_SIZE = 100
DEFAULT_TIMEOUT = 15
MAX_PAGES = 1000


class CatalogClient:
    """
    Lists products from the public catalog API.
    
    The catalog is public: no credentials are sent.
    """
    
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        page_size: int = DEFAULT_PAGE_SIZE,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize catalog client.
        
        Args:
            base_url: API base URL (default: https://api.scaleway.com)
            user_agent: Optional User-Agent header value
            timeout: Per-request timeout in seconds
            page_size: Products requested per page by list_all_products
            session: Optional requests session (tests inject a mock here)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.page_size = page_size if page_size > 0 else DEFAULT_PAGE_SIZE
        self.session = session or requests.Session()
        if user_agent:
            self.session.headers["User-Agent"] = user_agent
    
    def list_products(self, page: int = 1, page_size: Optional[int] = None) -> Dict[str, Any]:
        """
        Fetch one page of products.
        
        Returns:
            {"products": List[CatalogProduct], "total_count": int}
            
        Raises:
            CatalogError: On transport, HTTP or decoding failure
        """
        params = {}
        if page > 0:
            params["page"] = page
        if page_size:
            params["page_size"] = page_size
        
        url = f"{self.base_url}{PRODUCTS_PATH}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as e:
            logger.error(f"Catalog API error: {e}")
            raise CatalogError(f"Could not list products: {e}") from e
        except ValueError as e:
            raise CatalogError(f"Could not decode catalog response: {e}") from e
        
        if not isinstance(payload, dict):
            raise CatalogError("Could not decode catalog response: expected a JSON object")
        
        raw_products = payload.get("products") or []
        if not isinstance(raw_products, list):
            raise CatalogError("Could not decode catalog response: 'products' must be a list")
        
        try:
            total_count = int(payload.get("total_count") or 0)
        except (TypeError, ValueError):
            total_count = 0
        
        return {"products": parse_products(raw_products), "total_count": total_count}
    
    def list_all_products(self) -> List[CatalogProduct]:
        """
        Fetch every product, page by page, in API order.
        
        Stops when total_count is reached or a page comes back empty.
        """
        products: List[CatalogProduct] = []
        page = 1
        while page <= MAX_PAGES:
            result = self.list_products(page=page, page_size=self.page_size)
            batch = result["products"]
            products.extend(batch)
            
            if not batch or len(products) >= result["total_count"]:
                break
            page += 1
        
        logger.info(f"Fetched {len(products)} catalog product(s) in {page} page(s)")
        return products
    
    def is_available(self) -> bool:
        """Check whether the catalog answers a one-product query."""
        try:
            self.list_products(page=1, page_size=1)
            return True
        except CatalogError:
            return False
