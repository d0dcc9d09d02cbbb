"""Measured environmental footprint client (authenticated)."""

from typing import Optional
import requests
from pydantic import ValidationError
from .models import ImpactDataResponse, ImpactQuery
from ..utils.errors import FootprintError
from ..utils.logging import get_logger

logger = get_logger("footprint.client")

DEFAULT_BASE_URL = "https://api.scaleway.com"
IMPACT_DATA_PATH = "/environmental-footprint/v1alpha1/data/query"
DEFAULT_TIMEOUT = 15


class FootprintClient:
    """
    Queries measured kgCO2e and water usage of an organization.
    
    Unlike the catalog, this API needs an access key and a secret key; the
    secret key is sent as the X-Auth-Token header.
    """
    
    def __init__(
        self,
        access_key: str,
        secret_key: str,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize footprint client.
        
        Args:
            access_key: Scaleway access key
            secret_key: Scaleway secret key
            base_url: API base URL (default: https://api.scaleway.com)
            user_agent: Optional User-Agent header value
            timeout: Per-request timeout in seconds
            session: Optional requests session (tests inject a mock here)
            
        Raises:
            FootprintError: If a credential is empty
        """
        if not (access_key or "").strip():
            raise FootprintError("Could not create footprint client: access key is empty")
        if not (secret_key or "").strip():
            raise FootprintError("Could not create footprint client: secret key is empty")
        
        self.access_key = access_key.strip()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers["X-Auth-Token"] = secret_key.strip()
        if user_agent:
            self.session.headers["User-Agent"] = user_agent
    
    def query_impact_data(self, query: ImpactQuery) -> ImpactDataResponse:
        """
        Fetch measured impact for the query's organization and filters.
        
        Raises:
            FootprintError: On transport, HTTP or decoding failure
        """
        url = f"{self.base_url}{IMPACT_DATA_PATH}"
        try:
            response = self.session.get(url, params=query.to_params(), timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as e:
            logger.error(f"Footprint API error: {e}")
            raise FootprintError(f"Could not query impact data: {e}") from e
        except ValueError as e:
            raise FootprintError(f"Could not decode impact data: {e}") from e
        
        if payload is None:
            return ImpactDataResponse()
        if not isinstance(payload, dict):
            raise FootprintError("Could not decode impact data: expected a JSON object")
        
        try:
            result = ImpactDataResponse.model_validate(payload)
        except ValidationError as e:
            raise FootprintError(f"Could not decode impact data: {e}") from e
        
        logger.info(f"Fetched impact data for {len(result.projects)} project(s)")
        return result
