"""Scaleway credentials for authenticated APIs, read from the environment."""

import os
from typing import List, Optional

ENV_ACCESS_KEY = "SCW_ACCESS_KEY"
ENV_SECRET_KEY = "SCW_SECRET_KEY"
ENV_ORGANIZATION_ID = "SCW_ORGANIZATION_ID"


class ScalewayCredentials:
    """Access key, secret key and default organization."""
    
    def __init__(self, access_key: str = "", secret_key: str = "", organization_id: str = ""):
        self.access_key = access_key
        self.secret_key = secret_key
        self.organization_id = organization_id
    
    def missing(self) -> List[str]:
        """Names of the environment variables that are unset."""
        missing = []
        if not self.access_key:
            missing.append(ENV_ACCESS_KEY)
        if not self.secret_key:
            missing.append(ENV_SECRET_KEY)
        if not self.organization_id:
            missing.append(ENV_ORGANIZATION_ID)
        return missing
    
    def resolve_organization(self, override: Optional[str] = None) -> str:
        """Explicit organization if given, else the environment default."""
        return (override or "").strip() or self.organization_id
    
    def __repr__(self) -> str:
        secret = "***" if self.secret_key else ""
        return (
            f"ScalewayCredentials(access_key={self.access_key!r}, secret_key={secret!r}, "
            f"organization_id={self.organization_id!r})"
        )


def load_credentials() -> ScalewayCredentials:
    """Read SCW_ACCESS_KEY, SCW_SECRET_KEY and SCW_ORGANIZATION_ID (blank means unset)."""
    return ScalewayCredentials(
        access_key=os.getenv(ENV_ACCESS_KEY, "").strip(),
        secret_key=os.getenv(ENV_SECRET_KEY, "").strip(),
        organization_id=os.getenv(ENV_ORGANIZATION_ID, "").strip()
    )
