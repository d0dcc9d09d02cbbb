"""Pydantic models for resource changes decoded from a Terraform plan."""

from typing import List, Dict, Any
from pydantic import BaseModel, Field


class ResourceChange(BaseModel):
    """One planned mutation of one resource."""
    address: str = Field(..., description="Full resource address (e.g., 'module.app.scaleway_instance_server.web')")
    type: str = Field(..., description="Resource type used to select resolution rules")
    actions: List[str] = Field(default_factory=list, description="Planned actions (create, delete, update)")
    before: Dict[str, Any] = Field(default_factory=dict, description="Attributes before the change")
    after: Dict[str, Any] = Field(default_factory=dict, description="Attributes after the change")
    zone: str = Field(default="", description="Plan-level default zone")
    region: str = Field(default="", description="Plan-level default region")

    class Config:
        """Pydantic config."""
        frozen = True

    def attributes(self) -> Dict[str, Any]:
        """Return the attribute set rules read from: after, else before."""
        return self.after if self.after else self.before
