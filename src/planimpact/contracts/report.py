"""Pydantic models for the estimate report (stable output contract)."""

from typing import List, Optional
from pydantic import BaseModel, Field


class Row(BaseModel):
    """Monthly impact of one catalog match for one action transition."""
    address: str = Field(..., description="Resource address")
    type: str = Field(..., description="Resource type")
    action: str = Field(..., description="Transition label: create, delete or update")
    sku: str = Field(default="", description="Matched catalog SKU")
    kgco2e_month: Optional[float] = Field(default=None, description="Signed kgCO2e per month, None when unknown")
    kgco2e_known: bool = Field(default=False, description="Whether the catalog had a kgCO2e rate")
    m3_water_month: Optional[float] = Field(default=None, description="Signed m3 of water per month, None when unknown")
    m3_water_known: bool = Field(default=False, description="Whether the catalog had a water rate")

    class Config:
        """Pydantic config."""
        frozen = True

    @property
    def has_unknown(self) -> bool:
        return not (self.kgco2e_known and self.m3_water_known)


class UnsupportedResource(BaseModel):
    """A resource transition that could not be estimated."""
    address: str = Field(..., description="Resource address")
    code: str = Field(..., description="Error code: not_implemented, missing_required_attribute, no_catalog_match")
    reason: str = Field(..., description="Human-readable reason")

    class Config:
        """Pydantic config."""
        frozen = True


class Totals(BaseModel):
    """Report totals over known values, with partial-knowledge flags."""
    kgco2e_month: float = Field(default=0.0, description="Sum of known kgCO2e per month")
    kgco2e_known: bool = Field(default=True, description="True only if no row has an unknown kgCO2e rate")
    m3_water_month: float = Field(default=0.0, description="Sum of known m3 of water per month")
    m3_water_known: bool = Field(default=True, description="True only if no row has an unknown water rate")
    unknown_rows: int = Field(default=0, ge=0, description="Rows with at least one unknown metric")

    class Config:
        """Pydantic config."""
        frozen = True


class Report(BaseModel):
    """Estimate report - rows, unsupported resources and totals."""
    rows: List[Row] = Field(default_factory=list, description="Impact rows in plan order")
    unsupported: List[UnsupportedResource] = Field(default_factory=list, description="Resources that could not be estimated")
    totals: Totals = Field(default_factory=Totals, description="Aggregate totals")

    class Config:
        """Pydantic config."""
        frozen = True
        json_schema_extra = {
            "example": {
                "rows": [
                    {
                        "address": "scaleway_instance_server.web",
                        "type": "scaleway_instance_server",
                        "action": "create",
                        "sku": "/compute/pop2_hc_2c_4g/run_fr-par-2",
                        "kgco2e_month": 0.73,
                        "kgco2e_known": True,
                        "m3_water_month": None,
                        "m3_water_known": False
                    }
                ],
                "unsupported": [
                    {
                        "address": "scaleway_object_bucket.assets",
                        "code": "not_implemented",
                        "reason": "not implemented"
                    }
                ],
                "totals": {
                    "kgco2e_month": 0.73,
                    "kgco2e_known": True,
                    "m3_water_month": 0.0,
                    "m3_water_known": False,
                    "unknown_rows": 1
                }
            }
        }
