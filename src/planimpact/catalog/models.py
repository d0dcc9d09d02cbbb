"""Pydantic models for public catalog products."""

from datetime import datetime
from typing import List, Optional, Any
from pydantic import BaseModel, Field, field_validator


class Locality(BaseModel):
    """Geographic scope of a product: global, region-bound or zone-bound."""
    global_: Optional[bool] = Field(default=None, alias="global", description="True for globally available products")
    region: str = Field(default="", description="Region the product is bound to (e.g., 'fr-par')")
    zone: str = Field(default="", description="Zone the product is bound to (e.g., 'fr-par-1')")

    class Config:
        """Pydantic config."""
        frozen = True
        populate_by_name = True

    @field_validator("region", "zone", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def is_global(self) -> bool:
        return bool(self.global_)


class UnitOfMeasure(BaseModel):
    """Billing unit and bundle size a rate applies to."""
    unit: str = Field(default="", description="Billing unit: hour, month, year or other")
    size: int = Field(default=1, ge=0, description="Bundle size the rate applies to (e.g., 100 for per-100GB)")

    class Config:
        """Pydantic config."""
        frozen = True

    @field_validator("unit", mode="before")
    @classmethod
    def _normalize_unit(cls, value: Any) -> Any:
        return "" if value is None else str(value).strip().lower()

    @field_validator("size", mode="before")
    @classmethod
    def _size_default(cls, value: Any) -> Any:
        return 1 if value is None else value


class EnvironmentalImpactEstimation(BaseModel):
    """Per-billing-unit impact; a missing field means unknown, not zero."""
    kg_co2_equivalent: Optional[float] = Field(default=None, description="kgCO2e per billing unit")
    m3_water_usage: Optional[float] = Field(default=None, description="m3 of water per billing unit")

    class Config:
        """Pydantic config."""
        frozen = True


class CatalogProduct(BaseModel):
    """One priced and rated catalog SKU."""
    sku: str = Field(..., description="Unique SKU, also the deterministic tie-break key")
    service_category: str = Field(default="", description="Coarse service classification")
    product_category: str = Field(default="", description="Coarse product classification")
    product: str = Field(default="", description="Product name")
    variant: str = Field(default="", description="Product variant")
    description: str = Field(default="", description="Free-text description")
    locality: Locality = Field(default_factory=Locality, description="Product locality")
    unit_of_measure: UnitOfMeasure = Field(default_factory=UnitOfMeasure, description="Billing unit")
    environmental_impact_estimation: Optional[EnvironmentalImpactEstimation] = Field(
        default=None,
        description="Per-unit environmental rates, absent when the catalog has none"
    )
    status: str = Field(default="", description="Catalog status (informational)")
    end_of_life_at: Optional[datetime] = Field(default=None, description="End of life date (informational)")
    badges: List[str] = Field(default_factory=list, description="Catalog badges (informational)")

    class Config:
        """Pydantic config."""
        frozen = True

    @field_validator(
        "service_category", "product_category", "product", "variant", "description", "status",
        mode="before"
    )
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("locality", "unit_of_measure", mode="before")
    @classmethod
    def _none_as_default(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("badges", mode="before")
    @classmethod
    def _none_as_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def kg_co2_equivalent(self) -> Optional[float]:
        if self.environmental_impact_estimation is None:
            return None
        return self.environmental_impact_estimation.kg_co2_equivalent

    @property
    def m3_water_usage(self) -> Optional[float]:
        if self.environmental_impact_estimation is None:
            return None
        return self.environmental_impact_estimation.m3_water_usage
