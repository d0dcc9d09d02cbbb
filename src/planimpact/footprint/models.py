"""Pydantic models for measured footprint queries and responses."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator


class ServiceCategory(str, Enum):
    """Service categories accepted by the footprint API."""
    BAREMETAL = "baremetal"
    COMPUTE = "compute"
    STORAGE = "storage"


class ProductCategory(str, Enum):
    """Product categories accepted by the footprint API."""
    APPLE_SILICON = "apple_silicon"
    BLOCK_STORAGE = "block_storage"
    DEDIBOX = "dedibox"
    ELASTIC_METAL = "elastic_metal"
    INSTANCES = "instances"
    OBJECT_STORAGE = "object_storage"


def _drop_nulls(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, list):
        return [item for item in value if item is not None]
    return value


def _none_as_empty(value: Any) -> Any:
    return "" if value is None else value


class Impact(BaseModel):
    """Measured impact; missing figures are reported as zero by the API."""
    kg_co2_equivalent: float = Field(default=0.0, description="Measured kgCO2e")
    m3_water_usage: float = Field(default=0.0, description="Measured m3 of water")

    class Config:
        """Pydantic config."""
        frozen = True

    @field_validator("kg_co2_equivalent", "m3_water_usage", mode="before")
    @classmethod
    def _none_as_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value


class SkuImpact(BaseModel):
    """Impact of one SKU within a zone."""
    sku: str = Field(default="", description="Catalog SKU")
    total_sku_impact: Impact = Field(default_factory=Impact, description="SKU total")
    service_category: str = Field(default="", description="Service category")
    product_category: str = Field(default="", description="Product category")

    class Config:
        """Pydantic config."""
        frozen = True

    @field_validator("sku", "service_category", "product_category", mode="before")
    @classmethod
    def _strings_default(cls, value: Any) -> Any:
        return _none_as_empty(value)

    @field_validator("total_sku_impact", mode="before")
    @classmethod
    def _impact_default(cls, value: Any) -> Any:
        return {} if value is None else value


class ZoneImpact(BaseModel):
    """Impact of one zone, broken down by SKU."""
    zone: str = Field(default="", description="Zone (e.g., 'fr-par-1')")
    total_zone_impact: Impact = Field(default_factory=Impact, description="Zone total")
    skus: List[SkuImpact] = Field(default_factory=list, description="Per-SKU impact")

    class Config:
        """Pydantic config."""
        frozen = True

    @field_validator("zone", mode="before")
    @classmethod
    def _zone_default(cls, value: Any) -> Any:
        return _none_as_empty(value)

    @field_validator("total_zone_impact", mode="before")
    @classmethod
    def _impact_default(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("skus", mode="before")
    @classmethod
    def _skip_nulls(cls, value: Any) -> Any:
        return _drop_nulls(value)


class RegionImpact(BaseModel):
    """Impact of one region, broken down by zone."""
    region: str = Field(default="", description="Region (e.g., 'fr-par')")
    total_region_impact: Impact = Field(default_factory=Impact, description="Region total")
    zones: List[ZoneImpact] = Field(default_factory=list, description="Per-zone impact")

    class Config:
        """Pydantic config."""
        frozen = True

    @field_validator("region", mode="before")
    @classmethod
    def _region_default(cls, value: Any) -> Any:
        return _none_as_empty(value)

    @field_validator("total_region_impact", mode="before")
    @classmethod
    def _impact_default(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("zones", mode="before")
    @classmethod
    def _skip_nulls(cls, value: Any) -> Any:
        return _drop_nulls(value)


class ProjectImpact(BaseModel):
    """Impact of one project, broken down by region."""
    project_id: str = Field(default="", description="Project ID")
    total_project_impact: Impact = Field(default_factory=Impact, description="Project total")
    regions: List[RegionImpact] = Field(default_factory=list, description="Per-region impact")

    class Config:
        """Pydantic config."""
        frozen = True

    @field_validator("project_id", mode="before")
    @classmethod
    def _project_default(cls, value: Any) -> Any:
        return _none_as_empty(value)

    @field_validator("total_project_impact", mode="before")
    @classmethod
    def _impact_default(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("regions", mode="before")
    @classmethod
    def _skip_nulls(cls, value: Any) -> Any:
        return _drop_nulls(value)


class ImpactDataResponse(BaseModel):
    """Measured footprint of an organization over a period."""
    start_date: Optional[datetime] = Field(default=None, description="Period start")
    end_date: Optional[datetime] = Field(default=None, description="Period end")
    total_impact: Impact = Field(default_factory=Impact, description="Organization total")
    projects: List[ProjectImpact] = Field(default_factory=list, description="Per-project impact")

    class Config:
        """Pydantic config."""
        frozen = True

    @field_validator("total_impact", mode="before")
    @classmethod
    def _impact_default(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("projects", mode="before")
    @classmethod
    def _skip_nulls(cls, value: Any) -> Any:
        return _drop_nulls(value)


class ImpactQuery(BaseModel):
    """Filters for a measured footprint query."""
    organization_id: str = Field(..., min_length=1, description="Organization to query")
    start_date: Optional[datetime] = Field(default=None, description="Period start (API default when None)")
    end_date: Optional[datetime] = Field(default=None, description="Period end (API default when None)")
    project_ids: List[str] = Field(default_factory=list, description="Project filter")
    regions: List[str] = Field(default_factory=list, description="Region filter")
    zones: List[str] = Field(default_factory=list, description="Zone filter")
    service_categories: List[ServiceCategory] = Field(default_factory=list, description="Service category filter")
    product_categories: List[ProductCategory] = Field(default_factory=list, description="Product category filter")

    class Config:
        """Pydantic config."""
        frozen = True

    def to_params(self) -> Dict[str, Any]:
        """Query-string parameters; list filters repeat their key, empty filters are omitted."""
        params: Dict[str, Any] = {"organization_id": self.organization_id}
        if self.start_date is not None:
            params["start_date"] = _format_timestamp(self.start_date)
        if self.end_date is not None:
            params["end_date"] = _format_timestamp(self.end_date)
        if self.project_ids:
            params["project_ids"] = list(self.project_ids)
        if self.regions:
            params["regions"] = list(self.regions)
        if self.zones:
            params["zones"] = list(self.zones)
        if self.service_categories:
            params["service_categories"] = [c.value for c in self.service_categories]
        if self.product_categories:
            params["product_categories"] = [c.value for c in self.product_categories]
        return params


def _format_timestamp(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")
