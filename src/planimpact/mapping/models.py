"""Resolver output: catalog products matched to a resource change."""

from typing import List
from pydantic import BaseModel, Field
from ..catalog.models import CatalogProduct


class Match(BaseModel):
    """One catalog product and the quantity of it a resource consumes."""
    product: CatalogProduct = Field(..., description="Matched catalog product")
    quantity: float = Field(..., description="Quantity before bundle-size normalization")

    class Config:
        """Pydantic config."""
        frozen = True


class Resolution(BaseModel):
    """
    Ordered matches that together represent one logical resource.

    Single-role resources carry one match; multi-role resources (e.g., a
    cache cluster with main and additional nodes) carry one per role.
    """
    matches: List[Match] = Field(default_factory=list, description="Matches in role order")

    class Config:
        """Pydantic config."""
        frozen = True

    @property
    def product(self) -> CatalogProduct:
        """Primary product (first role)."""
        return self.matches[0].product

    @property
    def quantity(self) -> float:
        """Total quantity across roles."""
        return sum(m.quantity for m in self.matches)
