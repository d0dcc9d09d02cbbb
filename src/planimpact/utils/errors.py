"""Custom exception classes for planimpact."""

from typing import Optional


class PlanImpactError(Exception):
    """Base exception for all planimpact errors."""
    pass


class PlanLoadError(PlanImpactError):
    """Raised when a Terraform plan cannot be loaded or decoded."""
    pass


class CatalogError(PlanImpactError):
    """Raised when the product catalog cannot be fetched or decoded."""
    pass


class ConfigError(PlanImpactError):
    """Raised when configuration is invalid or missing."""
    pass


class EstimationError(PlanImpactError):
    """Raised when a report cannot be produced at all."""
    pass


class FootprintError(PlanImpactError):
    """Raised when measured footprint data cannot be fetched or decoded."""
    pass


class QueryValidationError(PlanImpactError):
    """Raised when a footprint filter value (date, category) cannot be parsed."""
    pass


class ResolutionError(PlanImpactError):
    """
    Raised when a resource change cannot be mapped to catalog products.

    Resolution errors are per-resource: the estimator records them as
    unsupported resources and keeps going.
    """

    code = "no_catalog_match"

    def __init__(self, reason: str = "", code: Optional[str] = None):
        if code is not None:
            self.code = code
        self.reason = reason
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.reason:
            return self.code
        return f"{self.code}: {self.reason}"


class NotImplementedResourceError(ResolutionError):
    """Raised when no mapping rule exists for a resource type."""
    code = "not_implemented"


class MissingRequiredAttributeError(ResolutionError):
    """Raised when a rule needs an attribute the plan does not carry."""
    code = "missing_required_attribute"


class NoCatalogMatchError(ResolutionError):
    """Raised when a rule ran but no catalog product passed its filters."""
    code = "no_catalog_match"
