"""Terraform plan ingestion: loading, validation and decoding."""

from .models import ResourceChange
from .plan_loader import load_plan_json, load_plan_bytes, load_plan_from_terraform
from .plan_parser import parse_resource_changes

__all__ = [
    "ResourceChange",
    "load_plan_json",
    "load_plan_bytes",
    "load_plan_from_terraform",
    "parse_resource_changes",
]
