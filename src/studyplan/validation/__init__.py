"""Validation helpers."""

from .errors import PlanValidationError, ValidationError
from .errors import ValidationReport
from .domain_validator import validate_domain_inputs
from .request import validate_plan_request
from .schema_validator import validate_request_with_schema

__all__ = [
    "PlanValidationError",
    "ValidationError",
    "ValidationReport",
    "validate_domain_inputs",
    "validate_plan_request",
    "validate_request_with_schema",
]
