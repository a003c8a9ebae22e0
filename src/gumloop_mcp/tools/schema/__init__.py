"""Tool schema sanitizing and cross-field constraints."""

from .schema_validator import SchemaValidator
from .constraints import OneOf, check_constraints

__all__ = ["SchemaValidator", "OneOf", "check_constraints"]
