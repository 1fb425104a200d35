"""Structural validation of policy documents."""

from __future__ import annotations

from .policy import DEFAULT_SCHEMA, PolicyValidationError, validate_policy

__all__ = [
    "DEFAULT_SCHEMA",
    "PolicyValidationError",
    "validate_policy",
]
