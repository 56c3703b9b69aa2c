# src/kastenator/models/validation.py
"""Validation result model."""

from pydantic import BaseModel


class ValidationResult(BaseModel):
    """Outcome of validating a candidate explanation."""

    valid: bool
    feedback: str
    suggestions: list[str] | None = None
