"""Shared Pydantic schemas."""

from skyvault.core.schemas.base import CustomBase, ResourceResponse
from skyvault.core.schemas.problem_details import (
    FieldError,
    ProblemDetails,
    ValidationProblemDetails,
)

__all__ = [
    "CustomBase",
    "FieldError",
    "ProblemDetails",
    "ResourceResponse",
    "ValidationProblemDetails",
]
