"""Service layer building blocks."""

from skyvault.core.services.base import BaseService

__all__ = ["BaseService"]
