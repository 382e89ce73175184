"""ASGI middleware."""

from skyvault.app.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
