"""Base service class for business logic."""

from __future__ import annotations

import logging

from skyvault.infra.logging import get_lazy_logger


class BaseService:
    """Base class for feature services.

    Services own ownership checks and conflict rules; repositories only build
    and run statements.

    Loggers:
        - self.logger: Standard logger for INFO/WARNING/ERROR (always evaluated)
        - self._lazy: Lazy logger for DEBUG (zero overhead when DEBUG disabled)

    Example:
        class ContactService(BaseService):
            def __init__(self, session: AsyncSession):
                super().__init__()
                self._session = session

            async def list_contacts(self, owner_id, options):
                self._lazy.debug(lambda: f"list_contacts({owner_id}, {options})")
                ...
    """

    def __init__(self) -> None:
        class_name = self.__class__.__name__
        self.logger = logging.getLogger(class_name)
        self._lazy = get_lazy_logger(class_name)
