"""Query filtering utilities for SQLAlchemy.

These filters work directly with SQLAlchemy statements without hiding the
query. They are utility helpers, not an abstraction layer.

Usage:
    from sqlalchemy import select
    from skyvault.core.database.filters import SearchFilter

    stmt = select(Contact).where(Contact.owner_id == owner_id)
    stmt = SearchFilter([Contact.name, Contact.email], "ada").apply(stmt)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Literal

from sqlalchemy import Select, and_, func, or_

if TYPE_CHECKING:
    from sqlalchemy.orm import InstrumentedAttribute


class StatementFilter(ABC):
    """Base class for statement filters.

    All filters implement `apply()` which modifies a SQLAlchemy statement.
    """

    @abstractmethod
    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply filter to statement.

        Args:
            statement: SQLAlchemy select statement

        Returns:
            Modified select statement
        """
        ...


class SearchFilter(StatementFilter):
    """Substring search over one or more text columns.

    An empty or missing search term leaves the statement untouched.

    Example:
        stmt = SearchFilter(
            fields=[Contact.name, Contact.email],
            value="ada",
            case_insensitive=True,
        ).apply(stmt)

        # Generates: WHERE (lower(name) LIKE '%ada%' OR lower(email) LIKE '%ada%')
    """

    def __init__(
        self,
        fields: InstrumentedAttribute[Any] | Sequence[InstrumentedAttribute[Any]],
        value: str | None,
        *,
        case_insensitive: bool = True,
        operator: Literal["and", "or"] = "or",
    ):
        self.fields = [fields] if not isinstance(fields, Sequence) else list(fields)
        self.value = value
        self.case_insensitive = case_insensitive
        self.operator = operator

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply search filter to statement."""
        if not self.value or not self.fields:
            return statement

        search_term = f"%{self.value}%"
        if self.case_insensitive:
            conditions = [func.lower(field).like(search_term.lower()) for field in self.fields]
        else:
            conditions = [field.like(search_term) for field in self.fields]

        if self.operator == "or":
            return statement.where(or_(*conditions))
        return statement.where(and_(*conditions))


__all__ = ["SearchFilter", "StatementFilter"]
