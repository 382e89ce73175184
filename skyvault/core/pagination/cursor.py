"""Cursor encoding and decoding for keyset pagination.

A cursor names the anchor row of a page: its identity plus, when the listing
is sorted by name or modification time, the value of that secondary key.

Wire format:
1. JSON array of field values, identity first
2. Wrapped in an object tagged with the sort key it was minted for
3. Base64 URL-safe encoded, padding stripped

Example cursor payload:
    {"k":"name","v":["0b6f1c1e-8d5a-4c61-9a7e-1d1d0c6f2b11","report, final.pdf"]}

Because values travel as JSON strings, names containing commas or any other
punctuation round-trip unchanged. A cursor minted under one sort key is
rejected when replayed against another.
"""

from __future__ import annotations

import base64
import json
from collections.abc import Callable
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from skyvault.core.exceptions import InvalidCursorException
from skyvault.core.pagination.enums import SortBy
from skyvault.core.settings import get_pagination_settings


class Cursor(BaseModel):
    """Decoded anchor of a page.

    Attributes:
        id: Anchor row identity. Text as minted, or the value produced by
            the ``parse_id`` callable given to ``CursorCodec.decode``.
        name: Secondary key value, set only for ``SortBy.NAME``.
        updated: Modification timestamp, set only for ``SortBy.UPDATED``.
    """

    model_config = ConfigDict(frozen=True)

    id: Any
    name: str | None = None
    updated: datetime | None = None


class CursorCodec:
    """Encode and decode pagination cursors.

    Usage:
        raw = CursorCodec.encode(Cursor(id=str(file.id), name=file.name), SortBy.NAME)
        cursor = CursorCodec.decode(raw, SortBy.NAME)
    """

    @staticmethod
    def encode(cursor: Cursor, sort_by: SortBy) -> str:
        """Encode a cursor to an opaque string.

        Args:
            cursor: Anchor values; the field matching ``sort_by`` must be set.
            sort_by: Sort key the cursor is minted for.

        Returns:
            URL-safe base64 string without padding.

        Raises:
            ValueError: If the secondary value required by ``sort_by`` is missing.
        """
        fields: list[str] = [str(cursor.id)]
        if sort_by is SortBy.NAME:
            if cursor.name is None:
                raise ValueError("Cursor sorted by name requires a name value")
            fields.append(cursor.name)
        elif sort_by is SortBy.UPDATED:
            if cursor.updated is None:
                raise ValueError("Cursor sorted by updated requires a timestamp value")
            fields.append(cursor.updated.isoformat())

        payload = json.dumps(
            {"k": sort_by.value, "v": fields},
            separators=(",", ":"),
            ensure_ascii=False,
        )
        return base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii").rstrip("=")

    @staticmethod
    def decode(
        raw: str,
        sort_by: SortBy,
        *,
        max_length: int | None = None,
        parse_id: Callable[[str], Any] | None = None,
    ) -> Cursor | None:
        """Decode a cursor string.

        Args:
            raw: Encoded cursor; an empty string means "no anchor".
            sort_by: Sort key of the current request.
            max_length: Longest accepted input. Defaults to
                ``PaginationSettings.max_cursor_length``.
            parse_id: Converts the identity text to the id column's type.
                Its TypeError or ValueError rejects the cursor.

        Returns:
            The decoded Cursor, or None when ``raw`` is empty.

        Raises:
            InvalidCursorException: If the string is too long, is not a cursor,
                was minted for another sort key, carries the wrong number of
                fields, holds an unparseable timestamp, or carries an identity
                ``parse_id`` rejects.
        """
        if not raw:
            return None

        if max_length is None:
            max_length = get_pagination_settings().max_cursor_length
        if len(raw) > max_length:
            raise InvalidCursorException(
                f"Invalid cursor: longer than {max_length} characters",
                reason="too-long",
            )

        try:
            padded = raw + "=" * (-len(raw) % 4)
            payload = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))
        except ValueError as e:
            raise InvalidCursorException("Invalid cursor: not a cursor token", reason="malformed") from e

        if not isinstance(payload, dict) or not isinstance(payload.get("v"), list):
            raise InvalidCursorException("Invalid cursor: not a cursor token", reason="malformed")
        if payload.get("k") != sort_by.value:
            raise InvalidCursorException(
                f"Invalid cursor: not valid for sort-by={sort_by.value}",
                reason="sort-mismatch",
            )

        fields = payload["v"]
        if len(fields) != sort_by.cursor_fields:
            raise InvalidCursorException(
                f"Invalid cursor: expected {sort_by.cursor_fields} fields, got {len(fields)}",
                reason="field-count",
            )
        if not all(isinstance(field, str) for field in fields) or not fields[0]:
            raise InvalidCursorException("Invalid cursor: malformed field values", reason="malformed")

        identity: Any = fields[0]
        if parse_id is not None:
            try:
                identity = parse_id(identity)
            except (TypeError, ValueError) as e:
                raise InvalidCursorException(
                    "Invalid cursor: malformed identity",
                    reason="identity",
                ) from e

        if sort_by is SortBy.NAME:
            return Cursor(id=identity, name=fields[1])
        if sort_by is SortBy.UPDATED:
            try:
                updated = datetime.fromisoformat(fields[1])
            except ValueError as e:
                raise InvalidCursorException(
                    "Invalid cursor: unparseable timestamp",
                    reason="timestamp",
                ) from e
            return Cursor(id=identity, updated=updated)
        return Cursor(id=identity)


__all__ = ["Cursor", "CursorCodec"]
