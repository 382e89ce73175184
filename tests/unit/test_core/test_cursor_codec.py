"""Unit tests for pagination cursor encoding and decoding."""

from __future__ import annotations

import base64
import json
import uuid
from datetime import UTC, datetime

import pytest

from skyvault.core.exceptions import InvalidCursorException
from skyvault.core.pagination import Cursor, CursorCodec, SortBy

FILE_ID = "0b6f1c1e-8d5a-4c61-9a7e-1d1d0c6f2b11"


def _raw(payload: object) -> str:
    data = json.dumps(payload).encode("utf-8")
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


class TestCursorCodecEncode:
    """Tests for CursorCodec.encode."""

    def test_encoded_cursor_is_url_safe_without_padding(self):
        encoded = CursorCodec.encode(Cursor(id=FILE_ID, name="report?.pdf"), SortBy.NAME)

        assert "=" not in encoded
        assert "+" not in encoded
        assert "/" not in encoded

    def test_payload_is_tagged_with_sort_key(self):
        encoded = CursorCodec.encode(Cursor(id=FILE_ID), SortBy.ID)

        padded = encoded + "=" * (-len(encoded) % 4)
        payload = json.loads(base64.urlsafe_b64decode(padded))
        assert payload == {"k": "id", "v": [FILE_ID]}

    def test_missing_secondary_value_raises(self):
        with pytest.raises(ValueError, match="name"):
            CursorCodec.encode(Cursor(id=FILE_ID), SortBy.NAME)

        with pytest.raises(ValueError, match="timestamp"):
            CursorCodec.encode(Cursor(id=FILE_ID), SortBy.UPDATED)


class TestCursorCodecDecode:
    """Tests for CursorCodec.decode."""

    @pytest.mark.parametrize(
        ("cursor", "sort_by"),
        [
            (Cursor(id=FILE_ID), SortBy.ID),
            (Cursor(id=FILE_ID, name="file_01.txt"), SortBy.NAME),
            (Cursor(id=FILE_ID, updated=datetime(2026, 3, 1, 12, 30, 15, 123456, tzinfo=UTC)), SortBy.UPDATED),
        ],
    )
    def test_decode_reverses_encode(self, cursor: Cursor, sort_by: SortBy):
        assert CursorCodec.decode(CursorCodec.encode(cursor, sort_by), sort_by) == cursor

    @pytest.mark.parametrize("sort_by", list(SortBy))
    def test_empty_string_means_no_anchor(self, sort_by: SortBy):
        assert CursorCodec.decode("", sort_by) is None

    def test_names_with_commas_and_unicode_survive(self):
        cursor = Cursor(id=FILE_ID, name="Q1, Q2 & Q3 résumé, final.pdf")

        decoded = CursorCodec.decode(CursorCodec.encode(cursor, SortBy.NAME), SortBy.NAME)

        assert decoded is not None
        assert decoded.name == "Q1, Q2 & Q3 résumé, final.pdf"

    def test_timestamp_keeps_microseconds(self):
        updated = datetime(2026, 1, 2, 3, 4, 5, 678901, tzinfo=UTC)

        decoded = CursorCodec.decode(
            CursorCodec.encode(Cursor(id=FILE_ID, updated=updated), SortBy.UPDATED),
            SortBy.UPDATED,
        )

        assert decoded is not None
        assert decoded.updated == updated

    def test_too_long_cursor_is_rejected(self):
        with pytest.raises(InvalidCursorException) as exc_info:
            CursorCodec.decode("a" * 65, SortBy.ID, max_length=64)

        assert exc_info.value.extra == {"reason": "too-long"}
        assert exc_info.value.status_code == 400

    def test_default_max_length_comes_from_settings(self, monkeypatch: pytest.MonkeyPatch):
        from skyvault.core.settings import clear_all_caches

        monkeypatch.setenv("PAGINATION_MAX_CURSOR_LENGTH", "80")
        clear_all_caches()
        encoded = CursorCodec.encode(Cursor(id=FILE_ID, name="x" * 100), SortBy.NAME)

        with pytest.raises(InvalidCursorException) as exc_info:
            CursorCodec.decode(encoded, SortBy.NAME)

        assert exc_info.value.extra["reason"] == "too-long"

    @pytest.mark.parametrize(
        "raw",
        [
            "not-valid-base64!!!",
            "%%%%",
            _raw(["id-only"]),
            _raw({"k": "id"}),
            _raw({"k": "id", "v": [123]}),
            _raw({"k": "id", "v": [""]}),
        ],
    )
    def test_garbage_is_rejected_as_malformed(self, raw: str):
        with pytest.raises(InvalidCursorException) as exc_info:
            CursorCodec.decode(raw, SortBy.ID)

        assert exc_info.value.extra["reason"] == "malformed"

    def test_cursor_from_other_sort_key_is_rejected(self):
        encoded = CursorCodec.encode(Cursor(id=FILE_ID, name="a.txt"), SortBy.NAME)

        with pytest.raises(InvalidCursorException) as exc_info:
            CursorCodec.decode(encoded, SortBy.UPDATED)

        assert exc_info.value.extra["reason"] == "sort-mismatch"

    def test_two_fields_against_identity_sort_fail(self):
        with pytest.raises(InvalidCursorException) as exc_info:
            CursorCodec.decode(_raw({"k": "id", "v": [FILE_ID, "a.txt"]}), SortBy.ID)

        assert exc_info.value.extra["reason"] == "field-count"

    def test_one_field_against_name_sort_fails(self):
        with pytest.raises(InvalidCursorException) as exc_info:
            CursorCodec.decode(_raw({"k": "name", "v": [FILE_ID]}), SortBy.NAME)

        assert exc_info.value.extra["reason"] == "field-count"

    def test_unparseable_timestamp_fails(self):
        with pytest.raises(InvalidCursorException) as exc_info:
            CursorCodec.decode(_raw({"k": "updated", "v": [FILE_ID, "yesterday"]}), SortBy.UPDATED)

        assert exc_info.value.extra["reason"] == "timestamp"

    def test_identity_parser_converts_the_anchor_id(self):
        encoded = CursorCodec.encode(Cursor(id=FILE_ID, name="a.txt"), SortBy.NAME)

        cursor = CursorCodec.decode(encoded, SortBy.NAME, parse_id=uuid.UUID)

        assert cursor == Cursor(id=uuid.UUID(FILE_ID), name="a.txt")

    def test_identity_rejected_by_parser_fails(self):
        encoded = CursorCodec.encode(Cursor(id="not-a-uuid"), SortBy.ID)

        with pytest.raises(InvalidCursorException) as exc_info:
            CursorCodec.decode(encoded, SortBy.ID, parse_id=uuid.UUID)

        assert exc_info.value.extra["reason"] == "identity"
