#!/usr/bin/env python3
"""
validators.py
--------------------
Field validation and normalization for decoded documents.

Every failure is a DecodeError whose message names the entry and field,
so the CLI can report exactly what is wrong with the document.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping, Optional

from tomlreadme.core.exceptions import DecodeError
from tomlreadme.utils.dates import EntryDate, parse_date

DECODE_PREFIX = "Unable to parse the document"


def decode_error(message: str, where: Optional[str] = None) -> DecodeError:
    """Build a DecodeError with the standard prefix and location."""
    if where:
        return DecodeError(f"{DECODE_PREFIX}: {where}: {message}")
    return DecodeError(f"{DECODE_PREFIX}: {message}")


class DataValidator:
    """Type checks for raw document values."""

    @staticmethod
    def require(data: Mapping[str, Any], field: str, where: str) -> Any:
        """
        Return a required field's value.

        Raises:
            DecodeError: If the field is absent
        """
        if field not in data or data[field] is None:
            raise decode_error(f"missing field '{field}'", where)
        return data[field]

    @staticmethod
    def normalize_string(
        value: Any, field: str, where: str, allow_empty: bool = True
    ) -> str:
        """
        Check that a value is a string.

        Raises:
            DecodeError: If the value is not a str, or is empty when
                ``allow_empty`` is False
        """
        if not isinstance(value, str):
            raise decode_error(
                f"field '{field}' must be a string, got {type(value).__name__}",
                where,
            )
        if not allow_empty and not value:
            raise decode_error(f"field '{field}' must not be empty", where)
        return value

    @staticmethod
    def normalize_optional_string(value: Any, field: str, where: str) -> Optional[str]:
        """Like normalize_string, but None stays None."""
        if value is None:
            return None
        return DataValidator.normalize_string(value, field, where)

    @staticmethod
    def normalize_id(value: Any, where: str) -> Optional[int]:
        """
        Check an optional entry id.

        Raises:
            DecodeError: If present and not a positive integer
        """
        if value is None:
            return None
        # bool is an int subclass; `id = true` is not an id
        if isinstance(value, bool) or not isinstance(value, int):
            raise decode_error(
                f"field 'id' must be an integer, got {type(value).__name__}", where
            )
        if value < 1:
            raise decode_error(f"field 'id' must be positive, got {value}", where)
        return value

    @staticmethod
    def normalize_date(value: Any, where: str, free_text: bool = False) -> EntryDate:
        """
        Normalize a date value.

        Accepts a local date from the deserializer or a ``YYYY-MM-DD``
        string. With ``free_text`` any string is kept verbatim.

        Raises:
            DecodeError: For datetimes with a time part, malformed or
                impossible dates, and non-date types
        """
        if isinstance(value, datetime):
            raise decode_error(
                f"field 'date' must be a date without time, got {value.isoformat()}",
                where,
            )
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            if free_text:
                return value
            try:
                return parse_date(value)
            except ValueError as e:
                raise decode_error(f"invalid date: {e}", where) from e
        raise decode_error(
            f"field 'date' must be a date, got {type(value).__name__}", where
        )
