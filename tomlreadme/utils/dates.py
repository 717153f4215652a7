#!/usr/bin/env python3
"""
dates.py
--------
Date parsing and serialization for entry dates.

Entry dates are either validated calendar dates (``datetime.date``) or, when
a document is decoded with free-text dates, the raw string as written.
Serialization is the identity on the string form.

Usage:
    from tomlreadme.utils.dates import serialize_date

    serialize_date(date(2024, 9, 30))                     # '2024-09-30'
    serialize_date(date(2024, 9, 30), with_weekday=True)  # '2024-09-30 Mon'
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from datetime import date
from typing import Union

EntryDate = Union[date, str]

ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")

# Monday-first; fixed English names, independent of the process locale
WEEKDAY_ABBRS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def parse_date(value: str) -> date:
    """
    Parse a strict ``YYYY-MM-DD`` string into a date.

    Raises:
        ValueError: If the string is not in that form or is not a real date

    Examples:
        >>> parse_date("2024-09-30")
        datetime.date(2024, 9, 30)
    """
    if not ISO_DATE_RE.fullmatch(value):
        raise ValueError(f"expected YYYY-MM-DD, got {value!r}")
    return date.fromisoformat(value)


def weekday_abbr(value: date) -> str:
    """Three-letter English weekday name for a date."""
    return WEEKDAY_ABBRS[value.weekday()]


def serialize_date(value: EntryDate, with_weekday: bool = False) -> str:
    """
    Serialize an entry date to its textual form.

    Args:
        value: Calendar date, or free-text date string
        with_weekday: Append the abbreviated weekday name (calendar dates only)

    Returns:
        ``YYYY-MM-DD`` or ``YYYY-MM-DD Ddd``; free-text dates are returned as is
    """
    if isinstance(value, str):
        return value

    text = value.isoformat()
    if with_weekday:
        return f"{text} {weekday_abbr(value)}"
    return text
