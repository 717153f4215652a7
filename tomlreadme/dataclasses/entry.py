#!/usr/bin/env python3
"""
entry.py
-------------------
Raw and canonical models for curated entry documents.

Two layers:
- RawEntry / RawConfig: the document as deserialized, every field optional
- Entry / Config: the canonical model, every field concrete and immutable

The raw layer checks types; the canonical constructors are the only place
where absent optional fields become empty strings. Renderers only ever see
Entry and Config.

Document shape:

    markdown_header = "..."          # optional
    [[entries]]                      # legacy key: [[yasunori]]
    id = 1                           # optional
    title = "Hello"
    date = 2024-09-30
    at = "vim-jp"
    senpan = ""
    content = "..."                  # optional
    meta = "..."                     # optional
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

# --- Local imports ---
from tomlreadme.core.validators import DataValidator, decode_error
from tomlreadme.utils.dates import EntryDate

logger = logging.getLogger(__name__)


# ----- Constants -----
ENTRIES_KEY = "entries"
LEGACY_ENTRIES_KEY = "yasunori"

ENTRY_FIELDS = frozenset({"id", "title", "date", "content", "meta", "at", "senpan"})
REQUIRED_FIELDS = ("title", "date", "at", "senpan")


# ----- Raw layer -----
@dataclass(frozen=True)
class RawEntry:
    """
    One entry as deserialized; optional fields may be None.

    Attributes:
        title: Display title (required)
        date: Calendar date or free-text date (required)
        at: Venue (required)
        senpan: Attribution, may be empty (required)
        id: Optional positive identifier
        content: Optional body text
        meta: Optional trailing annotation
    """

    title: str
    date: EntryDate
    at: str
    senpan: str
    id: Optional[int] = None
    content: Optional[str] = None
    meta: Optional[str] = None

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        index: int = 0,
        free_text_dates: bool = False,
    ) -> RawEntry:
        """
        Type-check one deserialized entry table.

        Args:
            data: Mapping from the deserializer
            index: 1-based position, used in error messages
            free_text_dates: Keep date strings verbatim instead of parsing

        Raises:
            DecodeError: Missing required field or wrong type
        """
        where = f"entry {index}"
        if not isinstance(data, Mapping):
            raise decode_error(
                f"expected a table, got {type(data).__name__}", where
            )

        for name in REQUIRED_FIELDS:
            DataValidator.require(data, name, where)

        unknown = sorted(set(data) - ENTRY_FIELDS)
        if unknown:
            logger.debug(f"{where}: ignoring unknown fields {unknown}")

        return cls(
            title=DataValidator.normalize_string(
                data["title"], "title", where, allow_empty=False
            ),
            date=DataValidator.normalize_date(
                data["date"], where, free_text=free_text_dates
            ),
            at=DataValidator.normalize_string(data["at"], "at", where),
            senpan=DataValidator.normalize_string(data["senpan"], "senpan", where),
            id=DataValidator.normalize_id(data.get("id"), where),
            content=DataValidator.normalize_optional_string(
                data.get("content"), "content", where
            ),
            meta=DataValidator.normalize_optional_string(
                data.get("meta"), "meta", where
            ),
        )


@dataclass(frozen=True)
class RawConfig:
    """Whole document as deserialized."""

    entries: Tuple[RawEntry, ...] = ()
    markdown_header: Optional[str] = None

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], free_text_dates: bool = False
    ) -> RawConfig:
        """
        Type-check a deserialized document.

        Raises:
            DecodeError: Bad top-level shape or any bad entry
        """
        if not isinstance(data, Mapping):
            raise decode_error(
                f"expected a table at the top level, got {type(data).__name__}"
            )

        if ENTRIES_KEY in data and LEGACY_ENTRIES_KEY in data:
            raise decode_error(
                f"use either '{ENTRIES_KEY}' or '{LEGACY_ENTRIES_KEY}', not both"
            )
        key = LEGACY_ENTRIES_KEY if LEGACY_ENTRIES_KEY in data else ENTRIES_KEY

        items = data.get(key)
        if items is None:
            items = []
        if not isinstance(items, list):
            raise decode_error(
                f"'{key}' must be an array of tables, got {type(items).__name__}"
            )

        header = DataValidator.normalize_optional_string(
            data.get("markdown_header"), "markdown_header", "document"
        )

        return cls(
            entries=tuple(
                RawEntry.from_dict(item, index, free_text_dates)
                for index, item in enumerate(items, 1)
            ),
            markdown_header=header,
        )


# ----- Canonical layer -----
@dataclass(frozen=True)
class Entry:
    """
    One curated entry with every field concrete.

    ``id`` stays None when the document has none; it is not a text field
    and rendering omits it.
    """

    title: str
    date: EntryDate
    content: str
    meta: str
    at: str
    senpan: str
    id: Optional[int] = None

    @classmethod
    def from_raw(cls, raw: RawEntry) -> Entry:
        """Substitute empty strings for absent optional text fields."""
        return cls(
            id=raw.id,
            title=raw.title,
            date=raw.date,
            content=raw.content if raw.content is not None else "",
            meta=raw.meta if raw.meta is not None else "",
            at=raw.at,
            senpan=raw.senpan,
        )


@dataclass(frozen=True)
class Config:
    """
    The whole document: a header and the entries in document order.

    Attributes:
        markdown_header: Preamble emitted before the table (default "")
        entries: Entries in insertion order; never reordered
    """

    markdown_header: str = ""
    entries: Tuple[Entry, ...] = field(default_factory=tuple)

    @classmethod
    def from_raw(cls, raw: RawConfig) -> Config:
        return cls(
            markdown_header=raw.markdown_header or "",
            entries=tuple(Entry.from_raw(item) for item in raw.entries),
        )

    @property
    def has_ids(self) -> bool:
        """True when at least one entry carries an id."""
        return any(entry.id is not None for entry in self.entries)


def decode_config(data: Mapping[str, Any], free_text_dates: bool = False) -> Config:
    """
    Decode a deserialized document into the canonical Config.

    Args:
        data: Top-level mapping from tomllib or yaml.safe_load
        free_text_dates: Keep date strings verbatim instead of parsing

    Returns:
        Canonical, immutable Config

    Raises:
        DecodeError: If the document does not match the entry schema
    """
    return Config.from_raw(RawConfig.from_dict(data, free_text_dates=free_text_dates))


def entries_summary(config: Config) -> List[Dict[str, Any]]:
    """Compact per-entry details for operation logs."""
    return [
        {"id": entry.id, "title": entry.title, "date": entry.date}
        for entry in config.entries
    ]
