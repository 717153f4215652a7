#!/usr/bin/env python3
"""
readme.py
-------------------
Render a Config into a single markdown document.

Document layout:

    <markdown_header>
    | id | date | senpan | place | title |
    |----|------|--------|-------|-------|
    | [1](#hello-world-2024-09-30) | 2024-09-30 | None | vim-jp | Hello World! |

    ## Contents

    ### Hello World! (2024-09-30)

    vim-jp by None

    ```markdown
    ...```

    <meta>

Rows and sections follow document order. Field values are emitted as
stored: no escaping, no padding, no line-ending changes.

Usage:
    builder = ReadmeBuilder(config, RenderOptions(show_weekday=True), logger)
    document = builder.build()
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from tomlreadme.builders.base import BaseBuilder
from tomlreadme.core.cli import RenderStats
from tomlreadme.core.logging_manager import ReadmeLogger
from tomlreadme.dataclasses.entry import Config, Entry
from tomlreadme.utils import md
from tomlreadme.utils.dates import serialize_date
from tomlreadme.utils.slugify import make_anchor_link


# ----- Table layout -----
# (label, cosmetic width); rows are never padded to these widths
ID_COLUMN: Tuple[str, int] = ("id", 2)
TABLE_COLUMNS: Tuple[Tuple[str, int], ...] = (
    ("date", 14),
    ("senpan", 17),
    ("place", 22),
    ("title", 60),
)

CONTENTS_HEADING = "## Contents"


@dataclass(frozen=True)
class RenderOptions:
    """
    Output variant toggles.

    Attributes:
        link_ids: Lead each row with an ``[id](anchor)`` cell when entries
            have ids
        show_weekday: Use ``YYYY-MM-DD Ddd`` in cells and headings
        fence_content: Wrap content in a markdown code fence
    """

    link_ids: bool = True
    show_weekday: bool = False
    fence_content: bool = True


DEFAULT_OPTIONS = RenderOptions()


# ----- Table -----
def _id_cell(entry: Entry) -> str:
    if entry.id is None:
        return ""
    return md.markdown_link(str(entry.id), make_anchor_link(entry.title, entry.date))


def make_table(config: Config, options: RenderOptions = DEFAULT_OPTIONS) -> str:
    """
    Build the summary table.

    The block starts with a blank line so it separates from the header.
    The id column appears only when ``link_ids`` is set and some entry has
    an id; rows without one get an empty id cell.
    """
    with_ids = options.link_ids and config.has_ids
    columns = ((ID_COLUMN,) if with_ids else ()) + TABLE_COLUMNS

    rows: List[str] = []
    for entry in config.entries:
        cells = [
            serialize_date(entry.date, options.show_weekday),
            entry.senpan,
            entry.at,
            entry.title,
        ]
        if with_ids:
            cells.insert(0, _id_cell(entry))
        rows.append(md.table_row(cells))

    return "\n" + md.table_header(columns) + "".join(rows)


# ----- Sections -----
def make_section(entry: Entry, options: RenderOptions = DEFAULT_OPTIONS) -> str:
    """
    Build the detailed section for one entry.

    Examples:
        >>> print(make_section(entry))

        ### brain-yasu**ri (2024-09-29)

        vim-jp #times-yasunori by takeokunn

        ```markdown
        content
        ```

        memo
    """
    # TODO: decide on CRLF handling in content/meta; both are emitted as stored
    body = md.fenced_block(entry.content) if options.fence_content else entry.content
    heading = f"### {entry.title} ({serialize_date(entry.date, options.show_weekday)})"
    return f"\n{heading}\n\n{entry.at} by {entry.senpan}\n\n{body}\n\n{entry.meta}"


def make_sections(config: Config, options: RenderOptions = DEFAULT_OPTIONS) -> str:
    """All sections in document order, separated by blank lines."""
    return "\n".join(make_section(entry, options) for entry in config.entries)


# ----- Document -----
def make_document(config: Config, options: RenderOptions = DEFAULT_OPTIONS) -> str:
    """Header, table, contents heading and sections as one string."""
    return (
        f"{config.markdown_header}"
        f"{make_table(config, options)}"
        f"\n{CONTENTS_HEADING}\n\n"
        f"{make_sections(config, options)}\n"
    )


class ReadmeBuilder(BaseBuilder):
    """
    Assemble the document for a Config, with logging and statistics.

    Attributes:
        config: Canonical document to render
        options: Output variant toggles
        stats: Render statistics, updated by build()
    """

    def __init__(
        self,
        config: Config,
        options: RenderOptions = DEFAULT_OPTIONS,
        logger: Optional[ReadmeLogger] = None,
        stats: Optional[RenderStats] = None,
    ):
        super().__init__(logger)
        self.config = config
        self.options = options
        self.stats = stats if stats is not None else RenderStats()

    def build(self) -> str:
        """Render the document. Never raises for a decoded Config."""
        if not self.config.entries:
            self._log_warning("Document has no entries; rendering an empty table")

        if self.options.link_ids and not self.config.has_ids:
            self._log_debug("No entry has an id; omitting the id column")

        document = make_document(self.config, self.options)

        self.stats.entries_rendered = len(self.config.entries)
        self.stats.output_chars = len(document)
        self._log_operation(
            "render_document",
            {
                "entries": len(self.config.entries),
                "link_ids": self.options.link_ids,
                "show_weekday": self.options.show_weekday,
                "fence_content": self.options.fence_content,
                "chars": len(document),
            },
        )
        return document
