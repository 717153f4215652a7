"""
builders package
----------------
Markdown builders for curated entry documents.

- readme: table, sections and full document assembly
"""
from tomlreadme.builders.readme import (
    ReadmeBuilder,
    RenderOptions,
    make_document,
    make_section,
    make_sections,
    make_table,
)

__all__ = [
    "ReadmeBuilder",
    "RenderOptions",
    "make_document",
    "make_section",
    "make_sections",
    "make_table",
]
