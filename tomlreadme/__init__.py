"""
tomlreadme
==========

Render a TOML list of curated entries into a single markdown document: a
summary table with anchor links, followed by one section per entry.

Main Components:
    - dataclasses: Raw and canonical entry models, decoding with defaults
    - utils: Anchor slugs, date serialization, markdown helpers
    - builders: Table, sections and document assembly
    - pipeline: File loading and the click CLI
    - core: Exceptions, logging, validation

Primary Interfaces:
    - tomlreadme.pipeline.cli: Command-line interface
    - tomlreadme.pipeline.toml2md.render_file: File to markdown
    - tomlreadme.builders.readme.make_document: Config to markdown

Example Usage:
    >>> from tomlreadme import config_from_toml, make_document
    >>> config = config_from_toml(open("yasunori.toml").read())
    >>> print(make_document(config))
"""

__version__ = "0.1.0"

from tomlreadme.builders.readme import RenderOptions, make_document
from tomlreadme.dataclasses.entry import Config, Entry, decode_config
from tomlreadme.pipeline.toml2md import config_from_toml, render_file

__all__ = [
    "Config",
    "Entry",
    "RenderOptions",
    "config_from_toml",
    "decode_config",
    "make_document",
    "render_file",
]
