#!/usr/bin/env python3
"""
toml2md.py
-------------------
Load a curated entry document and render it to markdown.

Stages:
    file → mapping (load_document)
        file → text (read_document_text)
        text → mapping (parse_document; tomllib or PyYAML)
    mapping → Config (decode_config)
    Config → markdown (ReadmeBuilder)

Programmatic API:
    from tomlreadme.pipeline.toml2md import config_from_toml, render_file

    config = config_from_toml(text)
    document = render_file(Path("yasunori.toml"), logger=logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import tomllib
from pathlib import Path
from typing import Any, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from tomlreadme.builders.readme import DEFAULT_OPTIONS, ReadmeBuilder, RenderOptions
from tomlreadme.core.cli import RenderStats
from tomlreadme.core.exceptions import InputNotFoundError
from tomlreadme.core.logging_manager import ReadmeLogger, safe_logger
from tomlreadme.core.validators import decode_error
from tomlreadme.dataclasses.entry import Config, decode_config, entries_summary


YAML_SUFFIXES = {".yaml", ".yml"}


def document_format(path: Path) -> str:
    """'yaml' for .yaml/.yml files, 'toml' for everything else."""
    return "yaml" if path.suffix.lower() in YAML_SUFFIXES else "toml"


def read_document_text(path: Path) -> str:
    """
    Read a document as UTF-8 text.

    Raises:
        InputNotFoundError: If the file is missing, a directory, unreadable
            or not UTF-8
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise InputNotFoundError(f"File does not exist: {path}") from e
    except IsADirectoryError as e:
        raise InputNotFoundError(f"Path is a directory: {path}") from e
    except UnicodeDecodeError as e:
        raise InputNotFoundError(f"File is not valid UTF-8: {path}") from e
    except OSError as e:
        raise InputNotFoundError(f"Cannot read {path}: {e.strerror or e}") from e


def parse_document(text: str, fmt: str = "toml") -> Any:
    """
    Deserialize document text into a plain mapping.

    Args:
        text: Document text
        fmt: 'toml' or 'yaml'

    Raises:
        DecodeError: If the text is not valid for the format
    """
    if fmt == "yaml":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise decode_error(f"invalid YAML: {e}") from e
        # An empty YAML file loads as None
        return {} if data is None else data

    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise decode_error(f"invalid TOML: {e}") from e


def load_document(path: Path) -> Any:
    """
    Read a document file and deserialize it by suffix.

    ``.yaml``/``.yml`` go through PyYAML, anything else through tomllib.

    Raises:
        InputNotFoundError: File cannot be read
        DecodeError: Text is not valid for the format
    """
    return parse_document(read_document_text(path), document_format(path))


def config_from_toml(text: str, free_text_dates: bool = False) -> Config:
    """
    Parse TOML text straight into a canonical Config.

    Raises:
        DecodeError: Malformed TOML or schema violation
    """
    return decode_config(parse_document(text, "toml"), free_text_dates=free_text_dates)


def load_config(
    path: Path,
    free_text_dates: bool = False,
    logger: Optional[ReadmeLogger] = None,
) -> Config:
    """
    Read, deserialize and decode a document file.

    Raises:
        InputNotFoundError: File cannot be read
        DecodeError: Document is malformed or violates the schema
    """
    fmt = document_format(path)
    safe_logger(logger).log_debug(f"Loading {fmt} document {path}")

    config = decode_config(load_document(path), free_text_dates=free_text_dates)

    safe_logger(logger).log_operation(
        "decode_document",
        {"path": str(path), "format": fmt, "entries": entries_summary(config)},
    )
    return config


def render_file(
    path: Path,
    options: RenderOptions = DEFAULT_OPTIONS,
    free_text_dates: bool = False,
    logger: Optional[ReadmeLogger] = None,
    stats: Optional[RenderStats] = None,
) -> str:
    """
    Render a document file to markdown.

    Either the whole document renders or an error is raised; there is no
    partial output.

    Args:
        path: Input document (.toml, .yaml or .yml)
        options: Output variant toggles
        free_text_dates: Keep date strings verbatim instead of parsing
        logger: Optional logger
        stats: Optional stats object to update

    Returns:
        The markdown document

    Raises:
        InputNotFoundError: File cannot be read
        DecodeError: Document is malformed or violates the schema
    """
    stats = stats if stats is not None else RenderStats()

    config = load_config(path, free_text_dates=free_text_dates, logger=logger)
    stats.entries_decoded = len(config.entries)

    document = ReadmeBuilder(config, options, logger=logger, stats=stats).build()
    stats.files_processed += 1
    return document
