#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the tomlreadme project.

Exception Hierarchy:
    Exception (built-in)
    └── ReadmeError - Base for all tomlreadme errors
        ├── InputNotFoundError - Input document cannot be read
        └── DecodeError - Document does not match the entry schema

Rendering never raises: once a Config exists every field is concrete, so
only the load and decode stages have failure modes.

Usage:
    from tomlreadme.core.exceptions import DecodeError, InputNotFoundError

    try:
        config = config_from_toml(text)
    except DecodeError as e:
        logger.log_error(e, {"operation": "decode"})
"""


class ReadmeError(Exception):
    """
    Base exception for tomlreadme errors.

    Catch this to handle any failure from loading or decoding a document,
    or catch the subclasses for more granular handling.
    """

    pass


class InputNotFoundError(ReadmeError):
    """
    Exception for input documents that cannot be read.

    Raised when:
    - The path does not exist
    - The path is a directory
    - The file is not readable or not valid UTF-8

    Examples:
        >>> raise InputNotFoundError("File does not exist: entries.toml")
    """

    pass


class DecodeError(ReadmeError):
    """
    Exception for documents that do not conform to the entry schema.

    Raised when:
    - The TOML/YAML text itself is malformed
    - A required entry field (title, date, at, senpan) is missing
    - A field has the wrong type
    - A date is not a valid YYYY-MM-DD calendar date

    The message always starts with "Unable to parse the document" and
    names the entry index and field when one is at fault.

    Examples:
        >>> raise DecodeError("Unable to parse the document: entry 2: missing field 'at'")
    """

    pass
