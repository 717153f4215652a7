#!/usr/bin/env python3
"""
slugify.py
----------
Anchor link generation for entry sections.

Each table row links to its section through an anchor built from the entry
title and date. The punctuation class below is part of the output format:
changing it changes every previously generated link.

Punctuation class, version 1 (``PUNCTUATION_CLASS_VERSION``):
    ASCII       ! @ # $ % ^ & * ( ) + | ~ = ` [ ] { } ; ' : " , . < > ?
    Full-width  ！ ” ＃ ＄ ％ ＆ ’ （ ） ＊ ＋ ， － ． ／ ： ； ＜ ＝ ＞ ？ ＠
                ［ ＼ ］ ＾ ＿ ｀ ｛ ｜ ｝ ～

    The two quote slots of the full-width row hold the right curly quotes
    ``”`` (U+201D) and ``’`` (U+2019), not ``＂``/``＇``. Left curly quotes,
    em-dashes and anything else outside the class are kept. Any change to
    the class must bump the version.

Key Features:
    - ASCII and full-width spaces become hyphens
    - Simple lowercase (non-Latin scripts pass through)
    - Fixed ASCII and full-width punctuation class stripped
    - Hyphens and underscores kept
    - Canonical date appended

Usage:
    from tomlreadme.utils.slugify import make_anchor_link

    make_anchor_link("HELLO WORLD", date(2024, 9, 30))  # "#hello-world-2024-09-30"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re

# --- Local imports ---
from tomlreadme.utils.dates import EntryDate, serialize_date


FULLWIDTH_SPACE = "　"

PUNCTUATION_CLASS_VERSION = 1
ASCII_PUNCTUATION = r"""!@#$%^&*()+|~=`\[\]{};':",.<>?"""
FULLWIDTH_PUNCTUATION = "！”＃＄％＆’（）＊＋，－．／：；＜＝＞？＠［＼］＾＿｀｛｜｝～"

ANCHOR_PUNCTUATION_RE = re.compile(
    f"[{ASCII_PUNCTUATION}]|[{re.escape(FULLWIDTH_PUNCTUATION)}]"
)


def slugify_title(title: str) -> str:
    """
    Sanitize a title for use in an anchor.

    Examples:
        >>> slugify_title("Hello World!")
        'hello-world'
        >>> slugify_title("テスト! セクション")
        'テスト-セクション'
        >>> slugify_title("-_!!")
        '-_'
    """
    spaceless = title.replace(FULLWIDTH_SPACE, "-").replace(" ", "-").lower()
    return ANCHOR_PUNCTUATION_RE.sub("", spaceless)


def make_anchor_link(title: str, entry_date: EntryDate) -> str:
    """
    Build the intra-document anchor for an entry.

    Never raises; an all-punctuation title yields ``#-<date>``-style anchors.

    Args:
        title: Entry title as written in the document
        entry_date: Calendar date or free-text date

    Returns:
        ``#<sanitized title>-<lowercased canonical date>``

    Examples:
        >>> make_anchor_link("サンプルセクション", date(2024, 9, 30))
        '#サンプルセクション-2024-09-30'
    """
    return f"#{slugify_title(title)}-{serialize_date(entry_date).lower()}"
