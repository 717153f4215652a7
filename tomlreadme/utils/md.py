#!/usr/bin/env python3
"""
md.py
-------------------
Markdown formatting helpers for the README builder.

Cells and bodies are emitted verbatim: nothing here escapes markdown
characters or normalizes line endings.
"""
from __future__ import annotations

# --- Standard library imports ---
from typing import List, Sequence, Tuple


# ----- Tables -----
def table_row(cells: Sequence[str]) -> str:
    """
    Format one table row, unpadded.

    Examples:
        >>> table_row(["2024-09-30", "None", "vim-jp", "Hello World!"])
        '| 2024-09-30 | None | vim-jp | Hello World! |\\n'
    """
    return "| " + " | ".join(cells) + " |\n"


def table_header(columns: Sequence[Tuple[str, int]]) -> str:
    """
    Format a header row and separator with cosmetic fixed widths.

    Each column is ``(label, width)``; the label is left-justified in a cell
    of ``width`` characters and the separator uses ``width + 2`` dashes so the
    two lines align.

    Examples:
        >>> table_header([("id", 2), ("date", 14)])
        '| id | date           |\\n|----|----------------|\\n'
    """
    labels: List[str] = []
    rules: List[str] = []
    for label, width in columns:
        labels.append(f" {label.ljust(width)} ")
        rules.append("-" * (width + 2))
    return "|" + "|".join(labels) + "|\n" + "|" + "|".join(rules) + "|\n"


def markdown_link(text: str, target: str) -> str:
    """Inline link ``[text](target)``."""
    return f"[{text}]({target})"


# ----- Blocks -----
def fenced_block(content: str, language: str = "markdown") -> str:
    """
    Wrap stored content in a code fence.

    The closing fence follows the content directly, so content that ends
    with a newline closes on its own line.

    Examples:
        >>> fenced_block("content\\n")
        '```markdown\\ncontent\\n```'
    """
    return f"```{language}\n{content}```"
