#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers and statistics for tomlreadme commands.

Functions:
    setup_logger: Initialize ReadmeLogger for CLI operations

Classes:
    OperationStats: Base class for run statistics
    RenderStats: Statistics for a decode + render run

Usage:
    from tomlreadme.core.cli import setup_logger, RenderStats

    logger = setup_logger(None, "render")
    stats = RenderStats()
    stats.entries_rendered += 1
    click.echo(stats.summary(), err=True)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from tomlreadme.core.logging_manager import ReadmeLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(
    log_dir: Optional[Path],
    component_name: str,
    verbose: bool = False,
) -> ReadmeLogger:
    """
    Setup logging for CLI operations.

    When a log directory is given, file logs go to ``<log_dir>/operations``.
    Without one the logger only writes to stderr.

    Args:
        log_dir: Base log directory, or None for console-only logging
        component_name: Component identifier for logging (e.g. 'render')
        verbose: Show debug messages on stderr

    Returns:
        Configured ReadmeLogger instance
    """
    operations_log_dir = None
    if log_dir is not None:
        operations_log_dir = Path(log_dir) / "operations"
        operations_log_dir.mkdir(parents=True, exist_ok=True)
    return ReadmeLogger(
        operations_log_dir, component_name=component_name, verbose=verbose
    )


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        files_processed: Number of documents successfully processed
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        if self.files_processed < 0:
            raise ValueError(f"files_processed must be non-negative, got {self.files_processed}")
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """Seconds elapsed since start_time."""
        return (datetime.now() - self.start_time).total_seconds()

    def summary(self) -> str:
        return (
            f"{self.files_processed} files processed, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files_processed": self.files_processed,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class RenderStats(OperationStats):
    """
    Statistics for a decode + render run.

    Attributes:
        entries_decoded: Entries that passed default-substitution
        entries_rendered: Entries written to the table and contents
        output_chars: Length of the assembled document
    """
    entries_decoded: int = 0
    entries_rendered: int = 0
    output_chars: int = 0

    def summary(self) -> str:
        return (
            f"{self.entries_decoded} decoded, "
            f"{self.entries_rendered} rendered, "
            f"{self.output_chars} chars in {self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "entries_decoded": self.entries_decoded,
                "entries_rendered": self.entries_rendered,
                "output_chars": self.output_chars,
            }
        )
        return data
