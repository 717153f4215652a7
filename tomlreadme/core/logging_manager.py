#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Centralized logging for tomlreadme operations.

Standard output carries the rendered document, so every handler here
writes to stderr or to rotating files under an optional log directory.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click


class ReadmeLogger:
    """
    Structured logger for load, decode and render operations.

    Attributes:
        log_dir: Directory for log files, or None for console-only logging
        component_name: Name of the component using this logger
        main_logger: Logger for all operations
        error_logger: Dedicated logger for errors only
    """

    def __init__(
        self,
        log_dir: Optional[Path] = None,
        component_name: str = "tomlreadme",
        verbose: bool = False,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ) -> None:
        """
        Initialize logging system.

        Args:
            log_dir: Directory for log files. When None, nothing is written
                to disk and only the stderr console handler is attached.
            component_name: Name for the component logger
            verbose: Lower the console threshold from WARNING to DEBUG
            max_bytes: Maximum log file size before rotation (default: 10MB)
            backup_count: Number of backup files to keep (default: 5)
        """
        self.log_dir = Path(log_dir) if log_dir is not None else None
        self.component_name = component_name
        self.verbose = verbose
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self._setup_loggers()

    def _setup_loggers(self) -> None:
        """Initialize loggers and attach handlers."""
        self.main_logger = logging.getLogger(f"{self.component_name}.operations")
        self.main_logger.setLevel(logging.DEBUG)
        # Reset only this logger's handlers (not global logger state)
        self.main_logger.handlers = []
        self.main_logger.propagate = False

        self.error_logger = logging.getLogger(f"{self.component_name}.errors")
        self.error_logger.setLevel(logging.ERROR)
        self.error_logger.handlers = []
        self.error_logger.propagate = False

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            self._create_file_handler(
                self.main_logger,
                self.log_dir / f"{self.component_name}.log",
                logging.DEBUG,
            )
            self._create_file_handler(
                self.error_logger,
                self.log_dir / "errors.log",
                logging.ERROR,
            )
        else:
            self.error_logger.addHandler(logging.NullHandler())

        # Console handler; stdout is reserved for the document
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if self.verbose else logging.WARNING)
        console_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
        )
        console_handler.setFormatter(console_formatter)

        self.main_logger.addHandler(console_handler)

    def _create_file_handler(
        self, logger: logging.Logger, file_path: Path, level: int
    ) -> None:
        """
        Create a rotating file handler for a logger.

        Args:
            logger: Logger instance to add handler to
            file_path: Path for log file
            level: Logging level for the handler
        """
        handler = RotatingFileHandler(
            file_path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log a named operation with its details.

        Args:
            operation: Name of the operation
            details: Optional operation details dictionary
        """
        details = details or {}
        self.main_logger.info(
            f"OPERATION - {operation}: {json.dumps(details, default=str)}"
        )

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log an error with context and traceback.

        Args:
            error: Exception that occurred
            context: Optional context information dictionary
        """
        context = context or {}
        error_type = type(error).__name__

        self.error_logger.error(f"ERROR - {error_type}: {error}")

        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {context_str}")

        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Log debug information."""
        if details:
            self.main_logger.debug(
                f"DEBUG - {message}: {json.dumps(details, default=str)}"
            )
        else:
            self.main_logger.debug(f"DEBUG - {message}")

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Log general information."""
        if details:
            self.main_logger.info(
                f"INFO - {message}: {json.dumps(details, default=str)}"
            )
        else:
            self.main_logger.info(f"INFO - {message}")

    def log_warning(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log a warning."""
        if details:
            self.main_logger.warning(
                f"WARNING - {message}: {json.dumps(details, default=str)}"
            )
        else:
            self.main_logger.warning(f"WARNING - {message}")

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Format error for CLI display and log full details.

        Args:
            error: Exception to log
            context: Optional context information about where error occurred
            show_traceback: If True, include full traceback in CLI output

        Returns:
            Formatted error message suitable for CLI display

        Examples:
            >>> logger.log_cli_error(DecodeError("Unable to parse the document"))
            '❌ DecodeError: Unable to parse the document'
        """
        self.log_error(error, context or {"source": "cli"})

        error_type = type(error).__name__
        if show_traceback:
            tb = traceback.format_exc()
            return f"❌ {error_type}: {error}\n\n{tb}"
        return f"❌ {error_type}: {error}"


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Standardized error handling for CLI commands.

    Logs the error with context, prints a one-line diagnostic to stderr
    and exits. Nothing is written to stdout.

    Args:
        ctx: Click context object containing logger and verbose flag
        error: Exception that occurred
        operation: Name of the operation that failed (e.g. 'render')
        additional_context: Optional extra context (file path, etc.)
        exit_code: Exit code for sys.exit() (default: 1)

    Note:
        This function never returns - it always calls sys.exit()
    """
    obj = ctx.obj or {}
    logger: Optional[ReadmeLogger] = obj.get("logger")
    verbose: bool = obj.get("verbose", False)

    context = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    error_msg = safe_logger(logger).log_cli_error(error, context, show_traceback=verbose)

    click.echo(error_msg, err=True)
    sys.exit(exit_code)


class NullLogger:
    """
    Null Object logger implementing the ReadmeLogger interface as no-ops.

    Lets library code take ``logger=None`` and still call logger methods.
    """

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        error_type = type(error).__name__
        return f"❌ {error_type}: {error}"


# Singleton null logger instance
_null_logger = NullLogger()


def safe_logger(logger: Optional[ReadmeLogger]) -> ReadmeLogger:
    """
    Return the provided logger or the shared NullLogger if None.

    Examples:
        >>> safe_logger(None).log_info("message")  # no-op
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
