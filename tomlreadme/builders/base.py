#!/usr/bin/env python3
"""
base.py
-------------------
Base class for builders.

Gives every builder an optional logger and the same logging helpers.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from tomlreadme.core.logging_manager import ReadmeLogger, safe_logger


class BaseBuilder(ABC):
    """
    Abstract base class for builder implementations.

    Attributes:
        logger: Optional logger for operation tracking
    """

    def __init__(self, logger: Optional[ReadmeLogger] = None):
        self.logger = logger

    @abstractmethod
    def build(self) -> str:
        """
        Execute the build and return the generated text.

        Note:
            Subclasses must implement this with their specific build logic
        """
        pass

    def _log_operation(self, operation: str, details: Optional[dict] = None) -> None:
        safe_logger(self.logger).log_operation(operation, details or {})

    def _log_debug(self, message: str) -> None:
        safe_logger(self.logger).log_debug(message)

    def _log_warning(self, message: str) -> None:
        safe_logger(self.logger).log_warning(message)
