from __future__ import annotations

"""
Logging Configuration Models.

Defines the settings the CLI passes to the logging subsystem and the
severity level mapping used to interpret them.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Attributes:
        level: Minimum severity level name.
        console: Write records to stderr.
        log_file: Optional path for a rotating diagnostic file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
