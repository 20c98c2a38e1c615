"""Common utilities for http_signatures."""

from http_signatures.common.logging import get_logger, setup_logging
from http_signatures.common.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_logger",
    "get_settings",
    "setup_logging",
]
