"""
Utility modules.
"""

from .logger import get_logger, setup_logger, get_module_logger, HasLogger
from .debug import debug_log, enable_debug, is_debug_enabled

__all__ = [
    # Logger
    "get_logger",
    "setup_logger",
    "get_module_logger",
    "HasLogger",
    # Debug tracing
    "debug_log",
    "enable_debug",
    "is_debug_enabled",
]
