"""
Configuration management.
"""

from .config import (
    Config,
    get_config,
    LogConfig,
    CacheConfig,
)

from .constants import (
    GUARD_DELIMITER,
    BRANCH_DELIMITER,
    DELIMITERS,
    TOKEN_PATTERN,
    HOST_FEATURE_API,
    DEFAULT_FEATURE_NAMES,
)

__all__ = [
    # Config classes
    "Config",
    "get_config",
    "LogConfig",
    "CacheConfig",
    # Grammar
    "GUARD_DELIMITER",
    "BRANCH_DELIMITER",
    "DELIMITERS",
    "TOKEN_PATTERN",
    # Bootstrap features
    "HOST_FEATURE_API",
    "DEFAULT_FEATURE_NAMES",
]
