"""
Debug utilities for hascond with expression tracing.

Every debug line is prefixed with the expression being resolved so guard
decisions from nested conditionals can be read back in order.

Usage:
    from hascond.utils.debug import debug_log, is_debug_enabled

    debug_log("x?a:b", "guard", feature="x", value=True)
    # Output: [expr:x?a:b] guard: feature=x, value=True

Enable debugging:
    - Set environment variable: HASCOND_DEBUG=1
    - Or use CLI flag: --debug
"""

from __future__ import annotations

import logging
import os
from typing import Any

from .logger import LOGGER_NAME

# =============================================================================
# Configuration
# =============================================================================

_DEBUG_ENV = os.environ.get("HASCOND_DEBUG", "").lower() in ("1", "true", "yes")
_debug_enabled = _DEBUG_ENV

# Longer expressions are shortened in the prefix
EXPRESSION_DISPLAY_LENGTH = 40


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return _debug_enabled


def enable_debug(enabled: bool = True) -> None:
    """Enable or disable debug mode programmatically."""
    global _debug_enabled
    _debug_enabled = enabled

    if enabled:
        logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG)


def short_expression(expression: str | None) -> str:
    """Format an expression for display."""
    if expression is None:
        return "--"
    if expression == "":
        return '""'
    if len(expression) > EXPRESSION_DISPLAY_LENGTH:
        return expression[:EXPRESSION_DISPLAY_LENGTH - 3] + "..."
    return expression


def format_expression_prefix(expression: str | None) -> str:
    """
    Examples:
        [expr:x?a:b]
        [expr:""]
    """
    return f"[expr:{short_expression(expression)}]"


def debug_log(
    expression: str | None,
    message: str,
    **fields: Any,
) -> None:
    """
    Log a debug message with expression prefix.

    Only logs if debug mode is enabled (HASCOND_DEBUG=1 or --debug).

    Args:
        expression: Expression being resolved
        message: Log message
        **fields: Additional key=value pairs to include
    """
    if not _debug_enabled:
        return

    prefix = format_expression_prefix(expression)

    if fields:
        field_strs = [f"{k}={_format_value(v)}" for k, v in fields.items()]
        full_msg = f"{message}: {', '.join(field_strs)}"
    else:
        full_msg = message

    logger = logging.getLogger(LOGGER_NAME)
    logger.debug(f"{prefix} {full_msg}")


def _format_value(value: Any) -> str:
    """Format a value for debug output."""
    if value is None:
        return "None"
    if isinstance(value, str):
        return repr(value)
    if isinstance(value, (list, tuple)) and len(value) > 8:
        return f"[{len(value)} items]"
    return str(value)
