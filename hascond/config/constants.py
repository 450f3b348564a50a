"""
Constants shared by the feature cache and the conditional resolver.

Grammar delimiters, the token pattern, and the names of the features
registered at bootstrap.
"""

from __future__ import annotations

import re

# =============================================================================
# Expression Grammar
# =============================================================================
# A conditional expression is `feature?whenTrue:whenFalse`. Both delimiters
# are single characters and are kept as standalone tokens.

GUARD_DELIMITER = "?"
BRANCH_DELIMITER = ":"

DELIMITERS = frozenset({GUARD_DELIMITER, BRANCH_DELIMITER})

# Either a single delimiter or a (possibly empty) run of anything else.
# findall() always yields a trailing zero-length identifier token.
TOKEN_PATTERN = re.compile(r"[?:]|[^:?]*")

# =============================================================================
# Bootstrap Feature Names
# =============================================================================

# Reported true by a host cache that already provides the feature API.
HOST_FEATURE_API = "loader-hasApi"

FEATURE_HOST_BROWSER = "host-browser"
FEATURE_DOM = "dom"
FEATURE_HOST_ADD_EVENT_LISTENER = "host-addEventListener"
FEATURE_PAGE_LOAD_API = "loader-pageLoadApi"
FEATURE_SNIFF = "dojo-sniff"

DEFAULT_FEATURE_NAMES = (
    FEATURE_HOST_BROWSER,
    FEATURE_DOM,
    FEATURE_HOST_ADD_EVENT_LISTENER,
    FEATURE_PAGE_LOAD_API,
    FEATURE_SNIFF,
)

# Tag created by ProbeContext.detect() for the shared scratch element.
SCRATCH_ELEMENT_TAG = "div"

# =============================================================================
# Logging
# =============================================================================

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
