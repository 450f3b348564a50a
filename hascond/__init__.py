"""
hascond - feature detection and conditional resource selection

A memoized registry of environment capabilities plus an evaluator for
`feature?whenTrue:whenFalse` expressions that pick one resource
identifier (or none) from the detected features.
"""

__version__ = "1.0.0"
__author__ = "hascond"

from .config import get_config
from .features import (
    FeatureCache,
    ProbeContext,
    bootstrap_feature_cache,
    get_feature_cache,
    has,
)
from .rules import (
    Selection,
    parse_expression,
    select,
    resolve,
    load,
)

__all__ = [
    "__version__",
    "get_config",
    "FeatureCache",
    "ProbeContext",
    "bootstrap_feature_cache",
    "get_feature_cache",
    "has",
    "Selection",
    "parse_expression",
    "select",
    "resolve",
    "load",
]
