"""
Feature detection: memoized cache of environment capabilities.
"""

from .types import (
    Probe,
    FeatureValue,
    FeatureName,
    ProbeContext,
    EntryKind,
    FeatureEntry,
)
from .cache import FeatureCache
from .element import ScratchElement, ScratchDocument
from .seed import SeedFileError, load_seed_file, parse_seed
from .bootstrap import (
    bootstrap_feature_cache,
    register_default_features,
    get_feature_cache,
    set_feature_cache,
    reset_feature_cache,
    has,
)

__all__ = [
    # Types
    "Probe",
    "FeatureValue",
    "FeatureName",
    "ProbeContext",
    "EntryKind",
    "FeatureEntry",
    # Cache
    "FeatureCache",
    "ScratchElement",
    "ScratchDocument",
    # Seeds
    "SeedFileError",
    "load_seed_file",
    "parse_seed",
    # Bootstrap
    "bootstrap_feature_cache",
    "register_default_features",
    "get_feature_cache",
    "set_feature_cache",
    "reset_feature_cache",
    "has",
]
