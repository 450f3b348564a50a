"""
Bootstrap: build the process-wide feature cache.

If the host already provides a feature API (its cache reports
"loader-hasApi"), that cache is used as-is. Otherwise a new cache is seeded
from the host's results and the default features are registered through
register(), so seeded values win over the defaults.
"""

from __future__ import annotations

from typing import Any, Mapping

from .cache import FeatureCache
from .seed import load_seed_file
from .types import FeatureName, ProbeContext
from ..config.config import get_config
from ..config.constants import (
    HOST_FEATURE_API,
    FEATURE_HOST_BROWSER,
    FEATURE_DOM,
    FEATURE_HOST_ADD_EVENT_LISTENER,
    FEATURE_PAGE_LOAD_API,
    FEATURE_SNIFF,
)
from ..utils.logger import get_module_logger

logger = get_module_logger(__name__)


def _supports_event_listeners(document: Any) -> bool:
    return document is not None and callable(getattr(document, "add_event_listener", None))


def register_default_features(cache: FeatureCache) -> None:
    """Register the bootstrap feature set, derived from the cache's context."""
    context = cache.context
    in_document = context.has_document

    cache.register(FEATURE_HOST_BROWSER, in_document)
    cache.register(FEATURE_DOM, in_document)
    cache.register(FEATURE_HOST_ADD_EVENT_LISTENER, _supports_event_listeners(context.document))
    cache.register(FEATURE_PAGE_LOAD_API, True)
    cache.register(FEATURE_SNIFF, True)


def bootstrap_feature_cache(
    host_cache: FeatureCache | None = None,
    seed: Mapping[FeatureName, Any] | None = None,
    context: ProbeContext | None = None,
    register_defaults: bool = True,
) -> FeatureCache:
    """
    Return the feature cache to use for this process.

    Args:
        host_cache: Cache owned by the host, used unchanged when it reports
            the host feature API.
        seed: Host-supplied results for a new cache.
        context: Probe environment for a new cache (default: detect()).
        register_defaults: Register the bootstrap feature set.
    """
    if host_cache is not None and host_cache.query(HOST_FEATURE_API):
        logger.debug("using host feature cache %r", host_cache)
        return host_cache

    cache = FeatureCache(context if context is not None else ProbeContext.detect(), seed=seed)
    if register_defaults:
        register_default_features(cache)
    logger.debug("bootstrapped %r", cache)
    return cache


# =============================================================================
# Process-wide cache
# =============================================================================

_feature_cache: FeatureCache | None = None


def get_feature_cache() -> FeatureCache:
    """
    Get or create the process-wide feature cache from configuration.

    Raises:
        SeedFileError: HASCOND_SEED_FILE is set but cannot be loaded.
    """
    global _feature_cache
    if _feature_cache is None:
        config = get_config()
        seed_path = config.cache.seed_path
        seed = load_seed_file(seed_path) if seed_path is not None else None
        _feature_cache = bootstrap_feature_cache(
            seed=seed,
            register_defaults=config.cache.register_defaults,
        )
    return _feature_cache


def set_feature_cache(cache: FeatureCache) -> FeatureCache:
    """Install a host-built cache as the process-wide cache."""
    global _feature_cache
    _feature_cache = cache
    return cache


def reset_feature_cache() -> None:
    """Drop the process-wide cache; the next get_feature_cache() rebuilds it."""
    global _feature_cache
    _feature_cache = None


def has(name: FeatureName) -> bool:
    """Query a feature in the process-wide cache."""
    return get_feature_cache().query(name)
