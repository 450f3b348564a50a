"""
Pytest configuration and shared fixtures.
"""

import logging

import pytest

from hascond.config.config import Config
from hascond.features.bootstrap import reset_feature_cache
from hascond.features.cache import FeatureCache
from hascond.features.element import ScratchDocument
from hascond.features.types import ProbeContext
from hascond.utils import debug
from hascond.utils.logger import HasLogger, LOGGER_NAME

HASCOND_ENV_VARS = (
    "HASCOND_LOG_LEVEL",
    "HASCOND_LOG_DIR",
    "HASCOND_SEED_FILE",
    "HASCOND_REGISTER_DEFAULTS",
    "HASCOND_DEBUG",
)


class CountingProbe:
    """Probe that records how often (and with what) it was called."""

    def __init__(self, result=True, error=None):
        self.result = result
        self.error = error
        self.calls = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def __call__(self, global_ns, document, element):
        self.calls.append((global_ns, document, element))
        if self.error is not None:
            raise self.error
        return self.result


class RecordingRequire:
    """parent_require stand-in that delivers a fake resource per identifier."""

    def __init__(self):
        self.requests = []

    def __call__(self, ids, loaded):
        self.requests.append(list(ids))
        loaded(*[f"<resource {i}>" for i in ids])


class RecordingCallback:
    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """
    Run every test in an empty working directory with no HASCOND_* variables,
    fresh Config / logger singletons and no process-wide feature cache.
    """
    for name in HASCOND_ENV_VARS:
        # setenv first so teardown restores the original state even if
        # python-dotenv writes the variable during the test
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)

    Config._instance = None
    reset_feature_cache()
    debug.enable_debug(False)

    yield

    Config._instance = None
    reset_feature_cache()
    debug.enable_debug(False)
    HasLogger._instance = None
    HasLogger._initialized = False
    hascond_logger = logging.getLogger(LOGGER_NAME)
    hascond_logger.handlers.clear()
    hascond_logger.setLevel(logging.NOTSET)


@pytest.fixture
def document() -> ScratchDocument:
    return ScratchDocument()


@pytest.fixture
def context(document) -> ProbeContext:
    """Context with a document and a scratch element."""
    return ProbeContext.detect(document=document)


@pytest.fixture
def cache(context) -> FeatureCache:
    """Empty cache with a document context."""
    return FeatureCache(context)


@pytest.fixture
def probe():
    """Factory for CountingProbe instances."""
    def _probe(result=True, error=None) -> CountingProbe:
        return CountingProbe(result=result, error=error)
    return _probe


@pytest.fixture
def require() -> RecordingRequire:
    return RecordingRequire()


@pytest.fixture
def callback():
    """Factory for RecordingCallback instances."""
    return RecordingCallback


@pytest.fixture
def make_cache(context):
    """Factory: cache seeded from a dict of feature name -> bool or probe."""
    def _make(features=None) -> FeatureCache:
        cache = FeatureCache(context)
        for name, value in (features or {}).items():
            cache.register(name, value)
        return cache
    return _make
