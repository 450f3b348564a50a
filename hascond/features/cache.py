"""
Feature Cache: memoized registry of environment capabilities.

Single source of truth for "does capability X exist here". Each feature
name maps to either a boolean result or a probe that has not run yet.

Key Concepts:
- Lazy: probes run on the first query, never at registration (unless asked)
- Memoized: a probe's result replaces the probe, so it runs at most once
- First registration wins: re-registering a name is ignored without force
- Fail open to false: unknown or unhashable names read as False

Probes are trusted host code. An exception raised by a probe is not caught
here; it propagates to the caller of query() (and of resolve()), and the
entry keeps its pending probe.

Example:
    cache = FeatureCache(ProbeContext.detect(), seed={"json": True})
    cache.register("asyncio", lambda g, d, el: hasattr(g, "__import__"))
    cache.query("asyncio")   # runs the probe, stores the bool
    cache.query("asyncio")   # returns the stored bool
    cache.query("missing")   # False
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping, TYPE_CHECKING

from .types import FeatureEntry, FeatureName, FeatureValue, ProbeContext, normalize_name
from ..utils.logger import get_module_logger

if TYPE_CHECKING:
    from .element import ScratchElement

logger = get_module_logger(__name__)


class FeatureCache:
    """
    Memoized mapping of feature name -> boolean or pending probe.

    Attributes:
        context: ProbeContext passed to every probe

    Not thread-safe; hosts that query from several threads must lock.
    """

    def __init__(
        self,
        context: ProbeContext | None = None,
        seed: Mapping[FeatureName, Any] | None = None,
    ):
        """
        Initialize cache.

        Args:
            context: Probe environment (default: ProbeContext.detect()).
            seed: Host-supplied results copied in before anything registers.
        """
        self.context = context if context is not None else ProbeContext.detect()
        self._entries: dict[str, FeatureEntry] = {}
        if seed:
            for name, value in seed.items():
                if value is None:
                    continue
                self._entries[normalize_name(name)] = FeatureEntry.from_value(value)

    # =========================================================================
    # Core Operations
    # =========================================================================

    def query(self, name: FeatureName) -> bool:
        """
        Return the value of a feature.

        Runs a pending probe with the context, stores its result and returns
        it. Unregistered names return False.
        """
        try:
            key = normalize_name(name)
            entry = self._entries.get(key)
        except TypeError:
            # Unhashable name
            return False

        if entry is None:
            return False
        if not entry.is_pending:
            return entry.value

        result = bool(entry.probe(*self.context.as_args()))
        self._entries[key] = FeatureEntry.resolved(result)
        logger.debug("probe %r -> %s", key, result)
        return result

    def register(
        self,
        name: FeatureName,
        value: FeatureValue,
        evaluate_now: bool = False,
        force: bool = False,
    ) -> bool | None:
        """
        Register a feature result or probe.

        Args:
            name: Feature name (string or integer).
            value: Boolean-like result, or a probe (g, d, el) -> bool.
                None stores nothing; with force it removes the entry.
            evaluate_now: Query the feature immediately and return the result.
            force: Replace an existing entry.

        Returns:
            query(name) when evaluate_now is true, otherwise None.
        """
        key = normalize_name(name)

        if key not in self._entries or force:
            if value is None:
                self._entries.pop(key, None)
            else:
                self._entries[key] = FeatureEntry.from_value(value)
        else:
            logger.debug("feature %r already registered, keeping first", key)

        if evaluate_now:
            return self.query(key)
        return None

    def reset_probe_element(self, element: ScratchElement | Any = None) -> Any:
        """
        Empty the scratch element used by probes and return it.

        Args:
            element: Element to clear (default: the context's element).
        """
        if element is None:
            element = self.context.element
        if element is not None:
            element.inner_html = ""
        return element

    # =========================================================================
    # Read-side helpers
    # =========================================================================

    def is_pending(self, name: FeatureName) -> bool:
        """True if the feature holds a probe that has not run yet."""
        try:
            entry = self._entries.get(normalize_name(name))
        except TypeError:
            return False
        return entry is not None and entry.is_pending

    def names(self) -> list[str]:
        return list(self._entries)

    def snapshot(self) -> dict[str, bool | None]:
        """Feature name -> result, with None for probes that have not run. Runs nothing."""
        return {
            key: None if entry.is_pending else entry.value
            for key, entry in self._entries.items()
        }

    def __contains__(self, name: object) -> bool:
        try:
            return normalize_name(name) in self._entries
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __call__(self, name: FeatureName) -> bool:
        return self.query(name)

    def __repr__(self) -> str:
        pending = sum(1 for entry in self._entries.values() if entry.is_pending)
        return f"FeatureCache(features={len(self._entries)}, pending={pending})"
