"""
Feature cache type definitions.

- ProbeContext: the immutable environment handed to every probe
- EntryKind / FeatureEntry: two-case entry stored per feature name
"""

from __future__ import annotations

import builtins
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Union

from ..config.constants import SCRATCH_ELEMENT_TAG

# A probe receives (global_ns, document, element) and returns a bool-like value.
Probe = Callable[[Any, Any, Any], Any]

# What register() accepts: a ready value or a probe to run lazily.
FeatureValue = Union[bool, int, Probe, None]

# Feature identifiers may be strings or integers; integers are stored as
# their decimal string so 1 and "1" name the same feature.
FeatureName = Union[str, int]


def normalize_name(name: FeatureName) -> str:
    """Return the cache key for a feature name."""
    if isinstance(name, int) and not isinstance(name, bool):
        return str(name)
    return name


@dataclass(frozen=True)
class ProbeContext:
    """
    Environment passed positionally to every probe.

    Attributes:
        global_ns: Global-like namespace object (default: the builtins module)
        document: Document-like object, or None outside a document host
        element: Shared scratch element, or None when there is no document

    Built once at bootstrap and shared by reference; probes read it but
    never replace it.
    """
    global_ns: Any = builtins
    document: Any = None
    element: Any = None

    @classmethod
    def detect(cls, global_ns: Any = None, document: Any = None) -> "ProbeContext":
        """
        Build the context for this process.

        A scratch element is only created when a document exposing
        create_element() is supplied.
        """
        element = None
        if document is not None:
            create_element = getattr(document, "create_element", None)
            if callable(create_element):
                element = create_element(SCRATCH_ELEMENT_TAG)
        return cls(
            global_ns=builtins if global_ns is None else global_ns,
            document=document,
            element=element,
        )

    def as_args(self) -> tuple[Any, Any, Any]:
        """Positional arguments for a probe call."""
        return (self.global_ns, self.document, self.element)

    @property
    def has_document(self) -> bool:
        return self.document is not None


class EntryKind(Enum):
    """Kind of a feature cache entry."""
    RESOLVED = "resolved"   # boolean result, returned as-is
    PENDING = "pending"     # probe not yet run


@dataclass(frozen=True)
class FeatureEntry:
    """
    One feature cache entry.

    A PENDING entry holds a probe; the first query runs it and the cache
    replaces the entry with a RESOLVED one carrying the boolean result.
    """
    kind: EntryKind
    value: bool = False
    probe: Probe | None = None

    @classmethod
    def resolved(cls, value: Any) -> "FeatureEntry":
        return cls(kind=EntryKind.RESOLVED, value=bool(value))

    @classmethod
    def pending(cls, probe: Probe) -> "FeatureEntry":
        return cls(kind=EntryKind.PENDING, probe=probe)

    @classmethod
    def from_value(cls, value: FeatureValue) -> "FeatureEntry":
        """Classify a registered value: callables are probes, anything else a result."""
        if callable(value):
            return cls.pending(value)
        return cls.resolved(value)

    @property
    def is_pending(self) -> bool:
        return self.kind == EntryKind.PENDING

    def __repr__(self) -> str:
        if self.is_pending:
            name = getattr(self.probe, "__name__", type(self.probe).__name__)
            return f"Pending({name})"
        return f"Resolved({self.value})"
