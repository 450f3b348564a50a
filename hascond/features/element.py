"""
Minimal document-like scratch objects for hosts without a real document.

Probes that need to build markup to inspect it share one scratch element
through ProbeContext; FeatureCache.reset_probe_element() empties it between
probes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass
class ScratchElement:
    """
    Mutable element with markup and child nodes.

    Setting inner_html replaces the children, the same as assigning
    innerHTML on a DOM element.
    """
    tag: str = "div"
    children: list[Any] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    _inner_html: str = ""

    @property
    def inner_html(self) -> str:
        return self._inner_html

    @inner_html.setter
    def inner_html(self, markup: str) -> None:
        self._inner_html = markup
        self.children.clear()

    def append_child(self, child: Any) -> Any:
        self.children.append(child)
        return child

    @property
    def is_empty(self) -> bool:
        return not self._inner_html and not self.children


@dataclass
class ScratchDocument:
    """
    Document-like object accepted by ProbeContext.detect().

    Only the two members the bootstrap looks at are provided:
    create_element() and, optionally, add_event_listener().
    """
    supports_event_listeners: bool = True
    listeners: dict[str, list[Callable[..., Any]]] = field(default_factory=dict)

    def create_element(self, tag: str) -> ScratchElement:
        return ScratchElement(tag=tag)

    def __getattr__(self, name: str) -> Any:
        # add_event_listener only exists when the document supports it
        if name == "add_event_listener" and self.supports_event_listeners:
            return self._add_event_listener
        raise AttributeError(name)

    def _add_event_listener(self, event: str, listener: Callable[..., Any]) -> None:
        self.listeners.setdefault(event, []).append(listener)
