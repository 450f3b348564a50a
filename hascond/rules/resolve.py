"""
Conditional resolution: expression -> identifier -> continuation.

resolve() evaluates an expression and hands the outcome to exactly one of
two callbacks:
- on_resolved(identifier) when a non-empty identifier was selected
- on_unresolved() otherwise (empty expression, empty branch, dangling colon)

It does not wait for the continuation; whatever on_resolved starts (module
loading, resource fetch) completes on the host's schedule.

load() adapts resolve() to the loader plugin contract:

    def parent_require(ids: list[str], loaded: Callable) -> None: ...
    load("dom?dom-impl:node-impl", parent_require, loaded)
    # -> parent_require(["dom-impl"], loaded)  or  loaded()
"""

from __future__ import annotations

from typing import Any, Callable

from .evaluator import ExpressionEvaluator
from .types import Selection
from ..features.bootstrap import get_feature_cache
from ..features.cache import FeatureCache
from ..utils.logger import get_module_logger

logger = get_module_logger(__name__)

# parent_require(ids, loaded): request the resources, then call loaded(*values)
RequireFn = Callable[[list[str], Callable[..., Any]], Any]


def select(expression: str, cache: FeatureCache | None = None) -> Selection:
    """
    Evaluate an expression without any continuation.

    Args:
        expression: Conditional expression.
        cache: Feature cache (default: the process-wide cache).
    """
    if cache is None:
        cache = get_feature_cache()
    return ExpressionEvaluator(cache).evaluate(expression)


def resolve(
    expression: str,
    feature_cache: FeatureCache,
    on_resolved: Callable[[str], Any],
    on_unresolved: Callable[[], Any],
) -> Selection:
    """
    Resolve an expression and invoke one continuation.

    Returns:
        The Selection, for callers that want the guard decisions.
    """
    selection = ExpressionEvaluator(feature_cache).evaluate(expression)
    if selection.selected:
        logger.debug("resolved %r -> %r", expression, selection.identifier)
        on_resolved(selection.identifier)
    else:
        logger.debug("resolved %r -> no selection", expression)
        on_unresolved()
    return selection


def load(
    expression: str,
    parent_require: RequireFn,
    loaded: Callable[..., Any],
    cache: FeatureCache | None = None,
) -> Selection:
    """
    Loader plugin entry point.

    Requests at most one resource: parent_require([identifier], loaded)
    when something is selected, otherwise loaded() directly.
    """
    if cache is None:
        cache = get_feature_cache()
    return resolve(
        expression,
        cache,
        lambda identifier: parent_require([identifier], loaded),
        loaded,
    )
