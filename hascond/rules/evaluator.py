"""
Streaming evaluator for conditional expressions.

Grammar:
    term := IDENT
          | IDENT "?" term ":" term

Evaluates in one left-to-right pass over the token stream, without
building a tree:

1. Read a token. A ":" here is an empty left side: no selection.
2. Read the following token. Unless it is "?", the first token is the
   value (the second token, usually the ":" separator, is consumed).
3. Otherwise the first token is a guard. If not skipping and the guard is
   true, the true branch is the result and evaluation stops there.
   Otherwise the true branch is walked in skip mode and the false branch
   is evaluated with the caller's skip flag.

Skip mode consumes tokens to keep the cursor in step but never queries
the feature cache; a guard met while skipping skips both its branches.

Usage:
    evaluator = ExpressionEvaluator(cache)
    selection = evaluator.evaluate("x?modA:y?modB:modC")
    selection.identifier   # "modA", "modB", "modC" or None
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .tokenize import TokenStream, tokenize
from .types import GuardDecision, Selection
from ..config.constants import BRANCH_DELIMITER, GUARD_DELIMITER
from ..utils.debug import debug_log

if TYPE_CHECKING:
    from ..features.cache import FeatureCache


class ExpressionEvaluator:
    """
    Evaluates conditional expressions against a feature cache.

    Stateless between calls; each evaluate() re-tokenizes its input.

    Example:
        cache.register("x", False)
        cache.register("y", True)
        ExpressionEvaluator(cache).evaluate("x?a:y?b:c").identifier  # "b"
    """

    def __init__(self, cache: "FeatureCache"):
        self._cache = cache

    def evaluate(self, expression: str) -> Selection:
        """
        Evaluate an expression.

        Never raises for malformed input; exceptions from probes propagate.
        """
        stream = TokenStream(tokenize(expression))
        decisions: list[GuardDecision] = []
        value = self._eval_term(stream, False, expression, decisions)
        debug_log(expression, "selected", value=value, guards=decisions)
        return Selection(expression=expression, value=value, decisions=tuple(decisions))

    def _eval_term(
        self,
        stream: TokenStream,
        skip: bool,
        expression: str,
        decisions: list[GuardDecision],
    ) -> str | None:
        term = stream.next()
        if term == BRANCH_DELIMITER:
            return None

        if stream.next() != GUARD_DELIMITER:
            return term

        if not skip:
            matched = self._cache.query(term)
            decisions.append(GuardDecision(feature=term, value=matched))
            debug_log(expression, "guard", feature=term, value=matched)
            if matched:
                return self._eval_term(stream, False, expression, decisions)

        # Pass over the true branch, then take the false one
        self._eval_term(stream, True, expression, decisions)
        return self._eval_term(stream, skip, expression, decisions)
