"""
Expression parser: token stream to AST.

The parser consumes tokens exactly the way the streaming evaluator does in
skip mode, so for every input

    evaluate_term(parse_expression(e), cache) == ExpressionEvaluator(cache).evaluate(e).value

and the same guards are queried in the same order. The resolver does not
use the tree; it exists for inspection (CLI explain, guard listing).

Usage:
    term = parse_expression("x?a:y?b:c")
    # Guard('x', Id('a'), Guard('y', Id('b'), Id('c')))
    referenced_features("x?a:y?b:c")   # ["x", "y"]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from .nodes import Guarded, Identifier, NO_SELECTION, Term
from .tokenize import TokenStream, tokenize
from .types import GuardDecision
from ..config.constants import BRANCH_DELIMITER, GUARD_DELIMITER

if TYPE_CHECKING:
    from ..features.cache import FeatureCache


def parse_expression(expression: str) -> Term:
    """Parse an expression into a Term. Never raises."""
    return _parse_term(TokenStream(tokenize(expression)))


def _parse_term(stream: TokenStream) -> Term:
    term = stream.next()
    if term == BRANCH_DELIMITER:
        return NO_SELECTION

    if stream.next() != GUARD_DELIMITER:
        return Identifier(term)

    when_true = _parse_term(stream)
    when_false = _parse_term(stream)
    return Guarded(feature=term, when_true=when_true, when_false=when_false)


def evaluate_term(
    term: Term,
    cache: "FeatureCache",
    decisions: list[GuardDecision] | None = None,
) -> str | None:
    """
    Evaluate a parsed term; only the chosen branch is visited.

    Args:
        term: Parsed expression.
        cache: Feature cache answering the guards.
        decisions: Optional list that receives each queried guard.
    """
    while isinstance(term, Guarded):
        matched = cache.query(term.feature)
        if decisions is not None:
            decisions.append(GuardDecision(feature=term.feature, value=matched))
        term = term.when_true if matched else term.when_false
    return term.name


def iter_guards(term: Term) -> Iterator[Guarded]:
    """Yield every Guarded node in source order."""
    if isinstance(term, Guarded):
        yield term
        yield from iter_guards(term.when_true)
        yield from iter_guards(term.when_false)


def referenced_features(expression: str) -> list[str]:
    """Guard feature names in source order, duplicates kept."""
    return [guard.feature for guard in iter_guards(parse_expression(expression))]


def candidate_identifiers(expression: str) -> list[str]:
    """Every identifier the expression could select, in source order."""
    found: list[str] = []

    def visit(term: Term) -> None:
        if isinstance(term, Guarded):
            visit(term.when_true)
            visit(term.when_false)
        elif term.selects:
            found.append(term.name)

    visit(parse_expression(expression))
    return found
