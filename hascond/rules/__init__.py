"""
Conditional expressions: `feature?whenTrue:whenFalse`.

Design principles:
- One left-to-right pass, no backtracking
- Only the taken branch queries features; the other is skipped
- Malformed input resolves to "no selection", never raises
"""

from .tokenize import tokenize, TokenStream
from .types import GuardDecision, Selection
from .nodes import Identifier, Guarded, Term, NO_SELECTION
from .evaluator import ExpressionEvaluator
from .parser import (
    parse_expression,
    evaluate_term,
    iter_guards,
    referenced_features,
    candidate_identifiers,
)
from .resolve import select, resolve, load

__all__ = [
    # Tokens
    "tokenize",
    "TokenStream",
    # Types
    "GuardDecision",
    "Selection",
    # AST
    "Identifier",
    "Guarded",
    "Term",
    "NO_SELECTION",
    "parse_expression",
    "evaluate_term",
    "iter_guards",
    "referenced_features",
    "candidate_identifiers",
    # Evaluation
    "ExpressionEvaluator",
    "select",
    "resolve",
    "load",
]
