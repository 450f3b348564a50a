"""
Tokenizer for conditional expressions.

Splits `feature?whenTrue:whenFalse` into identifier runs and the two
delimiter characters, each delimiter a token of its own:

    "x?a:b"   -> ("x", "?", "a", ":", "b", "")
    ":modB"   -> (":", "modB", "")
    "modA?"   -> ("modA", "?", "")
    ""        -> ("",)

The stream always ends with a zero-length identifier. Consecutive
delimiters produce no empty token between them ("x??" -> "x", "?", "?", "").
"""

from __future__ import annotations

from ..config.constants import TOKEN_PATTERN


def tokenize(expression: str) -> tuple[str, ...]:
    """Split an expression into identifier and delimiter tokens."""
    return tuple(TOKEN_PATTERN.findall(expression))


class TokenStream:
    """
    Forward-only cursor over a token tuple.

    Reading past the end yields None; the evaluator treats that as an
    absent identifier, so truncated expressions never raise.
    """

    __slots__ = ("tokens", "position")

    def __init__(self, tokens: tuple[str, ...]):
        self.tokens = tokens
        self.position = 0

    def next(self) -> str | None:
        position = self.position
        self.position += 1
        if position < len(self.tokens):
            return self.tokens[position]
        return None

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.tokens)
