"""
AST node types for conditional expressions.

- Identifier: a plain term (an identifier, "" for an empty branch, or None
  for a dangling colon / missing token)
- Guarded: feature-guarded choice between two terms
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Identifier:
    """
    A plain term.

    Attributes:
        name: Identifier text; "" is an empty branch, None an absent one

    Examples:
        Identifier("dojo/query")   # selects "dojo/query"
        Identifier("")             # "x?:b" true branch is empty
        Identifier(None)           # ":b" leading colon
    """
    name: str | None

    @property
    def selects(self) -> bool:
        return bool(self.name)

    def __repr__(self) -> str:
        return f"Id({self.name!r})"


@dataclass(frozen=True)
class Guarded:
    """
    Feature-guarded choice: `feature?when_true:when_false`.

    Attributes:
        feature: Feature name queried to choose a branch
        when_true: Term selected when the feature is true
        when_false: Term selected otherwise
    """
    feature: str
    when_true: "Term"
    when_false: "Term"

    def __repr__(self) -> str:
        return f"Guard({self.feature!r}, {self.when_true!r}, {self.when_false!r})"


Term = Union[Identifier, Guarded]

NO_SELECTION = Identifier(None)
