"""
Resolution result types.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GuardDecision:
    """A guard the evaluator actually queried, and the answer."""
    feature: str
    value: bool

    def __repr__(self) -> str:
        return f"{self.feature}={'T' if self.value else 'F'}"


@dataclass(frozen=True)
class Selection:
    """
    Outcome of evaluating one expression.

    Attributes:
        expression: Source expression
        value: What the evaluator returned: an identifier, "" for an empty
            branch, or None for a dangling colon / past-the-end read
        decisions: Guards queried, in order (skipped guards never appear)
    """
    expression: str
    value: str | None
    decisions: tuple[GuardDecision, ...] = ()

    @property
    def identifier(self) -> str | None:
        """Selected identifier, or None when nothing was selected."""
        return self.value or None

    @property
    def selected(self) -> bool:
        return bool(self.value)

    @property
    def queried_features(self) -> tuple[str, ...]:
        return tuple(d.feature for d in self.decisions)

    def to_dict(self) -> dict:
        """Convert to dict for logging/serialization."""
        return {
            "expression": self.expression,
            "identifier": self.identifier,
            "selected": self.selected,
            "decisions": [
                {"feature": d.feature, "value": d.value} for d in self.decisions
            ],
        }
