"""
Conditional evaluator tests.

Validates:
1. Plain identifiers and empty expressions
2. Guarded choice in both directions
3. Skip mode: guards in the branch not taken are never queried
4. Nested conditionals in either branch
5. Leading/trailing delimiters follow the token stream, never raise
"""

import sys

import pytest

from hascond.rules.evaluator import ExpressionEvaluator
from hascond.rules.types import GuardDecision


def evaluate(cache, expression):
    return ExpressionEvaluator(cache).evaluate(expression)


class TestPlainTerms:
    """Expressions without guards."""

    def test_empty_expression_is_no_selection(self, cache):
        selection = evaluate(cache, "")
        assert selection.identifier is None
        assert not selection.selected
        assert selection.decisions == ()

    def test_identifier_selects_itself(self, cache):
        selection = evaluate(cache, "modA")
        assert selection.identifier == "modA"
        assert selection.selected

    def test_identifier_with_path_characters(self, cache):
        assert evaluate(cache, "dojo/_base/lang").identifier == "dojo/_base/lang"


class TestGuardedChoice:
    """feature?whenTrue:whenFalse"""

    def test_true_guard_selects_first_branch(self, make_cache):
        cache = make_cache({"x": True})
        selection = evaluate(cache, "x?modA:modB")
        assert selection.identifier == "modA"
        assert selection.decisions == (GuardDecision("x", True),)

    def test_false_guard_selects_second_branch(self, make_cache):
        cache = make_cache({"x": False})
        selection = evaluate(cache, "x?modA:modB")
        assert selection.identifier == "modB"
        assert selection.decisions == (GuardDecision("x", False),)

    def test_unregistered_guard_is_false(self, cache):
        assert evaluate(cache, "nobody-registered-this?modA:modB").identifier == "modB"

    def test_probe_guard_runs_once_across_resolutions(self, make_cache, probe):
        p = probe(True)
        cache = make_cache({"x": p})
        assert evaluate(cache, "x?modA:modB").identifier == "modA"
        assert evaluate(cache, "x?modC:modD").identifier == "modC"
        assert p.call_count == 1

    def test_missing_false_branch(self, make_cache):
        """`x?modA` with x false has nothing to select."""
        cache = make_cache({"x": False})
        assert evaluate(cache, "x?modA").identifier is None

    def test_empty_true_branch(self, make_cache):
        assert evaluate(make_cache({"x": True}), "x?:modB").identifier is None
        assert evaluate(make_cache({"x": False}), "x?:modB").identifier == "modB"

    def test_empty_false_branch(self, make_cache):
        assert evaluate(make_cache({"x": True}), "x?modA:").identifier == "modA"
        selection = evaluate(make_cache({"x": False}), "x?modA:")
        assert selection.value == ""
        assert selection.identifier is None


class TestSkipMode:
    """The branch not taken is walked but never queried."""

    def test_nested_guard_in_skipped_true_branch_not_queried(self, make_cache, probe):
        y = probe(True)
        cache = make_cache({"x": False, "y": y})

        selection = evaluate(cache, "x?y?modC:modD:modB")

        assert selection.identifier == "modB"
        assert y.call_count == 0
        assert selection.queried_features == ("x",)

    def test_false_branch_not_queried_when_guard_true(self, make_cache, probe):
        y = probe(True)
        cache = make_cache({"x": True, "y": y})

        assert evaluate(cache, "x?modA:y?modC:modD").identifier == "modA"
        assert y.call_count == 0

    def test_skip_propagates_through_deep_true_branch(self, make_cache, probe):
        probes = {name: probe(True) for name in ("a", "b", "c")}
        cache = make_cache({"x": False, **probes})

        selection = evaluate(cache, "x?a?b?c?1:2:3:4:fallback")

        assert selection.identifier == "fallback"
        assert all(p.call_count == 0 for p in probes.values())

    def test_probe_error_in_taken_branch_propagates(self, make_cache, probe):
        cache = make_cache({"x": True, "y": probe(error=LookupError("no env"))})
        with pytest.raises(LookupError):
            evaluate(cache, "x?y?a:b:c")

    def test_probe_error_in_skipped_branch_is_never_reached(self, make_cache, probe):
        cache = make_cache({"x": False, "y": probe(error=LookupError("no env"))})
        assert evaluate(cache, "x?y?a:b:c").identifier == "c"


class TestNesting:
    """Conditionals nested in either branch."""

    def test_nested_in_false_branch(self, make_cache):
        cache = make_cache({"x": False, "y": True})
        selection = evaluate(cache, "x?a:y?b:c")
        assert selection.identifier == "b"
        assert selection.decisions == (GuardDecision("x", False), GuardDecision("y", True))

    @pytest.mark.parametrize("x, y, expected", [
        (True, True, "a"),
        (True, False, "b"),
        (False, True, "c"),
        (False, False, "c"),
    ])
    def test_nested_in_true_branch(self, make_cache, x, y, expected):
        cache = make_cache({"x": x, "y": y})
        assert evaluate(cache, "x?y?a:b:c").identifier == expected

    @pytest.mark.parametrize("enabled, expected", [
        ({"a"}, "1"),
        ({"b"}, "2"),
        ({"c"}, "3"),
        (set(), "4"),
        ({"b", "c"}, "2"),
    ])
    def test_chain_picks_first_true_guard(self, make_cache, enabled, expected):
        cache = make_cache({name: name in enabled for name in "abc"})
        assert evaluate(cache, "a?1:b?2:c?3:4").identifier == expected

    def test_deep_chain(self, cache):
        depth = 300
        expression = "".join(f"f{i}?m{i}:" for i in range(depth)) + "last"
        cache.register(f"f{depth - 1}", True)

        selection = evaluate(cache, expression)

        assert selection.identifier == f"m{depth - 1}"
        assert len(selection.decisions) == depth

    def test_nesting_bounded_by_recursion_limit(self, cache):
        depth = sys.getrecursionlimit() * 2
        expression = "".join(f"f{i}?m{i}:" for i in range(depth)) + "last"
        with pytest.raises(RecursionError):
            evaluate(cache, expression)


class TestDelimiterEdgeCases:
    """Dangling and leading delimiters resolve per the token stream."""

    def test_leading_colon_is_no_selection(self, cache):
        selection = evaluate(cache, ":modB")
        assert selection.value is None
        assert not selection.selected

    def test_trailing_question_mark(self, make_cache):
        """`modA?` guards an empty branch; nothing is ever selected."""
        assert evaluate(make_cache(), "modA?").identifier is None
        assert evaluate(make_cache({"modA": True}), "modA?").value == ""

    def test_trailing_colon(self, cache):
        assert evaluate(cache, "modA:").identifier == "modA"

    def test_lone_delimiters(self, cache):
        assert evaluate(cache, ":").identifier is None
        assert evaluate(cache, "::").identifier is None
        assert evaluate(cache, "?:").identifier == "?"

    def test_leading_question_mark_is_read_as_identifier(self, cache):
        """A `?` in term position is not a delimiter to the evaluator."""
        assert evaluate(cache, "?a").identifier == "?"

    def test_double_question_mark(self, make_cache):
        assert evaluate(make_cache({"x": True}), "x??a").identifier == "?"
        assert evaluate(make_cache({"x": False}), "x??a").identifier is None

    def test_text_after_complete_expression_is_ignored(self, make_cache):
        cache = make_cache({"x": True})
        assert evaluate(cache, "x?a:b:c:d").identifier == "a"
        assert evaluate(cache, "a:b").identifier == "a"
