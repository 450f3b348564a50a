"""
Subcommand handlers for the hascond CLI.

Each handler takes the parsed arguments and returns an exit code.
"""

from __future__ import annotations

import argparse
import json

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from .utils import console, build_feature_cache, print_error
from ..features.cache import FeatureCache
from ..features.seed import SeedFileError
from ..rules.nodes import Guarded, Term
from ..rules.parser import parse_expression
from ..rules.resolve import resolve
from ..rules.tokenize import tokenize


def _cache_or_error(args: argparse.Namespace) -> FeatureCache | None:
    try:
        return build_feature_cache(args)
    except SeedFileError as e:
        print_error(str(e))
        return None


def _format_identifier(name: str | None) -> str:
    if name is None:
        return "(none)"
    if name == "":
        return "(empty)"
    return name


# =============================================================================
# resolve
# =============================================================================

def handle_resolve(args: argparse.Namespace) -> int:
    """Evaluate an expression and print the selection."""
    cache = _cache_or_error(args)
    if cache is None:
        return 1

    outcome = {}
    selection = resolve(
        args.expression,
        cache,
        on_resolved=lambda identifier: outcome.setdefault("identifier", identifier),
        on_unresolved=lambda: outcome.setdefault("identifier", None),
    )

    if args.json_output:
        console.out(json.dumps(selection.to_dict(), indent=2), highlight=False)
        return 0

    line = Text()
    if selection.selected:
        line.append("selected ", style="bold green")
        line.append(outcome["identifier"])
    else:
        line.append("no selection", style="bold yellow")
    console.print(line)

    for decision in selection.decisions:
        row = Text("  ")
        row.append(decision.feature)
        row.append(" = ")
        row.append(str(decision.value).lower(), style="green" if decision.value else "red")
        console.print(row)
    return 0


# =============================================================================
# explain
# =============================================================================

def _add_term(parent: Tree, term: Term, cache: FeatureCache, active: bool, label: str) -> None:
    """Add a term under parent; only active guards are queried."""
    style = "" if active else "dim"
    if isinstance(term, Guarded):
        text = Text(f"{label}guard ", style=style)
        text.append(term.feature, style="bold" if active else "dim")
        if active:
            value = cache.query(term.feature)
            text.append(f" = {str(value).lower()}", style="green" if value else "red")
        else:
            value = False
            text.append(" (skipped)", style="dim")
        node = parent.add(text)
        _add_term(node, term.when_true, cache, active and value, "? ")
        _add_term(node, term.when_false, cache, active and not value, ": ")
        return

    text = Text(f"{label}{_format_identifier(term.name)}", style=style)
    if active:
        text.append("  <- result", style="bold green" if term.selects else "bold yellow")
    parent.add(text)


def handle_explain(args: argparse.Namespace) -> int:
    """Print the token stream and the expression tree."""
    cache = _cache_or_error(args)
    if cache is None:
        return 1

    tokens = tokenize(args.expression)
    console.print(Text("tokens: " + " ".join(repr(token) for token in tokens)))

    tree = Tree(Text(f"expression {args.expression!r}", style="bold cyan"))
    _add_term(tree, parse_expression(args.expression), cache, True, "")
    console.print(tree)
    return 0


# =============================================================================
# features
# =============================================================================

def handle_features(args: argparse.Namespace) -> int:
    """Print the feature cache as a table."""
    cache = _cache_or_error(args)
    if cache is None:
        return 1

    if args.evaluate:
        for name in cache.names():
            cache.query(name)

    table = Table(title="Features")
    table.add_column("Feature", style="cyan")
    table.add_column("State")
    table.add_column("Value")

    for name, value in sorted(cache.snapshot().items()):
        if value is None:
            table.add_row(Text(name), "pending", "-")
        else:
            table.add_row(
                Text(name),
                "resolved",
                Text(str(value).lower(), style="green" if value else "red"),
            )

    console.print(table)
    return 0
