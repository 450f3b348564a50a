"""
Argument parser setup for the hascond CLI.

Subcommands:
- resolve: evaluate an expression and print the selection
- explain: show tokens and the expression tree with the branch taken
- features: list the feature cache
"""

import argparse
from typing import List, Optional, Tuple

_TRUE_WORDS = {"1", "true", "yes", "on", "t", "y"}
_FALSE_WORDS = {"0", "false", "no", "off", "f", "n"}


def parse_feature_assignment(text: str) -> Tuple[str, bool]:
    """
    Parse a --feature argument.

    Accepts NAME (true), NAME=true/false, NAME=1/0, NAME=yes/no.
    """
    name, sep, raw = text.partition("=")
    if not sep:
        return name, True
    value = raw.strip().lower()
    if value in _TRUE_WORDS:
        return name, True
    if value in _FALSE_WORDS:
        return name, False
    raise argparse.ArgumentTypeError(
        f"invalid feature value '{raw}' for '{name}' (use true/false)"
    )


def _add_cache_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every subcommand that builds a feature cache."""
    parser.add_argument(
        "-f", "--feature",
        dest="features",
        action="append",
        type=parse_feature_assignment,
        default=[],
        metavar="NAME[=BOOL]",
        help="Set a feature (overrides seed and defaults); repeatable"
    )
    parser.add_argument(
        "--seed",
        default=None,
        metavar="FILE",
        help="YAML seed file of feature name -> boolean (default: HASCOND_SEED_FILE)"
    )
    parser.add_argument(
        "--no-defaults",
        action="store_true",
        default=False,
        help="Do not register the bootstrap feature set"
    )


def setup_argparse(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Supports:
      resolve EXPR      Evaluate and print the selected identifier
      explain EXPR      Print tokens and the expression tree
      features          Print the feature cache
    """
    parser = argparse.ArgumentParser(
        prog="hascond",
        description="hascond - feature detection and conditional selection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hascond resolve "dom?dom-impl:node-impl"
  hascond resolve "x?a:y?b:c" -f x=false -f y --json
  hascond explain "x?a:y?b:c" -f x=0 -f y=1
  hascond features --seed features.yaml
        """
    )

    # Verbosity: mutually exclusive group (-q / -v / --debug)
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=False,
        help="Quiet mode: WARNING only"
    )
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Verbose mode: INFO"
    )
    verbosity.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Debug mode: DEBUG + guard tracing (sets HASCOND_DEBUG=1)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.required = True

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Evaluate an expression and print the selected identifier"
    )
    resolve_parser.add_argument("expression", help="Expression, e.g. 'x?modA:modB'")
    resolve_parser.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        default=False,
        help="Output the selection as JSON"
    )
    _add_cache_arguments(resolve_parser)

    explain_parser = subparsers.add_parser(
        "explain",
        help="Show tokens and the expression tree with the branch taken"
    )
    explain_parser.add_argument("expression", help="Expression, e.g. 'x?modA:modB'")
    _add_cache_arguments(explain_parser)

    features_parser = subparsers.add_parser(
        "features",
        help="List the feature cache"
    )
    features_parser.add_argument(
        "--evaluate",
        action="store_true",
        default=False,
        help="Run pending probes before listing"
    )
    _add_cache_arguments(features_parser)

    return parser.parse_args(argv)
