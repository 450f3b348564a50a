"""
hascond CLI entry point.

This is a thin shell: it parses arguments, configures logging, and
dispatches to the subcommand handlers. Evaluation lives in hascond.rules.
"""

import sys
from typing import List, Optional

from .argparser import setup_argparse
from .subcommands import handle_resolve, handle_explain, handle_features
from .utils import print_warning
from ..config.config import get_config
from ..utils.debug import enable_debug
from ..utils.logger import setup_logger

HANDLERS = {
    "resolve": handle_resolve,
    "explain": handle_explain,
    "features": handle_features,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    # Parse CLI arguments FIRST (before any config or logging)
    args = setup_argparse(argv)

    config = get_config()
    if args.debug:
        log_level = "DEBUG"
    elif args.verbose:
        log_level = "INFO"
    elif args.quiet:
        log_level = "WARNING"
    else:
        log_level = config.log.level

    setup_logger(log_dir=config.log.log_dir or None, log_level=log_level)
    if args.debug or config.cache.debug:
        enable_debug(True)

    is_valid, errors = config.validate()
    if not is_valid and not args.quiet:
        for error in errors:
            print_warning(error)

    return HANDLERS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
