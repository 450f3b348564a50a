"""
CLI utility functions for hascond.

Contains:
- The shared rich Console
- Feature cache construction from CLI arguments
- Error and warning output
"""

import argparse

from rich.console import Console
from rich.text import Text

from ..config.config import get_config
from ..features.bootstrap import bootstrap_feature_cache
from ..features.cache import FeatureCache
from ..features.seed import load_seed_file


# Global Console
console = Console()


def print_error(message: str) -> None:
    console.print(Text(f"Error: {message}", style="bold red"))


def print_warning(message: str) -> None:
    console.print(Text(f"Warning: {message}", style="yellow"))


def build_feature_cache(args: argparse.Namespace) -> FeatureCache:
    """
    Build a cache for one CLI invocation.

    Order: seed file (--seed, else HASCOND_SEED_FILE), bootstrap defaults
    (unless --no-defaults or HASCOND_REGISTER_DEFAULTS=false), then each
    --feature with force so it overrides both.

    Raises:
        SeedFileError: The seed file cannot be loaded.
    """
    config = get_config()

    seed_path = args.seed or config.cache.seed_file or None
    seed = load_seed_file(seed_path) if seed_path else None

    cache = bootstrap_feature_cache(
        seed=seed,
        register_defaults=config.cache.register_defaults and not args.no_defaults,
    )
    for name, value in args.features:
        cache.register(name, value, force=True)
    return cache
