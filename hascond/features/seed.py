"""
Seed files: host-supplied feature results loaded before bootstrap.

Format (YAML mapping of feature name -> boolean):
```yaml
host-browser: false
json-parse: true
42: true
```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..utils.logger import get_module_logger

logger = get_module_logger(__name__)


class SeedFileError(ValueError):
    """Seed file missing, unreadable, or not a name -> boolean mapping."""


def parse_seed(data: Any, source: str = "<seed>") -> dict[str, bool]:
    """
    Validate a loaded seed document.

    Args:
        data: Result of yaml.safe_load (None for an empty document).
        source: Label used in error messages.

    Returns:
        Mapping of feature name -> bool. Integer names become strings.
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SeedFileError(
            f"{source}: expected a mapping of feature name -> boolean, "
            f"got {type(data).__name__}"
        )

    seed: dict[str, bool] = {}
    for name, value in data.items():
        if isinstance(name, bool) or not isinstance(name, (str, int)):
            raise SeedFileError(f"{source}: feature name {name!r} must be a string or integer")
        if not isinstance(value, (bool, int)):
            raise SeedFileError(
                f"{source}: feature {name!r} must be true/false, got {value!r}"
            )
        seed[str(name)] = bool(value)
    return seed


def load_seed_file(path: str | Path) -> dict[str, bool]:
    """Read and validate a YAML seed file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SeedFileError(f"{path}: cannot read seed file ({e.strerror or e})") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SeedFileError(f"{path}: invalid YAML ({e})") from e

    seed = parse_seed(data, source=str(path))
    logger.debug("loaded %d seed features from %s", len(seed), path)
    return seed
