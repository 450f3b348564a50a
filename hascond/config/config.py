"""
Configuration management for hascond.
Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from typing import List, Optional
from pathlib import Path
from dotenv import load_dotenv

from .constants import VALID_LOG_LEVELS


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    # Empty means console only
    log_dir: str = ""

    @property
    def log_to_file(self) -> bool:
        return bool(self.log_dir)


@dataclass
class CacheConfig:
    """
    Feature cache bootstrap configuration.

    seed_file:
        Optional YAML mapping of feature name -> boolean copied into the
        process-wide cache before the default features are registered.
    register_defaults:
        Register the bootstrap feature set (host-browser, dom, ...) when
        no host feature API is supplied.
    debug:
        Trace every guard decision made by the resolver.
    """
    seed_file: str = ""
    register_defaults: bool = True
    debug: bool = False

    @property
    def seed_path(self) -> Optional[Path]:
        return Path(self.seed_file) if self.seed_file else None


class Config:
    """
    Central configuration. Singleton per process; use get_config().

    Environment variables:
    - HASCOND_LOG_LEVEL: DEBUG/INFO/WARNING/ERROR/CRITICAL (default: INFO)
    - HASCOND_LOG_DIR: directory for dated log files (default: no file logging)
    - HASCOND_SEED_FILE: YAML seed file for the feature cache
    - HASCOND_REGISTER_DEFAULTS: register bootstrap features (default: true)
    - HASCOND_DEBUG: trace resolver decisions (default: false)
    """

    _instance: Optional["Config"] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        # Later files override earlier ones
        for env_name in [".env", env_file]:
            env_path = Path(env_name)
            if env_path.exists():
                load_dotenv(env_path, override=True)

        self.log = self._load_log_config()
        self.cache = self._load_cache_config()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv("HASCOND_LOG_LEVEL", "INFO").strip().upper(),
            log_dir=os.getenv("HASCOND_LOG_DIR", "").strip(),
        )

    def _load_cache_config(self) -> CacheConfig:
        """Load feature cache configuration from environment."""
        return CacheConfig(
            seed_file=os.getenv("HASCOND_SEED_FILE", "").strip(),
            register_defaults=_env_flag("HASCOND_REGISTER_DEFAULTS", "true"),
            debug=_env_flag("HASCOND_DEBUG", "false"),
        )

    def reload(self, env_file: str = ".env") -> "Config":
        """Reload configuration from environment."""
        self._initialized = False
        Config._instance = None
        return Config(env_file)

    def validate(self) -> tuple[bool, List[str]]:
        """
        Validate configuration.

        Problems are reported, never raised, so callers can decide whether
        to continue with defaults.

        Returns:
            Tuple of (is_valid, list of messages)
        """
        errors: List[str] = []

        if self.log.level not in VALID_LOG_LEVELS:
            errors.append(
                f"HASCOND_LOG_LEVEL '{self.log.level}' is not one of "
                f"{', '.join(sorted(VALID_LOG_LEVELS))}"
            )

        seed_path = self.cache.seed_path
        if seed_path is not None and not seed_path.is_file():
            errors.append(f"HASCOND_SEED_FILE '{seed_path}' does not exist")

        return len(errors) == 0, errors

    def summary(self) -> str:
        """One-line configuration summary for log output."""
        return (
            f"log_level={self.log.level} "
            f"log_dir={self.log.log_dir or '-'} "
            f"seed_file={self.cache.seed_file or '-'} "
            f"register_defaults={self.cache.register_defaults} "
            f"debug={self.cache.debug}"
        )


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)
