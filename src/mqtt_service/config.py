"""
Centralized configuration for the MQTT service persistence layer.

- dataclasses + stdlib env parsing, no Pydantic.
- Loads from OS env; a .env file next to the project root is read first via python-dotenv.
- Strong typing & validation in __post_init__.
- Immutable singleton via functools.lru_cache.
"""

from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional, cast

from dotenv import load_dotenv

from mqtt_service.exceptions import ConfigurationError

# ------------------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------------------
def _load_dotenv(env_path: Path) -> None:
    if env_path.exists():
        load_dotenv(dotenv_path=str(env_path), override=False)


def _get_env_str(key: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(key, default)
    if v is not None and v.strip() == "":
        return default
    return v


def _get_env_bool(key: str, default: bool = False) -> bool:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    v = v.strip().lower()
    if v in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if v in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ConfigurationError(f"Env var {key} must be a boolean, got {v!r}", details={"key": key})


def _validate_choice(value: str, *, choices: tuple[str, ...], key: str) -> str:
    if value not in choices:
        raise ConfigurationError(
            f"{key} must be one of {choices}, got {value!r}",
            details={"key": key, "value": value},
        )
    return value


# ------------------------------------------------------------------------------
# Settings dataclass (immutable)
# ------------------------------------------------------------------------------
EnvName = Literal["local", "dev", "staging", "prod"]

_ENVIRONMENTS: tuple[str, ...] = ("local", "dev", "staging", "prod")
_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    # Environment
    environment: EnvName = "local"
    debug: bool = False

    # Observability
    log_level: str = "INFO"
    # None means: JSON everywhere except a developer's machine
    json_logs: Optional[bool] = None

    # Paths
    base_dir: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent.parent)

    # Derived/computed flags (filled in __post_init__)
    is_prod: bool = field(init=False)
    is_local: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "environment",
            _validate_choice(self.environment.strip().lower(), choices=_ENVIRONMENTS, key="ENVIRONMENT"),
        )
        object.__setattr__(
            self, "log_level",
            _validate_choice(self.log_level.strip().upper(), choices=_LOG_LEVELS, key="LOG_LEVEL"),
        )

        env = self.environment
        if self.json_logs is None:
            object.__setattr__(self, "json_logs", env != "local")
        object.__setattr__(self, "is_prod", env == "prod")
        object.__setattr__(self, "is_local", env == "local")

    def safe_dict(self) -> dict:
        return {
            "environment": self.environment,
            "debug": self.debug,
            "log_level": self.log_level,
            "json_logs": self.json_logs,
            "base_dir": str(self.base_dir),
        }


# ------------------------------------------------------------------------------
# Loader (singleton)
# ------------------------------------------------------------------------------
_logger = logging.getLogger(__name__)


def load_settings() -> Settings:
    """Build a fresh Settings object from the current process environment."""
    json_logs = os.getenv("LOG_JSON")

    return Settings(
        environment=cast(EnvName, _get_env_str("ENVIRONMENT", "local") or "local"),
        debug=_get_env_bool("DEBUG", False),
        log_level=_get_env_str("LOG_LEVEL", "INFO") or "INFO",
        json_logs=_get_env_bool("LOG_JSON") if json_logs and json_logs.strip() else None,
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Attempt to load .env from the project root (../../.env relative to src/mqtt_service/)
    env_file = Path(__file__).resolve().parent.parent.parent / ".env"
    _load_dotenv(env_file)

    settings = load_settings()
    _logger.info(
        "Settings loaded",
        extra={"settings": settings.safe_dict()},
    )
    return settings
