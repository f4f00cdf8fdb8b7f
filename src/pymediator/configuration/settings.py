"""
Application settings and configuration.

Provides centralized configuration for the mediator pipeline. Values come
from PYMEDIATOR_* environment variables (a .env file is loaded by the CLI).
"""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "PYMEDIATOR_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


@dataclass
class Settings:
    """
    Application settings.

    Attributes:
        log_level: Root log level used by the CLI
        retry_attempts: Attempts RetryBehavior makes (1 disables retrying)
        retry_delay: Seconds before the first retry, doubled on each further one
        request_timeout: Seconds a request may take per attempt, None for no limit
        cache_queries: Whether query responses are cached
        cache_size: Maximum cached query responses
    """
    log_level: str = "WARNING"
    retry_attempts: int = 3
    retry_delay: float = 0.0
    request_timeout: Optional[float] = None
    cache_queries: bool = True
    cache_size: int = 128

    def __post_init__(self):
        self.log_level = self.log_level.strip().upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
        if self.retry_attempts < 1:
            raise ValueError("retry_attempts must be at least 1")
        if self.retry_delay < 0:
            raise ValueError("retry_delay cannot be negative")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")
        if self.cache_size < 1:
            raise ValueError("cache_size must be at least 1")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """
        Build settings from environment variables.

        Unset variables keep their defaults.

        Raises:
            ValueError: If a variable cannot be parsed
        """
        env = os.environ if environ is None else environ
        values = {}

        if f"{ENV_PREFIX}LOG_LEVEL" in env:
            values['log_level'] = env[f"{ENV_PREFIX}LOG_LEVEL"]
        if f"{ENV_PREFIX}RETRY_ATTEMPTS" in env:
            values['retry_attempts'] = _parse(env, "RETRY_ATTEMPTS", int)
        if f"{ENV_PREFIX}RETRY_DELAY" in env:
            values['retry_delay'] = _parse(env, "RETRY_DELAY", float)
        if f"{ENV_PREFIX}REQUEST_TIMEOUT" in env:
            raw = env[f"{ENV_PREFIX}REQUEST_TIMEOUT"].strip()
            values['request_timeout'] = None if raw.lower() in ("", "none") else _parse(env, "REQUEST_TIMEOUT", float)
        if f"{ENV_PREFIX}CACHE_QUERIES" in env:
            values['cache_queries'] = _parse_bool(env, "CACHE_QUERIES")
        if f"{ENV_PREFIX}CACHE_SIZE" in env:
            values['cache_size'] = _parse(env, "CACHE_SIZE", int)

        return cls(**values)


def _parse(env: Mapping[str, str], name: str, convert):
    raw = env[f"{ENV_PREFIX}{name}"]
    try:
        return convert(raw.strip())
    except ValueError:
        raise ValueError(f"Invalid value for {ENV_PREFIX}{name}: {raw!r}") from None


def _parse_bool(env: Mapping[str, str], name: str) -> bool:
    raw = env[f"{ENV_PREFIX}{name}"].strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(f"Invalid value for {ENV_PREFIX}{name}: {raw!r}")


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get global settings instance, read from the environment on first use.

    Returns:
        Settings: Global settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
        logger.debug(f"Loaded settings: {_settings}")
    return _settings


def reset_settings():
    """Reset global settings instance (useful for testing)"""
    global _settings
    _settings = None
