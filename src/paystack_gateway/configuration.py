"""Configuration for the Paystack client.

Values can come from the environment (``PAYSTACK_SECRET_KEY`` and friends) or
be set in code::

    paystack_gateway.configure(secret_key="sk_test_...", use_extensions=False)
"""

import logging
import os
from pathlib import Path
from typing import Any, Callable

import httpx
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from paystack_gateway.log_filter import redact_payload


def default_cache_dir() -> Path:
    return Path(os.environ.get("TMPDIR") or "/tmp") / "cache"


class LoggingOptions(BaseModel):
    """What the request/response log lines include besides method, URL and status."""

    headers: bool = False
    bodies: bool = False


class Configuration(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PAYSTACK_",
        case_sensitive=False,
        arbitrary_types_allowed=True,
    )

    secret_key: str | None = Field(default=None)
    logger: logging.Logger = Field(default_factory=lambda: logging.getLogger("paystack_gateway"))
    logging_options: LoggingOptions = Field(default_factory=LoggingOptions)
    log_filter: Callable[[Any], Any] = Field(default=redact_payload)
    use_extensions: bool = Field(default=True)

    cache_dir: Path = Field(default_factory=default_cache_dir)
    timeout_seconds: float = Field(default=30)
    transport: httpx.BaseTransport | None = Field(default=None, exclude=True)


_config: Configuration | None = None


def get_config() -> Configuration:
    global _config
    if _config is None:
        _config = Configuration()
    return _config


def set_config(config: Configuration) -> None:
    global _config
    _config = config


def reset_config() -> Configuration:
    """Discard any configured values and reload from the environment."""
    global _config
    _config = Configuration()
    return _config


def configure(**values: Any) -> Configuration:
    """Set configuration values on the shared configuration object."""
    config = get_config()
    for name, value in values.items():
        if name not in Configuration.model_fields:
            raise AttributeError(f"Unknown configuration option: {name}")
        setattr(config, name, value)
    return config
