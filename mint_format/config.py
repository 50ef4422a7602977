# -*- coding: utf-8 -*-
"""Location: ./mint_format/config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

MINT Configuration.
This module defines configuration settings for the MINT command line tool
using Pydantic. It loads configuration from environment variables (and an
optional ``.env`` file) with sensible defaults. Explicit CLI flags always win.

Environment variables:
- MINT_INDENT: Spaces per indentation level (default: 2)
- MINT_COMPACT: Replace status words with symbols when encoding (default: False)
- MINT_SORT_KEYS: Sort object keys when encoding (default: False)
- MINT_STRICT: Log skipped constructs as warnings when decoding (default: True)
- MINT_LOG_LEVEL: Logging level (default: "WARNING")

Examples:
    >>> from mint_format.config import Settings
    >>> s = Settings(indent=4, compact=True, _env_file=None)
    >>> s.encode_options().indent
    4
    >>> s.decode_options().strict
    True
    >>> Settings(log_level="debug", _env_file=None).log_level
    'DEBUG'
"""

# Standard
from functools import lru_cache
import logging
from typing import Any, get_args, Literal

# Third-Party
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# First-Party
from mint_format.constants import DEFAULT_INDENT
from mint_format.models import DecodeOptions, EncodeOptions

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS = get_args(LogLevel)

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """MINT configuration settings."""

    indent: int = Field(default=DEFAULT_INDENT, ge=1, description="Spaces per indentation level")
    compact: bool = Field(default=False, description="Replace status words with symbols when encoding")
    sort_keys: bool = Field(default=False, description="Sort object keys alphabetically when encoding")
    strict: bool = Field(default=True, description="Log skipped constructs as warnings when decoding")
    log_level: LogLevel = Field(default="WARNING", description="Level applied by configure_logging")

    model_config = SettingsConfigDict(env_prefix="MINT_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        """Accept level names in any case, so ``MINT_LOG_LEVEL=debug`` works.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        if not isinstance(value, str):
            return value
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {value} (expected one of {', '.join(LOG_LEVELS)})")
        return level

    def encode_options(self) -> EncodeOptions:
        """Build encoding options from the configured defaults.

        Returns:
            EncodeOptions: Options for ``encode``.
        """
        return EncodeOptions(indent=self.indent, compact=self.compact, sort_keys=self.sort_keys)

    def decode_options(self) -> DecodeOptions:
        """Build decoding options from the configured defaults.

        Returns:
            DecodeOptions: Options for ``decode``.
        """
        return DecodeOptions(indent=self.indent, strict=self.strict)


@lru_cache()
def get_settings(**kwargs: Any) -> Settings:
    """Load the MINT settings once per distinct set of overrides.

    Args:
        **kwargs: Field overrides passed to ``Settings``.

    Returns:
        Settings: The shared instance for these overrides.

    Examples:
        >>> settings = get_settings()
        >>> isinstance(settings, Settings)
        True
        >>> settings is get_settings()
        True
    """
    return Settings(**kwargs)


class LazySettingsWrapper:
    """Module-level stand-in for ``get_settings()``.

    Nothing reads the environment until the first attribute lookup, and a
    ``get_settings.cache_clear()`` is picked up on the next one.
    """

    def __getattr__(self, key: str) -> Any:
        return getattr(get_settings(), key)


settings = LazySettingsWrapper()


def configure_logging(level: str) -> None:
    """Apply the standard log format at the given level.

    Handlers are only installed when the root logger has none, so an
    application embedding the library keeps its own setup.

    Args:
        level: Logging level name.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    else:
        root.setLevel(level)
    logger.debug(f"Logging configured at {level}")
