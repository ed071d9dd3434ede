"""UXID configuration using Pydantic Settings.

Values can be provided via environment variables or fall back to the
defaults below. A ``Settings`` instance is intended to be retrieved via
``get_settings`` which caches the object for reuse across the process.

Environment variable prefix: ``UXID_`` (e.g. ``UXID_DEFAULT_RAND_SIZE``).
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from uxid.constants import DEFAULT_RAND_SIZE
from uxid.enums import Size


class Settings(BaseSettings):
    """Runtime settings for UXID generation.

    Attributes map directly to environment variables using the ``UXID_``
    prefix (case-insensitive). For example, ``default_size`` <- ``UXID_DEFAULT_SIZE``.
    """

    default_rand_size: int = Field(
        default=DEFAULT_RAND_SIZE,
        gt=0,
        description="Random bytes used when neither rand_size nor size is given",
    )  # fmt: skip
    default_size: Size | None = Field(
        default=None,
        description="Size preset used when neither rand_size nor size is given; overrides default_rand_size",
    )  # fmt: skip
    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level used by setup_logging and the CLI",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str:
        """Normalize and validate log level."""
        if v is None:
            return "INFO"

        v_upper = str(v).upper()

        allowed = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR"}
        if v_upper not in allowed:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(sorted(allowed))}")

        return v_upper

    @field_validator("default_size", mode="before")
    @classmethod
    def validate_default_size(cls, v: str | Size | None) -> Size | None:
        """Accept preset aliases such as ``xs`` or ``XL``; empty means unset."""
        if v is None or v == "":
            return None
        return Size(v)

    model_config = SettingsConfigDict(
        env_prefix="UXID_",
        case_sensitive=False,
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached ``Settings`` instance.

    The first invocation reads environment variables / .env file; subsequent
    calls reuse the same object.
    """

    return Settings()


__all__ = ["Settings", "get_settings"]
