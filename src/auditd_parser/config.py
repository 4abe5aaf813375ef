"""Runtime settings for the command-line and web front ends.

Uses Pydantic ``BaseSettings`` so every value can be overridden with an
``AUDITD_PARSER_*`` environment variable or a local ``.env`` file::

    AUDITD_PARSER_RAW=true auditd-parser /var/log/audit/audit.log

The parser itself takes no settings; only the front ends read them.
"""

from functools import cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_LINE_LENGTH = 65536
DEFAULT_MAX_LOG_ENTRIES = 1000


class Settings(BaseSettings):
    """Settings loaded from the environment or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="AUDITD_PARSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_line_length: int = Field(
        default=DEFAULT_MAX_LINE_LENGTH,
        gt=0,
        description="Longest line accepted before parsing is attempted",
    )
    raw: bool = Field(
        default=False,
        description="Emit uninterpreted field values",
    )
    indent: int = Field(
        default=2,
        ge=0,
        description="JSON indent for single-record CLI output",
    )
    max_log_entries: int = Field(
        default=DEFAULT_MAX_LOG_ENTRIES,
        gt=0,
        description="Newest diagnostic entries the web app keeps",
    )


@cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first use."""
    return Settings()
