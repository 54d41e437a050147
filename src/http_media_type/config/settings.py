"""Configuration settings for the http-media-type command line tool.

Settings are loaded from environment variables prefixed with
``MEDIA_TYPE_`` and from a ``.env`` file. The parser itself takes no
configuration; these only affect the CLI's output and logging.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    :param log_level: Logging level for the CLI
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    :param output_format: Default output format of the CLI
    :type output_format: Literal["text", "json"]
    :param json_indent: Indentation for JSON output, compact when None
    :type json_indent: Optional[int]
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIA_TYPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unrelated keys in .env file
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "WARNING", description="Logging level"
    )
    output_format: Literal["text", "json"] = Field(
        "text", description="Default CLI output format"
    )
    json_indent: Optional[int] = Field(
        None, ge=0, description="Indentation for JSON output"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case.

        :param v: Raw value from the environment
        :return: Upper-cased level name
        """
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("output_format", mode="before")
    @classmethod
    def normalize_output_format(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


def get_settings() -> Settings:
    """Load settings from the current environment.

    A fresh instance is built on every call so that environment changes
    (for example in tests) are picked up.
    """
    return Settings()
