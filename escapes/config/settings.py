"""Configuration management for the escape codec."""

from dataclasses import dataclass
from typing import Optional
import logging
import os

from dotenv import find_dotenv, load_dotenv

from escapes.constants import ERRORS_KEEP, ERROR_POLICIES
from escapes.utils.exceptions import ConfigurationError


def load_env_file() -> str:
    """
    Load the .env file nearest the working directory into os.environ.

    Variables already set in the environment are not overridden.

    Returns:
        Path of the loaded file, or an empty string if none was found
    """
    env_path = find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(dotenv_path=env_path, override=False)
    return env_path


# This is called at module import time to ensure env vars are available
load_env_file()


@dataclass
class CodecConfig:
    """Configuration for UnicodeEscapeCodec."""

    errors: str = ERRORS_KEEP

    def validate(self) -> None:
        """Validate codec configuration parameters."""
        if self.errors not in ERROR_POLICIES:
            raise ConfigurationError(
                f"Unknown errors policy {self.errors!r}, "
                f"expected one of: {', '.join(ERROR_POLICIES)}"
            )


@dataclass
class LoggingConfig:
    """Configuration for application logging."""

    level: str = "INFO"

    def validate(self) -> None:
        """Validate logging configuration parameters."""
        if not isinstance(getattr(logging, self.level.upper(), None), int):
            raise ConfigurationError(f"Invalid log level: {self.level}")


class Config:
    """Main configuration loader and manager."""

    def __init__(self):
        """Initialize configuration manager."""
        self.codec: Optional[CodecConfig] = None
        self.logging: Optional[LoggingConfig] = None

    def load_codec_config(self) -> CodecConfig:
        """
        Load codec configuration from environment variables.

        Environment variables:
            ESCAPES_ERRORS: Policy for malformed escapes, keep or strict
                            (default: keep)

        Returns:
            Validated CodecConfig instance

        Raises:
            ConfigurationError: If configuration is invalid
        """
        config = CodecConfig(
            errors=os.getenv('ESCAPES_ERRORS', ERRORS_KEEP).strip().lower(),
        )
        config.validate()
        self.codec = config
        return config

    def load_logging_config(self) -> LoggingConfig:
        """
        Load logging configuration from environment variables.

        Environment variables:
            LOG_LEVEL: Logging level (default: INFO)

        Returns:
            Validated LoggingConfig instance

        Raises:
            ConfigurationError: If configuration is invalid
        """
        config = LoggingConfig(level=os.getenv('LOG_LEVEL', 'INFO'))
        config.validate()
        self.logging = config
        return config
