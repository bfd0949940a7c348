"""Configuration module for managing codec settings."""

from escapes.config.settings import (
    CodecConfig,
    LoggingConfig,
    Config,
    load_env_file,
)

__all__ = [
    'CodecConfig',
    'LoggingConfig',
    'Config',
    'load_env_file',
]
