"""Core modules for Kapan.

Configuration, error types, and logging shared by the processing pipeline.
"""

from .config_manager import AppConfig, ConfigManager, LoggingConfig, ResolverConfig
from .error_handler import (
    KapanError,
    ConfigurationError,
    UnknownTimezoneError,
    InvalidDateTimeError,
    ErrorHandler,
    ErrorSeverity
)
from .logging_manager import LoggingManager

__all__ = [
    "AppConfig",
    "ConfigManager",
    "LoggingConfig",
    "ResolverConfig",
    "KapanError",
    "ConfigurationError",
    "UnknownTimezoneError",
    "InvalidDateTimeError",
    "ErrorHandler",
    "ErrorSeverity",
    "LoggingManager"
]
