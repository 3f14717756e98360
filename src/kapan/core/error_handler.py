"""Error Handling for Kapan

Exception hierarchy and a small handler that maps failures to log levels
and to the kind of reply a calling service should send.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Optional, Type


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class KapanError(Exception):
    """Base exception class for Kapan."""

    def __init__(self, message: str, severity: ErrorSeverity = ErrorSeverity.MEDIUM):
        self.message = message
        self.severity = severity
        super().__init__(self.message)


class ConfigurationError(KapanError):
    """Error raised when configuration is invalid."""
    pass


class UnknownTimezoneError(ConfigurationError):
    """Error raised when a timezone identifier cannot be resolved."""

    def __init__(self, zone: str):
        self.zone = zone
        super().__init__(f"Unknown timezone: {zone!r}", ErrorSeverity.MEDIUM)


class InvalidDateTimeError(KapanError, ValueError):
    """Error raised when a civil date or time string is malformed.

    Resolver output is always well formed, so this signals a caller that
    bypassed the resolver.
    """

    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid {field} {value!r}: {reason}",
            ErrorSeverity.LOW
        )


class ErrorHandler:
    """Logs Kapan errors and classifies them for the calling layer."""

    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize error handler.

        Args:
            logger: Logger to report through (defaults to this module's logger)
        """
        self.logger = logger or logging.getLogger(__name__)
        self.error_callbacks: Dict[Type[Exception], Callable[[Exception], None]] = {}

    def register_error_callback(self, exception_type: Type[Exception],
                                callback: Callable[[Exception], None]):
        """Register a callback for specific exception types.

        Args:
            exception_type: The exception type to handle
            callback: Function to call when this exception occurs
        """
        self.error_callbacks[exception_type] = callback

    def handle_error(self, error: Exception, context: Optional[str] = None) -> str:
        """Log an error and tell the caller how to answer it.

        Args:
            error: The exception that occurred
            context: Additional context about where the error occurred

        Returns:
            ``CLIENT_ERROR`` for contract violations caused by the request,
            ``SERVER_ERROR`` for everything else
        """
        severity = self.get_error_severity(error)
        message = self._format_error_message(error, context)
        self._log_error(message, severity)

        for exception_type, callback in self.error_callbacks.items():
            if isinstance(error, exception_type):
                callback(error)

        return self.classify(error)

    def classify(self, error: Exception) -> str:
        """Classify an error as client or server side.

        Args:
            error: The exception to classify

        Returns:
            ``CLIENT_ERROR`` or ``SERVER_ERROR``
        """
        if isinstance(error, InvalidDateTimeError):
            return self.CLIENT_ERROR
        if isinstance(error, KapanError) and error.severity == ErrorSeverity.LOW:
            return self.CLIENT_ERROR
        return self.SERVER_ERROR

    def get_error_severity(self, error: Exception) -> ErrorSeverity:
        """Determine error severity based on exception type.

        Args:
            error: The exception to analyze

        Returns:
            Appropriate severity level
        """
        if isinstance(error, KapanError):
            return error.severity

        severity_map = {
            ValueError: ErrorSeverity.LOW,
            TypeError: ErrorSeverity.MEDIUM,
            LookupError: ErrorSeverity.MEDIUM,
            MemoryError: ErrorSeverity.CRITICAL,
        }

        for exception_type, severity in severity_map.items():
            if isinstance(error, exception_type):
                return severity
        return ErrorSeverity.HIGH

    def _format_error_message(self, error: Exception, context: Optional[str] = None) -> str:
        message = str(error)
        if context:
            message = f"{context}: {message}"
        return message

    def _log_error(self, message: str, severity: ErrorSeverity):
        log_methods = {
            ErrorSeverity.LOW: self.logger.info,
            ErrorSeverity.MEDIUM: self.logger.warning,
            ErrorSeverity.HIGH: self.logger.error,
            ErrorSeverity.CRITICAL: self.logger.critical,
        }

        log_methods[severity](message)
