"""
Error management for the outcomes package.

Domain failures (an absent value, an invalid name or age) are never raised:
they travel as ``Nothing`` / ``Left`` values. The exceptions defined here are
reserved for programming errors, such as extracting a value from the wrong
variant or handing a consumer a variant it does not know about.
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional

# Configure module logger
logger = logging.getLogger("outcomes.errors")


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    CRITICAL = "CRITICAL"  # Application cannot continue
    ERROR = "ERROR"  # Operation failed, but application can continue
    WARNING = "WARNING"  # Potentially problematic situation


class ErrorCode(Enum):
    """
    Standard error codes for the outcomes package.

    Format: CATEGORY_DESCRIPTION
    """

    # Configuration errors
    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_FILE_ERROR = "CONFIG_FILE_ERROR"

    # Variant errors
    VARIANT_UNWRAP_FAILED = "VARIANT_UNWRAP_FAILED"
    VARIANT_UNMATCHED = "VARIANT_UNMATCHED"

    # General errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class OutcomesError(Exception):
    """
    Base exception class for the outcomes package.

    Carries an error code, a severity and optional details, and logs itself
    on construction.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        cause: Optional[Exception] = None,
        **details,
    ):
        """
        Initialize an OutcomesError.

        Args:
            message: Error message
            code: Error code
            severity: Error severity level
            cause: Original exception that caused this error
            **details: Additional information attached to the error
        """
        self.message = message
        self.code = code
        self.severity = severity
        self.cause = cause
        self.details: Dict[str, Any] = dict(details)

        full_message = f"{code.value}: {message}"
        if cause:
            full_message += f" (Caused by: {type(cause).__name__}: {str(cause)})"

        super().__init__(full_message)

        self._log_error()

    def _log_error(self):
        """Log the error based on its severity."""
        log_message = self._format_for_logging()

        if self.severity == ErrorSeverity.CRITICAL:
            logger.critical(log_message)
        elif self.severity == ErrorSeverity.ERROR:
            logger.error(log_message)
        else:
            logger.warning(log_message)

    def _format_for_logging(self) -> str:
        """Format the error for logging."""
        parts = [f"ERROR [{self.code.value}] ({self.severity.value}): {self.message}"]

        if self.details:
            parts.append("Details:")
            for key, value in self.details.items():
                parts.append(f"  {key}: {value}")

        if self.cause:
            parts.append(f"Caused by: {type(self.cause).__name__}: {str(self.cause)}")

        return "\n".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a dictionary for serialization."""
        result = {
            "code": self.code.value,
            "message": self.message,
            "severity": self.severity.value,
        }

        if self.details:
            result["details"] = self.details

        if self.cause:
            result["cause"] = {
                "type": type(self.cause).__name__,
                "message": str(self.cause),
            }

        return result


class ConfigurationError(OutcomesError):
    """Error related to configuration."""

    def __init__(
        self, message: str, code: ErrorCode = ErrorCode.CONFIG_INVALID, **kwargs
    ):
        super().__init__(message, code=code, severity=ErrorSeverity.ERROR, **kwargs)


class UnwrapError(OutcomesError):
    """A value was extracted from a variant that does not hold one."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message,
            code=ErrorCode.VARIANT_UNWRAP_FAILED,
            severity=ErrorSeverity.ERROR,
            **kwargs,
        )


class UnmatchedVariantError(OutcomesError):
    """A closed set of variants was handed a value outside the set."""

    def __init__(self, value: Any, expected: str, **kwargs):
        super().__init__(
            f"Unmatched variant {value!r}, expected {expected}",
            code=ErrorCode.VARIANT_UNMATCHED,
            severity=ErrorSeverity.CRITICAL,
            value_type=type(value).__name__,
            **kwargs,
        )
