"""Custom exceptions for the Prompt Structurer.

Remote and storage failures are raised with enough context to be logged once
at the boundary that converts them into a fallback value.

Hierarchy
~~~~~~~~~
PromptStructurerError (base)
├── ConfigurationError
├── LLMServiceError
├── ResponseParseError
├── StorageError
└── InputValidationError
"""

from typing import Dict, Any, Optional
from datetime import datetime


class PromptStructurerError(Exception):
    """Base exception for all Prompt Structurer errors.

    Carries an error code, a timestamp and free-form details for logging.
    """

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR",
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize the exception with detailed context.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code for categorization
            details: Additional context information
            cause: Original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause
        self.timestamp = datetime.now()

    def __str__(self) -> str:
        """String representation including error code and timestamp."""
        return f"[{self.error_code}] {self.message} (at {self.timestamp.isoformat()})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
            "cause": str(self.cause) if self.cause else None
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.error_code!r}, message={self.message!r})"


class ConfigurationError(PromptStructurerError):
    """Raised when there's a configuration-related error.

    Common causes:
    - Missing Google API key
    - Invalid environment variables
    """

    def __init__(self, message: str, config_key: Optional[str] = None,
                 config_value: Optional[str] = None, cause: Optional[Exception] = None):
        """Initialize configuration error with config context."""
        error_code = "CONFIGURATION_ERROR"
        details = {
            "config_key": config_key,
            "config_value_preview": config_value[:20] + "..." if config_value and len(config_value) > 20 else config_value
        }
        super().__init__(message, error_code, details, cause)


class LLMServiceError(PromptStructurerError):
    """Raised when the call to the text-generation service fails.

    Common causes:
    - API rate limits
    - Network connectivity issues
    - Authentication failures
    - Model availability issues
    """

    def __init__(self, message: str, model: Optional[str] = None,
                 request_type: Optional[str] = None, cause: Optional[Exception] = None):
        """Initialize LLM service error with service context."""
        error_code = "LLM_SERVICE_ERROR"
        details = {
            "provider": "google",
            "model": model,
            "request_type": request_type,
        }
        super().__init__(message, error_code, details, cause)


class ResponseParseError(PromptStructurerError):
    """Raised when the service reply holds no usable JSON object."""

    def __init__(self, message: str, request_type: Optional[str] = None,
                 response_text: Optional[str] = None, cause: Optional[Exception] = None):
        error_code = "RESPONSE_PARSE_ERROR"
        details = {
            "request_type": request_type,
            "response_preview": response_text[:100] + "..." if response_text and len(response_text) > 100 else response_text
        }
        super().__init__(message, error_code, details, cause)


class StorageError(PromptStructurerError):
    """Raised when a persisted entry cannot be read or written."""

    def __init__(self, message: str, key: Optional[str] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, "STORAGE_ERROR", {"key": key}, cause)


class InputValidationError(PromptStructurerError):
    """Raised when user-supplied input fails validation.

    Common causes:
    - Empty or whitespace-only prompt
    - Blank template name
    """

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Optional[Any] = None, cause: Optional[Exception] = None):
        error_code = "VALIDATION_ERROR"
        details = {
            "field": field,
            "value_preview": str(value)[:80] if value is not None else None,
        }
        super().__init__(message, error_code, details, cause)
