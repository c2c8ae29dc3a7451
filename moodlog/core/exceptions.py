"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when validation fails."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class ArgumentValidationError(ValidationError):
    """Raised when the title or mood arguments are missing or empty."""


class ConfigurationError(ApplicationError):
    """Raised when a required setting or secret is missing."""

    def __init__(self, message: str = "Configuration error") -> None:
        super().__init__(message, code="SYS_CONFIGURATION_ERROR")


class ExternalServiceError(ApplicationError):
    """Raised when an external service call fails."""

    def __init__(self, message: str = "External service error", code: str = "SYS_EXTERNAL_SERVICE_ERROR") -> None:
        super().__init__(message, code=code)


class NotionAPIError(ExternalServiceError):
    """
    Raised when the Notion API rejects a request or returns an unusable body.

    The message carries the HTTP status and the API's own error text,
    e.g. "HTTP Error 400: Invalid request".
    """

    def __init__(self, message: str = "Notion API error", status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message, code="EXT_NOTION_API_ERROR")
