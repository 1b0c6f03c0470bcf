"""Custom exceptions for the portfolio site with HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error logging."""

    # Generic errors
    PORTFOLIO_ERROR = "PORTFOLIO_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Startup errors
    STARTUP_ERROR = "STARTUP_ERROR"
    DATA_LOAD_ERROR = "DATA_LOAD_ERROR"
    TEMPLATE_PARSE_ERROR = "TEMPLATE_PARSE_ERROR"
    STATIC_FILES_ERROR = "STATIC_FILES_ERROR"

    # Request-time errors
    TEMPLATE_RENDER_ERROR = "TEMPLATE_RENDER_ERROR"
    CONTACT_FORM_INVALID = "CONTACT_FORM_INVALID"


class PortfolioException(Exception):
    """Base exception for portfolio errors with HTTP status code support.

    All custom exceptions inherit from this class so the exception handler
    can map them to a response in one place.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.PORTFOLIO_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize portfolio exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class StartupException(PortfolioException):
    """Errors that prevent the application from serving traffic."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.STARTUP_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, 500, details)


class DataLoadException(StartupException):
    """A fixture file is missing, unreadable or malformed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.DATA_LOAD_ERROR, details=details)


class TemplateLoadException(StartupException):
    """A template could not be parsed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.TEMPLATE_PARSE_ERROR, details=details)


class StaticFilesException(StartupException):
    """The static asset directory could not be mounted."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.STATIC_FILES_ERROR, details=details)


class TemplateRenderException(PortfolioException):
    """A template failed while rendering a response."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.TEMPLATE_RENDER_ERROR,
            status_code=500,
            details=details,
        )


class ContactFormException(PortfolioException):
    """The contact form body could not be parsed."""

    def __init__(self, message: str = "Invalid contact form body", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.CONTACT_FORM_INVALID,
            status_code=400,
            details=details,
        )
