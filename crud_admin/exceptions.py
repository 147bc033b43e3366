"""Custom exceptions for CRUD Admin with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    ADMIN_ERROR = "ADMIN_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Template errors
    TEMPLATE_ERROR = "TEMPLATE_ERROR"
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"

    # Resource errors
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    # Property type errors
    PROPERTY_TYPE_ERROR = "PROPERTY_TYPE_ERROR"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_INVALID = "CONFIG_INVALID"


class AdminException(Exception):
    """Base exception for admin errors with HTTP status code support.

    All custom exceptions should inherit from this class to ensure
    consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ADMIN_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize admin exception.

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


class TemplateRenderException(AdminException):
    """Template lookup or rendering failed."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.TEMPLATE_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class ResourceNotFoundException(AdminException):
    """No resource is registered under the requested id."""

    def __init__(self, resource_id: str):
        super().__init__(
            f"Resource not found: {resource_id}",
            code=ErrorCode.RESOURCE_NOT_FOUND,
            status_code=404,
            details={"resource_id": resource_id},
        )


class PropertyTypeException(AdminException):
    """Property type registration errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.PROPERTY_TYPE_ERROR,
            status_code=500,
            details=details,
        )


class ConfigurationException(AdminException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)
