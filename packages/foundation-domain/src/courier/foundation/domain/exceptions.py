"""Domain exception hierarchy for type-safe error handling.

This module provides the base exception hierarchy for configuration errors.
Exceptions include structured error codes and context for consistent
error reporting and logging.

Example:
    >>> from courier.foundation.domain.exceptions import ConfigKeyNotFoundError
    >>> raise ConfigKeyNotFoundError("index.limit")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConfigKeyNotFoundError",
    "DomainError",
    "NotFoundError",
    "UnsupportedConfigValueError",
    "ValidationError",
]


class DomainError(Exception):
    """Base class for all domain errors.

    Provides error code and structured context for debugging. All domain
    exceptions inherit from this class to enable consistent error
    handling and logging.

    Attributes:
        error_code: Machine-readable error code.
        message: Human-readable error description.
        context: Structured debugging information (keys, value kinds).

    Example:
        >>> raise DomainError("Operation failed", context={"key": "global.mode"})
        DomainError: Operation failed (key=global.mode)
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist.

    Attributes:
        error_code: "RESOURCE_NOT_FOUND" (class constant).
        resource_type: Type of missing resource.
        resource_id: Identifier of missing resource.
    """

    error_code: str = "RESOURCE_NOT_FOUND"

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        **extra_context: Any,
    ) -> None:
        """Initialize not found error.

        Args:
            resource_type: Type of resource (e.g., "ConfigKey").
            resource_id: Identifier of missing resource.
            **extra_context: Additional debugging context.
        """
        self.resource_type = resource_type
        self.resource_id = resource_id
        message = f"{resource_type} not found: {resource_id}"
        context = {
            "resource_type": resource_type,
            "resource_id": str(resource_id),
            **extra_context,
        }
        super().__init__(message, context)


class ConfigKeyNotFoundError(NotFoundError):
    """Raised by ``ConfigStore.require()`` when a key is not defined.

    ``ConfigStore.get()`` never raises; it returns None instead.

    Example:
        >>> raise ConfigKeyNotFoundError("cache.prefix")
        ConfigKeyNotFoundError: ConfigKey not found: cache.prefix
    """

    error_code: str = "CONFIG_KEY_NOT_FOUND"

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__("ConfigKey", key)


class ValidationError(DomainError):
    """Raised when input fails domain validation rules.

    Attributes:
        error_code: "VALIDATION_ERROR" (class constant).
        field: Field path that failed validation.
        reason: Human-readable validation failure reason.

    Example:
        >>> raise ValidationError("global.history", "must be an integer")
        ValidationError: Validation failed for 'global.history': must be an integer
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        field: str,
        reason: str,
        **extra_context: Any,
    ) -> None:
        """Initialize validation error.

        Args:
            field: Field path that failed validation. Supports dot notation
                   (e.g., "message.headers").
            reason: Human-readable validation failure reason.
            **extra_context: Additional debugging context.
        """
        self.field = field
        self.reason = reason
        message = f"Validation failed for '{field}': {reason}"
        context = {
            "field": field,
            "reason": reason,
            **extra_context,
        }
        super().__init__(message, context)


class UnsupportedConfigValueError(ValidationError):
    """Raised when a value is not a string, integer, or list of strings.

    Example:
        >>> raise UnsupportedConfigValueError("global.ratio", "unsupported value kind float")
    """

    error_code: str = "UNSUPPORTED_CONFIG_VALUE"
