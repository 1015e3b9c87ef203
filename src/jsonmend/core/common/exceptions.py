"""
Common exception classes for jsonmend.

This module defines the exception hierarchy used throughout the package.
Repair failures are terminal: a call either yields usable JSON text or one
of the errors below.
"""

from __future__ import annotations


class JsonMendError(Exception):
    """Base exception class for all jsonmend errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        for attr_name in dir(self):
            if (
                not attr_name.startswith("_")
                and attr_name not in ["message", "details", "args"]
                and not callable(getattr(self, attr_name))
            ):
                error_dict[attr_name] = getattr(self, attr_name)

        return {"error": error_dict}


class ConfigurationError(JsonMendError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)


class JsonRepairError(JsonMendError):
    """Raised when input text cannot be turned into valid JSON."""

    def __init__(
        self, message: str = "Unable to repair JSON", details: dict | None = None, **kwargs
    ):
        super().__init__(message, details, **kwargs)


class EmptyInputError(JsonRepairError):
    """Raised when the input has no non-whitespace content."""

    def __init__(
        self, message: str = "Empty input", details: dict | None = None, **kwargs
    ):
        super().__init__(message, details, **kwargs)


class UnrepairableInputError(JsonRepairError):
    """Raised when every correction ran but the result still fails to parse."""

    def __init__(
        self,
        detail: str,
        message: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(
            message or f"Unable to repair JSON: {detail}", details, **kwargs
        )
        self.detail = detail


class DocumentLoadError(JsonMendError):
    """Raised when a document cannot be read, repaired or parsed."""

    def __init__(
        self,
        message: str = "Unable to load document",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)
