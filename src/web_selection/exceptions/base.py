"""
Base exceptions for web-selection.
"""


class WebSelectionError(Exception):
    """
    Base exception for all web-selection errors.

    All custom exceptions inherit from this class, making it easy
    to catch any error from the library.

    Attributes:
        message: Human-readable error message
        details: Optional additional error details
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(WebSelectionError):
    """
    Error in configuration.

    Raised when there's an issue with settings, environment variables,
    or configuration files, such as an unknown driver engine.
    """
    pass


class DriverError(WebSelectionError):
    """
    Error raised by a driver adapter.

    Raised when the underlying automation library fails to perform
    a boundary call (transport, protocol or stale element failures).
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message, {"operation": operation} if operation else None)
        self.operation = operation
