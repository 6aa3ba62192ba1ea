"""
Exceptions module - Custom exception hierarchy.

This module defines all custom exceptions used by web-selection,
providing clear error types for different failure scenarios.
"""

from web_selection.exceptions.base import (
    WebSelectionError,
    ConfigurationError,
    DriverError,
)
from web_selection.exceptions.selection import (
    SelectionError,
    ResolutionError,
    ElementNotFoundError,
    MultipleElementsError,
    NotACheckboxError,
    OptionNotFoundError,
    ElementActionError,
)

__all__ = [
    # Base exceptions
    "WebSelectionError",
    "ConfigurationError",
    "DriverError",
    # Selection exceptions
    "SelectionError",
    "ResolutionError",
    "ElementNotFoundError",
    "MultipleElementsError",
    "NotACheckboxError",
    "OptionNotFoundError",
    "ElementActionError",
]
