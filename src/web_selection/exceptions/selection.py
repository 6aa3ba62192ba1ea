"""
Selection-related exceptions.

Every selection error carries the rendered selector path of the selection
that raised it, both in its message and as the ``selector`` attribute.
"""

from web_selection.exceptions.base import WebSelectionError


class SelectionError(WebSelectionError):
    """Base exception for selection errors."""

    def __init__(self, message: str, selector: str, details: dict | None = None):
        super().__init__(message, details)
        self.selector = selector


class ResolutionError(SelectionError):
    """
    The driver could not resolve the selector path.

    Raised when the driver boundary itself fails while evaluating the
    path (transport or protocol error). Never retried locally.
    """
    pass


class ElementNotFoundError(SelectionError):
    """
    No element matched a selector that must match exactly one.
    """
    pass


class MultipleElementsError(SelectionError):
    """
    More than one element matched a selector that must match exactly one.

    Callers are expected to narrow the selector rather than rely on
    the first match.
    """

    def __init__(self, message: str, selector: str, count: int):
        super().__init__(message, selector, {"count": count})
        self.count = count


class NotACheckboxError(SelectionError):
    """
    Check or uncheck was invoked on an element that is not a checkbox.

    Only elements whose ``type`` attribute is exactly ``"checkbox"`` qualify.
    """
    pass


class OptionNotFoundError(SelectionError):
    """
    No option with the requested text exists under the selector.
    """

    def __init__(self, message: str, selector: str, text: str):
        super().__init__(message, selector, {"text": text})
        self.text = text


class ElementActionError(SelectionError):
    """
    A primitive element or driver call failed.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, message: str, selector: str, operation: str):
        super().__init__(message, selector, {"operation": operation})
        self.operation = operation
