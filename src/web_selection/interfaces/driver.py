"""
Driver Interface - Abstract base classes for the remote document boundary.

This module defines the contract that driver adapters (Selenium, Playwright, etc.)
must follow so that selections can resolve and act on remote elements.

Example:
    >>> from web_selection.drivers import SeleniumDriver
    >>> driver = SeleniumDriver(webdriver.Chrome())
    >>> elements = driver.get_elements("form input[name=email]")
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Point:
    """
    An offset inside an element, in CSS pixels.

    Attributes:
        x: Horizontal offset from the element's left edge
        y: Vertical offset from the element's top edge
    """
    x: int
    y: int


class IElement(ABC):
    """
    Abstract interface for one resolved remote element.

    Handles are ephemeral: they are obtained fresh by every selection
    operation and must not be cached between calls.
    """

    @abstractmethod
    def click(self) -> None:
        """Click on this element."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Clear the current value of this element."""
        ...

    @abstractmethod
    def set_value(self, text: str) -> None:
        """
        Enter text into this element.

        Args:
            text: The text to enter
        """
        ...

    @abstractmethod
    def submit(self) -> None:
        """Submit the form this element belongs to."""
        ...

    @abstractmethod
    def get_text(self) -> str:
        """
        Get the visible text of this element.

        Returns:
            The rendered text
        """
        ...

    @abstractmethod
    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get an attribute value from this element.

        Args:
            name: The attribute name

        Returns:
            The attribute value, or None if not present
        """
        ...

    @abstractmethod
    def get_css(self, property: str) -> str:
        """
        Get the computed value of a CSS property.

        Args:
            property: The CSS property name (e.g. 'background-color')

        Returns:
            The computed property value
        """
        ...

    @abstractmethod
    def is_selected(self) -> bool:
        """Check if this element (checkbox, radio, option) is selected."""
        ...

    @abstractmethod
    def is_displayed(self) -> bool:
        """Check if this element is displayed."""
        ...


class IDriver(ABC):
    """
    Abstract interface for the driver boundary.

    A driver resolves selector strings against the live document and
    performs pointer gestures that need context beyond a single element.
    Drivers are shared by every selection built from them and are never
    owned or closed by a selection.
    """

    @abstractmethod
    def get_elements(self, selector: str) -> List[IElement]:
        """
        Find all elements matching a selector.

        Args:
            selector: CSS selector evaluated against the whole document

        Returns:
            List of matching elements, in document order (may be empty)
        """
        ...

    @abstractmethod
    def move_to(self, element: IElement, point: Optional[Point] = None) -> None:
        """
        Move the pointer onto an element.

        Args:
            element: The element to move to
            point: Offset from the element's top-left corner, or None for its centre
        """
        ...

    @abstractmethod
    def double_click(self) -> None:
        """Double-click at the current pointer position."""
        ...
