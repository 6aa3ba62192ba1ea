"""
Selection - Chainable, lazily resolved element queries.

A Selection is an immutable value holding an ordered list of selector
fragments and a reference to the driver that resolves them. Nothing is
looked up when a selection is built; every operation resolves the full
path against the live document at call time.

Example:
    >>> form = Selection(driver, "#signup")
    >>> form.find("input[name=email]").fill("me@example.com")
    >>> form.find("select.country").select("Norway")
    >>> form.find("input[type=checkbox]").check()
    >>> form.submit()
"""

from typing import Any, Callable, List, Tuple, TypeVar
import logging

from web_selection.interfaces.driver import IDriver, IElement
from web_selection.exceptions.selection import (
    ElementActionError,
    ElementNotFoundError,
    MultipleElementsError,
    NotACheckboxError,
    OptionNotFoundError,
    ResolutionError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

OPTION_SELECTOR = "option"
CHECKBOX_TYPE = "checkbox"


class Selection:
    """
    Immutable chain of selector fragments bound to a driver.

    The rendered path is the fragments joined by single spaces, which makes
    each appended fragment a descendant of the previous ones. Operations that
    act on one element require the path to match exactly one element.
    """

    __slots__ = ("_driver", "_fragments")

    def __init__(self, driver: IDriver, selector: str):
        """
        Create a root selection.

        Args:
            driver: Driver used to resolve the selection (shared, not owned)
            selector: The first selector fragment

        Raises:
            ValueError: If selector is empty
        """
        self._driver = driver
        self._fragments: Tuple[str, ...] = (self._validate(selector),)

    @staticmethod
    def _validate(selector: str) -> str:
        if not selector or not selector.strip():
            raise ValueError("Selector cannot be empty")
        return selector

    @classmethod
    def _from_fragments(cls, driver: IDriver, fragments: Tuple[str, ...]) -> "Selection":
        selection = cls.__new__(cls)
        selection._driver = driver
        selection._fragments = fragments
        return selection

    # ==================== Chaining ====================

    @property
    def driver(self) -> IDriver:
        """The driver this selection resolves against."""
        return self._driver

    @property
    def fragments(self) -> Tuple[str, ...]:
        """The selector fragments, in the order they were added."""
        return self._fragments

    @property
    def selector(self) -> str:
        """The rendered selector path."""
        return " ".join(self._fragments)

    def find(self, selector: str) -> "Selection":
        """
        Narrow this selection to descendants matching a selector.

        The receiver is left untouched.

        Args:
            selector: Selector fragment to append

        Returns:
            A new Selection sharing this selection's driver
        """
        return Selection._from_fragments(
            self._driver,
            self._fragments + (self._validate(selector),),
        )

    # ==================== Resolution ====================

    def count(self) -> int:
        """
        Count the elements currently matching this selection.

        Returns:
            Number of matching elements (zero is not an error)

        Raises:
            ResolutionError: If the driver fails to resolve the path
        """
        selector = self.selector
        try:
            elements = self._driver.get_elements(selector)
        except Exception as e:
            logger.debug(f"Resolution failed for '{selector}': {e}")
            raise ResolutionError(
                f"failed to retrieve elements for selector '{selector}': {e}",
                selector,
            ) from e
        return len(elements)

    def _get_single_element(self) -> IElement:
        selector = self.selector
        prefix = f"failed to retrieve element with selector '{selector}'"

        try:
            elements = self._driver.get_elements(selector)
        except Exception as e:
            logger.debug(f"Resolution failed for '{selector}': {e}")
            raise ResolutionError(f"{prefix}: {e}", selector) from e

        if len(elements) > 1:
            raise MultipleElementsError(
                f"{prefix}: multiple elements ({len(elements)}) were selected",
                selector,
                count=len(elements),
            )
        if not elements:
            raise ElementNotFoundError(f"{prefix}: no element found", selector)

        logger.debug(f"Resolved '{selector}' to a single element")
        return elements[0]

    def _invoke(
        self,
        operation: str,
        message: str,
        func: Callable[..., T],
        *args: Any,
    ) -> T:
        """Run a primitive call, wrapping any failure with the selector path."""
        try:
            return func(*args)
        except Exception as e:
            logger.debug(f"{operation} failed for '{self.selector}': {e}")
            raise ElementActionError(f"{message}: {e}", self.selector, operation) from e

    # ==================== Actions ====================

    def click(self) -> None:
        """Click the single element matching this selection."""
        element = self._get_single_element()
        logger.debug(f"Clicking '{self.selector}'")
        self._invoke(
            "click",
            f"failed to click on selector '{self.selector}'",
            element.click,
        )

    def double_click(self) -> None:
        """
        Double-click the single element matching this selection.

        The pointer is moved to the element's centre first; the double-click
        is only issued if that move succeeds.
        """
        element = self._get_single_element()
        logger.debug(f"Double-clicking '{self.selector}'")
        self._invoke(
            "move_to",
            f"failed to move mouse to selector '{self.selector}'",
            self._driver.move_to,
            element,
            None,
        )
        self._invoke(
            "double_click",
            f"failed to double-click on selector '{self.selector}'",
            self._driver.double_click,
        )

    def fill(self, text: str) -> None:
        """
        Replace the value of the single element matching this selection.

        Args:
            text: Text to enter after clearing the current value
        """
        element = self._get_single_element()
        logger.debug(f"Filling '{self.selector}'")
        self._invoke("clear", f"failed to clear selector '{self.selector}'", element.clear)
        self._invoke(
            "set_value",
            f"failed to enter text into selector '{self.selector}'",
            element.set_value,
            text,
        )

    def check(self) -> None:
        """Ensure the checkbox matching this selection is checked."""
        self._set_checked(True)

    def uncheck(self) -> None:
        """Ensure the checkbox matching this selection is unchecked."""
        self._set_checked(False)

    def _set_checked(self, checked: bool) -> None:
        element = self._get_single_element()
        selector = self.selector

        element_type = self._invoke(
            "get_attribute",
            f"failed to retrieve type of selector '{selector}'",
            element.get_attribute,
            "type",
        )
        if element_type != CHECKBOX_TYPE:
            raise NotACheckboxError(
                f"selector '{selector}' does not refer to a checkbox",
                selector,
            )

        selected = self._invoke(
            "is_selected",
            f"failed to retrieve state of selector '{selector}'",
            element.is_selected,
        )

        # Checkboxes are toggled, never set directly
        if selected != checked:
            logger.debug(f"Toggling '{selector}' to checked={checked}")
            self._invoke("click", f"failed to click selector '{selector}'", element.click)

    def select(self, text: str) -> None:
        """
        Click the first option under this selection whose text equals ``text``.

        Any number of elements may match the selection itself; all of their
        option descendants are scanned in document order.

        Args:
            text: Exact option text to select

        Raises:
            OptionNotFoundError: If no option has the given text
        """
        selector = self.selector
        try:
            options: List[IElement] = self._driver.get_elements(
                f"{selector} {OPTION_SELECTOR}"
            )
        except Exception as e:
            logger.debug(f"Option resolution failed for '{selector}': {e}")
            raise ResolutionError(
                f"failed to retrieve options for selector '{selector}': {e}",
                selector,
            ) from e

        for option in options:
            option_text = self._invoke(
                "get_text",
                f"failed to retrieve option text for selector '{selector}'",
                option.get_text,
            )
            if option_text == text:
                logger.debug(f'Selecting option "{text}" for \'{selector}\'')
                self._invoke(
                    "click",
                    f'failed to click on option with text "{option_text}" '
                    f"for selector '{selector}'",
                    option.click,
                )
                return

        raise OptionNotFoundError(
            f"no options with text \"{text}\" found for selector '{selector}'",
            selector,
            text=text,
        )

    def submit(self) -> None:
        """Submit the form containing the single element matching this selection."""
        element = self._get_single_element()
        logger.debug(f"Submitting '{self.selector}'")
        self._invoke("submit", f"failed to submit selector '{self.selector}'", element.submit)

    # ==================== Reads ====================

    def text(self) -> str:
        """Get the visible text of the single matching element."""
        element = self._get_single_element()
        return self._invoke(
            "get_text",
            f"failed to retrieve text for selector '{self.selector}'",
            element.get_text,
        )

    def attribute(self, name: str) -> str:
        """
        Get an attribute of the single matching element.

        Args:
            name: Attribute name

        Returns:
            The attribute value, or an empty string if the element has no such attribute
        """
        element = self._get_single_element()
        value = self._invoke(
            "get_attribute",
            f"failed to retrieve attribute value for selector '{self.selector}'",
            element.get_attribute,
            name,
        )
        return "" if value is None else value

    def css(self, property: str) -> str:
        """
        Get a computed CSS property of the single matching element.

        Args:
            property: CSS property name
        """
        element = self._get_single_element()
        return self._invoke(
            "get_css",
            f"failed to retrieve CSS property for selector '{self.selector}'",
            element.get_css,
            property,
        )

    def selected(self) -> bool:
        """Check whether the single matching element is selected."""
        element = self._get_single_element()
        return self._invoke(
            "is_selected",
            f"failed to determine whether selector '{self.selector}' is selected",
            element.is_selected,
        )

    def visible(self) -> bool:
        """Check whether the single matching element is displayed."""
        element = self._get_single_element()
        return self._invoke(
            "is_displayed",
            f"failed to determine whether selector '{self.selector}' is visible",
            element.is_displayed,
        )

    # ==================== Value semantics ====================

    def __str__(self) -> str:
        return self.selector

    def __repr__(self) -> str:
        return f"Selection({self.selector!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selection):
            return NotImplemented
        return self._driver is other._driver and self._fragments == other._fragments

    def __hash__(self) -> int:
        return hash((id(self._driver), self._fragments))
