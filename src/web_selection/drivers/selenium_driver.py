"""
Selenium Driver - Implementation of IDriver using Selenium WebDriver.

This module adapts an already running Selenium ``WebDriver`` to the driver
boundary. The adapter never starts or quits the browser; session lifecycle
stays with the caller.
"""

from contextlib import contextmanager
from typing import Any, Iterator, List, Optional
import logging

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.by import By

from web_selection.interfaces.driver import IDriver, IElement, Point
from web_selection.exceptions.base import DriverError

logger = logging.getLogger(__name__)


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    """Re-raise Selenium failures as DriverError."""
    try:
        yield
    except WebDriverException as e:
        raise DriverError(f"selenium {operation} failed: {e.msg or e}", operation) from e


class SeleniumElement(IElement):
    """
    Selenium implementation of IElement.

    Wraps a Selenium WebElement.
    """

    def __init__(self, element: Any):
        """
        Initialize the element wrapper.

        Args:
            element: Selenium WebElement
        """
        self._element = element

    @property
    def native(self) -> Any:
        """The wrapped WebElement."""
        return self._element

    def click(self) -> None:
        with _translate_errors("click"):
            self._element.click()

    def clear(self) -> None:
        with _translate_errors("clear"):
            self._element.clear()

    def set_value(self, text: str) -> None:
        with _translate_errors("send_keys"):
            self._element.send_keys(text)

    def submit(self) -> None:
        with _translate_errors("submit"):
            self._element.submit()

    def get_text(self) -> str:
        with _translate_errors("text"):
            return self._element.text

    def get_attribute(self, name: str) -> Optional[str]:
        with _translate_errors("get_attribute"):
            return self._element.get_attribute(name)

    def get_css(self, property: str) -> str:
        with _translate_errors("value_of_css_property"):
            return self._element.value_of_css_property(property)

    def is_selected(self) -> bool:
        with _translate_errors("is_selected"):
            return self._element.is_selected()

    def is_displayed(self) -> bool:
        with _translate_errors("is_displayed"):
            return self._element.is_displayed()


class SeleniumDriver(IDriver):
    """
    Selenium implementation of IDriver.

    Selectors are evaluated as CSS selectors against the current document.

    Example:
        >>> from selenium import webdriver
        >>> driver = SeleniumDriver(webdriver.Chrome())
        >>> page = Page(driver)
        >>> page.find("#login").find("button").click()
    """

    def __init__(self, webdriver: Any):
        """
        Initialize the driver adapter.

        Args:
            webdriver: A running Selenium WebDriver (shared, not owned)
        """
        self._webdriver = webdriver

    @property
    def webdriver(self) -> Any:
        """The wrapped WebDriver."""
        return self._webdriver

    def get_elements(self, selector: str) -> List[IElement]:
        with _translate_errors("find_elements"):
            elements = self._webdriver.find_elements(By.CSS_SELECTOR, selector)
        logger.debug(f"'{selector}' matched {len(elements)} element(s)")
        return [SeleniumElement(element) for element in elements]

    def move_to(self, element: IElement, point: Optional[Point] = None) -> None:
        if not isinstance(element, SeleniumElement):
            raise DriverError(
                f"cannot move to {type(element).__name__}: not a Selenium element",
                "move_to",
            )

        native = element.native
        with _translate_errors("move_to"):
            actions = ActionChains(self._webdriver)
            if point is None:
                actions.move_to_element(native)
            else:
                # Selenium offsets are relative to the element's centre
                size = native.size
                actions.move_to_element_with_offset(
                    native,
                    point.x - size["width"] // 2,
                    point.y - size["height"] // 2,
                )
            actions.perform()

    def double_click(self) -> None:
        with _translate_errors("double_click"):
            ActionChains(self._webdriver).double_click().perform()
