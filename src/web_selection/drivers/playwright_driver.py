"""
Playwright Driver - Implementation of IDriver using the Playwright sync API.

This module adapts a Playwright ``Page`` (from ``playwright.sync_api``) to the
driver boundary. The adapter does not launch browsers or close pages.
"""

from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Tuple
import logging

from playwright.sync_api import Error as PlaywrightError

from web_selection.interfaces.driver import IDriver, IElement, Point
from web_selection.exceptions.base import DriverError

logger = logging.getLogger(__name__)

_SUBMIT_SCRIPT = """el => {
    const form = el.tagName === 'FORM' ? el : el.form;
    if (!form) {
        throw new Error('element is not part of a form');
    }
    form.submit();
}"""

_CSS_SCRIPT = "(el, prop) => getComputedStyle(el).getPropertyValue(prop)"

_SELECTED_SCRIPT = "el => Boolean(el.checked || el.selected)"


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    """Re-raise Playwright failures as DriverError."""
    try:
        yield
    except PlaywrightError as e:
        raise DriverError(f"playwright {operation} failed: {e.message}", operation) from e


class PlaywrightElement(IElement):
    """
    Playwright implementation of IElement.

    Wraps a Playwright ElementHandle together with its page, which is
    needed for keyboard input.
    """

    def __init__(self, element: Any, page: Any):
        """
        Initialize the element wrapper.

        Args:
            element: Playwright ElementHandle
            page: The Playwright Page the element belongs to
        """
        self._element = element
        self._page = page

    @property
    def native(self) -> Any:
        """The wrapped ElementHandle."""
        return self._element

    def click(self) -> None:
        with _translate_errors("click"):
            self._element.click()

    def clear(self) -> None:
        with _translate_errors("fill"):
            self._element.fill("")

    def set_value(self, text: str) -> None:
        # Typed rather than filled so that text is appended like a keyboard would
        with _translate_errors("type"):
            self._element.focus()
            self._page.keyboard.type(text)

    def submit(self) -> None:
        with _translate_errors("submit"):
            self._element.evaluate(_SUBMIT_SCRIPT)

    def get_text(self) -> str:
        with _translate_errors("inner_text"):
            return self._element.inner_text()

    def get_attribute(self, name: str) -> Optional[str]:
        with _translate_errors("get_attribute"):
            return self._element.get_attribute(name)

    def get_css(self, property: str) -> str:
        with _translate_errors("computed_style"):
            return self._element.evaluate(_CSS_SCRIPT, property)

    def is_selected(self) -> bool:
        with _translate_errors("is_selected"):
            return self._element.evaluate(_SELECTED_SCRIPT)

    def is_displayed(self) -> bool:
        with _translate_errors("is_visible"):
            return self._element.is_visible()


class PlaywrightDriver(IDriver):
    """
    Playwright implementation of IDriver.

    Playwright has no "double-click where the pointer is" call, so the
    adapter remembers the last position it moved the mouse to.

    Example:
        >>> from playwright.sync_api import sync_playwright
        >>> with sync_playwright() as p:
        ...     page = p.chromium.launch().new_page()
        ...     driver = PlaywrightDriver(page)
    """

    def __init__(self, page: Any):
        """
        Initialize the driver adapter.

        Args:
            page: A Playwright sync-API Page (shared, not owned)
        """
        self._page = page
        self._pointer: Tuple[float, float] = (0.0, 0.0)

    @property
    def page(self) -> Any:
        """The wrapped Playwright page."""
        return self._page

    @property
    def pointer(self) -> Tuple[float, float]:
        """Last known pointer position in page coordinates."""
        return self._pointer

    def get_elements(self, selector: str) -> List[IElement]:
        with _translate_errors("query_selector_all"):
            handles = self._page.query_selector_all(selector)
        logger.debug(f"'{selector}' matched {len(handles)} element(s)")
        return [PlaywrightElement(handle, self._page) for handle in handles]

    def move_to(self, element: IElement, point: Optional[Point] = None) -> None:
        if not isinstance(element, PlaywrightElement):
            raise DriverError(
                f"cannot move to {type(element).__name__}: not a Playwright element",
                "move_to",
            )

        with _translate_errors("move_to"):
            box = element.native.bounding_box()
            if box is None:
                raise DriverError("element has no bounding box (not visible)", "move_to")

            if point is None:
                x = box["x"] + box["width"] / 2
                y = box["y"] + box["height"] / 2
            else:
                x = box["x"] + point.x
                y = box["y"] + point.y

            self._page.mouse.move(x, y)
        self._pointer = (x, y)

    def double_click(self) -> None:
        x, y = self._pointer
        with _translate_errors("dblclick"):
            self._page.mouse.dblclick(x, y)
