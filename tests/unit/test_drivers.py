"""
Tests for the Selenium and Playwright driver adapters.
"""

import pytest
from unittest.mock import MagicMock, patch

from playwright.sync_api import Error as PlaywrightError
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.by import By

from web_selection.exceptions import DriverError
from web_selection.interfaces.driver import IElement, Point


class TestSeleniumElement:
    """Test the SeleniumElement wrapper."""

    @pytest.fixture
    def mock_element(self):
        """Create a mock Selenium WebElement."""
        element = MagicMock()
        element.text = "Hello"
        element.get_attribute.return_value = "checkbox"
        element.value_of_css_property.return_value = "block"
        element.is_selected.return_value = True
        element.is_displayed.return_value = False
        return element

    @pytest.fixture
    def selenium_element(self, mock_element):
        """Create a SeleniumElement instance."""
        from web_selection.drivers.selenium_driver import SeleniumElement
        return SeleniumElement(mock_element)

    def test_actions(self, selenium_element, mock_element):
        """Test primitive actions delegate to the WebElement."""
        selenium_element.click()
        selenium_element.clear()
        selenium_element.set_value("abc")
        selenium_element.submit()

        mock_element.click.assert_called_once_with()
        mock_element.clear.assert_called_once_with()
        mock_element.send_keys.assert_called_once_with("abc")
        mock_element.submit.assert_called_once_with()

    def test_reads(self, selenium_element, mock_element):
        """Test primitive reads delegate to the WebElement."""
        assert selenium_element.get_text() == "Hello"
        assert selenium_element.get_attribute("type") == "checkbox"
        assert selenium_element.get_css("display") == "block"
        assert selenium_element.is_selected() is True
        assert selenium_element.is_displayed() is False
        mock_element.value_of_css_property.assert_called_once_with("display")

    def test_errors_translated(self, selenium_element, mock_element):
        """Test WebDriverException becomes DriverError."""
        cause = WebDriverException("stale element reference")
        mock_element.click.side_effect = cause

        with pytest.raises(DriverError) as exc_info:
            selenium_element.click()

        assert exc_info.value.operation == "click"
        assert "stale element reference" in str(exc_info.value)
        assert exc_info.value.__cause__ is cause

    def test_is_element(self, selenium_element):
        """Test the wrapper implements IElement."""
        assert isinstance(selenium_element, IElement)


class TestSeleniumDriver:
    """Test the SeleniumDriver adapter."""

    @pytest.fixture
    def mock_webdriver(self):
        """Create a mock Selenium WebDriver."""
        webdriver = MagicMock()
        webdriver.find_elements.return_value = [MagicMock(), MagicMock()]
        return webdriver

    @pytest.fixture
    def selenium_driver(self, mock_webdriver):
        """Create a SeleniumDriver instance."""
        from web_selection.drivers import SeleniumDriver
        return SeleniumDriver(mock_webdriver)

    def test_get_elements(self, selenium_driver, mock_webdriver):
        """Test selectors are resolved as CSS."""
        from web_selection.drivers import SeleniumElement

        elements = selenium_driver.get_elements("form input")

        mock_webdriver.find_elements.assert_called_once_with(By.CSS_SELECTOR, "form input")
        assert len(elements) == 2
        assert all(isinstance(e, SeleniumElement) for e in elements)

    def test_get_elements_error(self, selenium_driver, mock_webdriver):
        """Test resolution failures become DriverError."""
        mock_webdriver.find_elements.side_effect = WebDriverException("invalid session id")

        with pytest.raises(DriverError, match="invalid session id"):
            selenium_driver.get_elements("a")

    def test_move_to_centre(self, selenium_driver, mock_webdriver):
        """Test moving to an element without a point."""
        element = selenium_driver.get_elements("a")[0]

        with patch("web_selection.drivers.selenium_driver.ActionChains") as chains:
            selenium_driver.move_to(element)

        chains.assert_called_once_with(mock_webdriver)
        chains.return_value.move_to_element.assert_called_once_with(element.native)
        chains.return_value.perform.assert_called_once_with()

    def test_move_to_point(self, selenium_driver):
        """Test points are converted to centre-relative offsets."""
        element = selenium_driver.get_elements("a")[0]
        element.native.size = {"width": 100, "height": 40}

        with patch("web_selection.drivers.selenium_driver.ActionChains") as chains:
            selenium_driver.move_to(element, Point(10, 5))

        chains.return_value.move_to_element_with_offset.assert_called_once_with(
            element.native, -40, -15
        )

    def test_move_to_foreign_element(self, selenium_driver):
        """Test elements from another backend are rejected."""
        with pytest.raises(DriverError, match="not a Selenium element"):
            selenium_driver.move_to(MagicMock(spec=IElement))

    def test_double_click(self, selenium_driver, mock_webdriver):
        """Test double-click is performed at the pointer."""
        with patch("web_selection.drivers.selenium_driver.ActionChains") as chains:
            selenium_driver.double_click()

        chains.assert_called_once_with(mock_webdriver)
        chains.return_value.double_click.assert_called_once_with()
        chains.return_value.double_click.return_value.perform.assert_called_once_with()


class TestPlaywrightElement:
    """Test the PlaywrightElement wrapper."""

    @pytest.fixture
    def mock_page(self):
        """Create a mock Playwright page."""
        return MagicMock()

    @pytest.fixture
    def mock_element(self):
        """Create a mock Playwright ElementHandle."""
        element = MagicMock()
        element.inner_text.return_value = "Hello"
        element.get_attribute.return_value = "text"
        element.is_visible.return_value = True
        return element

    @pytest.fixture
    def playwright_element(self, mock_element, mock_page):
        """Create a PlaywrightElement instance."""
        from web_selection.drivers.playwright_driver import PlaywrightElement
        return PlaywrightElement(mock_element, mock_page)

    def test_click(self, playwright_element, mock_element):
        """Test click method."""
        playwright_element.click()
        mock_element.click.assert_called_once_with()

    def test_clear(self, playwright_element, mock_element):
        """Test clear empties the value."""
        playwright_element.clear()
        mock_element.fill.assert_called_once_with("")

    def test_set_value_types_text(self, playwright_element, mock_element, mock_page):
        """Test set_value focuses and types through the keyboard."""
        playwright_element.set_value("abc")
        mock_element.focus.assert_called_once_with()
        mock_page.keyboard.type.assert_called_once_with("abc")

    def test_submit(self, playwright_element, mock_element):
        """Test submit runs a form submission script."""
        playwright_element.submit()
        script = mock_element.evaluate.call_args[0][0]
        assert "form.submit()" in script

    def test_reads(self, playwright_element, mock_element):
        """Test primitive reads."""
        assert playwright_element.get_text() == "Hello"
        assert playwright_element.get_attribute("type") == "text"
        assert playwright_element.is_displayed() is True

    def test_get_css(self, playwright_element, mock_element):
        """Test computed styles are read through the page."""
        mock_element.evaluate.return_value = "rgb(0, 0, 0)"
        assert playwright_element.get_css("color") == "rgb(0, 0, 0)"
        assert mock_element.evaluate.call_args[0][1] == "color"

    def test_is_selected(self, playwright_element, mock_element):
        """Test selected state comes from checked/selected."""
        mock_element.evaluate.return_value = True
        assert playwright_element.is_selected() is True

    def test_errors_translated(self, playwright_element, mock_element):
        """Test Playwright errors become DriverError."""
        mock_element.click.side_effect = PlaywrightError("Element is not attached to the DOM")

        with pytest.raises(DriverError, match="not attached"):
            playwright_element.click()


class TestPlaywrightDriver:
    """Test the PlaywrightDriver adapter."""

    @pytest.fixture
    def mock_page(self):
        """Create a mock Playwright page."""
        page = MagicMock()
        handle = MagicMock()
        handle.bounding_box.return_value = {"x": 10, "y": 20, "width": 100, "height": 50}
        page.query_selector_all.return_value = [handle]
        return page

    @pytest.fixture
    def playwright_driver(self, mock_page):
        """Create a PlaywrightDriver instance."""
        from web_selection.drivers.playwright_driver import PlaywrightDriver
        return PlaywrightDriver(mock_page)

    def test_get_elements(self, playwright_driver, mock_page):
        """Test selectors are resolved with query_selector_all."""
        elements = playwright_driver.get_elements("ul li")
        mock_page.query_selector_all.assert_called_once_with("ul li")
        assert len(elements) == 1

    def test_get_elements_error(self, playwright_driver, mock_page):
        """Test resolution failures become DriverError."""
        mock_page.query_selector_all.side_effect = PlaywrightError("Target closed")

        with pytest.raises(DriverError, match="Target closed"):
            playwright_driver.get_elements("a")

    def test_move_to_centre(self, playwright_driver, mock_page):
        """Test moving to the centre of the bounding box."""
        element = playwright_driver.get_elements("a")[0]

        playwright_driver.move_to(element)

        mock_page.mouse.move.assert_called_once_with(60.0, 45.0)
        assert playwright_driver.pointer == (60.0, 45.0)

    def test_move_to_point(self, playwright_driver, mock_page):
        """Test points are offsets from the top-left corner."""
        element = playwright_driver.get_elements("a")[0]

        playwright_driver.move_to(element, Point(5, 5))

        mock_page.mouse.move.assert_called_once_with(15, 25)

    def test_move_to_hidden_element(self, playwright_driver, mock_page):
        """Test elements without a bounding box cannot be moved to."""
        element = playwright_driver.get_elements("a")[0]
        element.native.bounding_box.return_value = None

        with pytest.raises(DriverError, match="bounding box"):
            playwright_driver.move_to(element)
        mock_page.mouse.move.assert_not_called()

    def test_double_click_at_pointer(self, playwright_driver, mock_page):
        """Test double-click happens where the pointer was moved."""
        element = playwright_driver.get_elements("a")[0]
        playwright_driver.move_to(element)

        playwright_driver.double_click()

        mock_page.mouse.dblclick.assert_called_once_with(60.0, 45.0)
