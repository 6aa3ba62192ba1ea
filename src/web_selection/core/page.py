"""
Page - Root entry point for building selections.
"""

from typing import Any, Optional
import logging

from web_selection.interfaces.driver import IDriver
from web_selection.core.selection import Selection
from web_selection.config import Settings, get_settings
from web_selection.registry import DriverRegistry

logger = logging.getLogger(__name__)


class Page:
    """
    A document reachable through one driver.

    Example:
        >>> page = Page(SeleniumDriver(webdriver.Chrome()))
        >>> page.find("nav").find("a.logout").click()
    """

    def __init__(self, driver: IDriver):
        self._driver = driver

    @classmethod
    def from_settings(cls, native: Any, settings: Optional[Settings] = None) -> "Page":
        """
        Build a page around a native backend object using the configured engine.

        Args:
            native: Selenium WebDriver or Playwright Page, matching the engine
            settings: Settings to use (defaults to the global settings)

        Returns:
            A Page wrapping the configured driver adapter
        """
        # Importing the drivers package registers the built-in adapters
        import web_selection.drivers  # noqa: F401

        settings = settings or get_settings()
        driver_class = DriverRegistry.get_driver(settings.driver.engine)
        logger.debug(f"Using {driver_class.__name__} for engine '{settings.driver.engine}'")
        return cls(driver_class(native))

    @property
    def driver(self) -> IDriver:
        return self._driver

    def find(self, selector: str) -> Selection:
        """
        Start a selection at the document root.

        Args:
            selector: The first selector fragment

        Returns:
            A new Selection bound to this page's driver
        """
        return Selection(self._driver, selector)
