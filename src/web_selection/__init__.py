"""
web-selection - Chainable, lazily resolved element selections for browser automation.

This package lets callers build hierarchical selector paths and run actions
and reads against whatever the path matches at call time, through a
pluggable driver boundary (Selenium, Playwright, or a test double).

Example:
    >>> from web_selection import Page
    >>> from web_selection.drivers import SeleniumDriver
    >>> page = Page(SeleniumDriver(webdriver))
    >>> page.find("#signup").find("input[name=email]").fill("me@example.com")
"""

__version__ = "0.1.0"

# Public API exports
from web_selection.core.selection import Selection
from web_selection.core.page import Page
from web_selection.interfaces.driver import IDriver, IElement, Point
from web_selection.config.settings import Settings

__all__ = [
    "Selection",
    "Page",
    "IDriver",
    "IElement",
    "Point",
    "Settings",
    "__version__",
]
