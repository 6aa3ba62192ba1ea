"""
Drivers module - Driver boundary implementations.
"""

from web_selection.drivers.selenium_driver import SeleniumDriver, SeleniumElement

__all__ = [
    "SeleniumDriver",
    "SeleniumElement",
]


def _register_drivers() -> None:
    """Register driver adapters with the registry."""
    from web_selection.registry import DriverRegistry

    # Register Selenium (eager)
    if "selenium" not in DriverRegistry.list_drivers():
        DriverRegistry.register_driver("selenium")(SeleniumDriver)

    # Register Playwright (lazy - only loads when needed)
    def playwright_factory():
        from web_selection.drivers.playwright_driver import PlaywrightDriver
        return PlaywrightDriver

    DriverRegistry.register_driver_factory("playwright", playwright_factory)


# Auto-register on import
_register_drivers()
