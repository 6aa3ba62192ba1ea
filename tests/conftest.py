"""
Pytest configuration and fixtures.
"""

from typing import Dict, List, Optional
from unittest.mock import MagicMock

import pytest

from web_selection.interfaces.driver import IDriver, IElement, Point


class FakeDriver(IDriver):
    """In-memory driver that serves canned elements and records every call."""

    def __init__(self):
        self.elements: Dict[str, List[IElement]] = {}
        self.errors: Dict[str, Exception] = {}
        self.move_error: Optional[Exception] = None
        self.double_click_error: Optional[Exception] = None
        self.calls: List[tuple] = []

    def get_elements(self, selector: str) -> List[IElement]:
        self.calls.append(("get_elements", selector))
        if selector in self.errors:
            raise self.errors[selector]
        return list(self.elements.get(selector, []))

    def move_to(self, element: IElement, point: Optional[Point] = None) -> None:
        self.calls.append(("move_to", element, point))
        if self.move_error:
            raise self.move_error

    def double_click(self) -> None:
        self.calls.append(("double_click",))
        if self.double_click_error:
            raise self.double_click_error


@pytest.fixture
def driver():
    """Provide a fresh fake driver."""
    return FakeDriver()


@pytest.fixture
def make_element():
    """Provide a factory for mock element handles."""
    def factory(
        text: str = "",
        attributes: Optional[Dict[str, str]] = None,
        css: str = "",
        selected: bool = False,
        displayed: bool = True,
    ) -> MagicMock:
        element = MagicMock(spec=IElement)
        attrs = attributes or {}
        element.get_text.return_value = text
        element.get_attribute.side_effect = lambda name: attrs.get(name)
        element.get_css.return_value = css
        element.is_selected.return_value = selected
        element.is_displayed.return_value = displayed
        return element
    return factory


@pytest.fixture
def settings():
    """Provide test settings."""
    from web_selection.config import Settings, DriverSettings

    return Settings(driver=DriverSettings(engine="selenium"))


@pytest.fixture
def registry():
    """Provide the driver registry, restoring its registrations afterwards."""
    from web_selection.registry import DriverRegistry

    # Import to trigger registrations
    import web_selection.drivers  # noqa: F401

    drivers = dict(DriverRegistry._drivers)
    factories = dict(DriverRegistry._driver_factories)

    yield DriverRegistry

    DriverRegistry.clear_all()
    DriverRegistry._drivers.update(drivers)
    DriverRegistry._driver_factories.update(factories)
