"""
Registry module - Driver adapter registration and discovery.
"""

from web_selection.registry.registry import (
    DriverRegistry,
    register_driver,
    get_driver,
)

__all__ = [
    "DriverRegistry",
    "register_driver",
    "get_driver",
]
