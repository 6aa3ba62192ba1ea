"""
Interfaces module - Abstract base classes for the driver boundary.

This module defines the contracts that driver adapters and their element
handles must implement to be usable by selections.
"""

from web_selection.interfaces.driver import (
    IDriver,
    IElement,
    Point,
)

__all__ = [
    "IDriver",
    "IElement",
    "Point",
]
