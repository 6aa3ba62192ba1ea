"""
Core module - Selections and the page entry point.
"""

from web_selection.core.selection import Selection
from web_selection.core.page import Page

__all__ = [
    "Selection",
    "Page",
]
