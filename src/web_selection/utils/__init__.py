"""
Utilities module - Common utility functions.
"""

from web_selection.utils.logging import (
    setup_logging,
    setup_logging_from_settings,
)

__all__ = [
    "setup_logging",
    "setup_logging_from_settings",
]
