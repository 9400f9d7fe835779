"""
Browser session management and page actions.
"""

from .actions import (
    PAGE_NAVIGATION,
    SEARCH_INPUT,
    SEARCH_QUERY,
    Locator,
    find_element,
    scroll_to_bottom,
    search_for,
)
from .browser_manager import BrowserKind, BrowserManager

__all__ = [
    'BrowserKind',
    'BrowserManager',
    'Locator',
    'PAGE_NAVIGATION',
    'SEARCH_INPUT',
    'SEARCH_QUERY',
    'find_element',
    'scroll_to_bottom',
    'search_for',
]
