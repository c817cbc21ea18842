"""Core fare selection, price verification and browser session handling."""

from .fare_scanner import select_cheapest
from .price_verifier import classify_feedback, verify
from .ui_driver import ElementSnapshot, UIDriver
from .browser_manager import BrowserManager

__all__ = [
    'select_cheapest',
    'classify_feedback',
    'verify',
    'ElementSnapshot',
    'UIDriver',
    'BrowserManager',
]
