"""Services module for browser-driven booking checks."""

from .zendriver_driver import ZendriverUIDriver
from .booking_flow import BookingFlow, run_booking_flow

__all__ = [
    'ZendriverUIDriver',
    'BookingFlow',
    'run_booking_flow',
]
