"""API module for HTTP server and handlers."""

from .server import create_app, start_server
from .handlers import handle_select_cheapest, handle_verify_promo, handle_run_flow

__all__ = [
    'create_app',
    'start_server',
    'handle_select_cheapest',
    'handle_verify_promo',
    'handle_run_flow',
]
