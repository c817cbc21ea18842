"""HTTP server initialization and configuration."""

import asyncio
from aiohttp import web
import colorama

from farecheck.api.handlers import handle_select_cheapest, handle_verify_promo, handle_run_flow
from farecheck.config import SERVER_HOST, SERVER_PORT


def create_app() -> web.Application:
    app = web.Application()
    app.router.add_post('/select-cheapest', handle_select_cheapest)
    app.router.add_post('/verify-promo', handle_verify_promo)
    app.router.add_post('/run-flow', handle_run_flow)
    return app


async def start_server():
    """
    Start aiohttp web server for fare selection and promo verification.

    The server runs indefinitely until interrupted.

    Endpoints:
    - POST /select-cheapest - Pick the cheapest fare from calendar tiles
    - POST /verify-promo    - Check a grand total after a promo code
    - POST /run-flow        - Run the booking flow in a real browser
    """
    runner = web.AppRunner(create_app())
    await runner.setup()
    site = web.TCPSite(runner, SERVER_HOST, SERVER_PORT)

    print(f"{colorama.Fore.CYAN}[*] API Server running at http://localhost:{SERVER_PORT}{colorama.Fore.WHITE}")
    print(f"{colorama.Fore.GREEN}[*] Available endpoints:")
    print(f"  - POST /select-cheapest - Pick the cheapest fare")
    print(f"  - POST /verify-promo    - Verify a promo-code total")
    print(f"  - POST /run-flow        - Run the browser booking flow{colorama.Fore.WHITE}")
    await site.start()

    # Keep alive forever
    while True:
        await asyncio.sleep(3600)
