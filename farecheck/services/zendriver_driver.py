"""UIDriver implementation backed by a zendriver browser session."""

import asyncio
import json
from typing import List, Optional

from farecheck.config import ELEMENT_POLL_INTERVAL, ACTION_SETTLE_DELAY
from farecheck.core.ui_driver import ElementSnapshot, UIDriver


class ZendriverUIDriver(UIDriver):
    """Drives the page by evaluating small scripts through BrowserManager."""

    def __init__(self, browser_manager, settle_delay: float = ACTION_SETTLE_DELAY):
        self.browser_manager = browser_manager
        self.settle_delay = settle_delay

    async def goto(self, url: str):
        print(f"[ZendriverUIDriver] Navigating to {url}")
        await self.browser_manager.navigate_to_url(url)

    async def locate(self, selector: str) -> List[ElementSnapshot]:
        script = f"""
        (() => {{
            const nodes = Array.from(document.querySelectorAll({json.dumps(selector)}));
            return JSON.stringify(nodes.map(el => ({{
                id: el.id || '',
                text: el.textContent || ''
            }})));
        }})()
        """
        raw = await self.browser_manager.execute_script(script)
        return [ElementSnapshot(id=item['id'], text=item['text']) for item in json.loads(raw or '[]')]

    async def click(self, selector: str):
        script = f"""
        (() => {{
            const el = document.querySelector({json.dumps(selector)});
            if (!el) return false;
            el.scrollIntoView({{block: 'center'}});
            el.click();
            return true;
        }})()
        """
        clicked = await self.browser_manager.execute_script(script)
        if not clicked:
            raise RuntimeError(f"Element not found: {selector}")
        await asyncio.sleep(self.settle_delay)

    async def click_text(self, text: str, within: Optional[str] = None):
        # Innermost element containing the text, the way a text= locator resolves
        script = f"""
        (() => {{
            const scope = {json.dumps(within)};
            const root = scope ? document.querySelector(scope) : document.body;
            if (!root) return false;
            const needle = {json.dumps(text)};
            const match = Array.from(root.querySelectorAll('*')).find(
                el => el.children.length === 0 && (el.textContent || '').includes(needle)
            );
            if (!match) return false;
            match.click();
            return true;
        }})()
        """
        clicked = await self.browser_manager.execute_script(script)
        if not clicked:
            raise RuntimeError(f"No element with text {text!r} in {within or 'page'}")
        await asyncio.sleep(self.settle_delay)

    async def fill(self, selector: str, value: str):
        # Native setter so framework-bound inputs see the change
        script = f"""
        (() => {{
            const el = document.querySelector({json.dumps(selector)});
            if (!el) return false;
            el.focus();
            const setter = Object.getOwnPropertyDescriptor(
                window.HTMLInputElement.prototype, 'value'
            ).set;
            setter.call(el, {json.dumps(value)});
            el.dispatchEvent(new Event('input', {{bubbles: true}}));
            el.dispatchEvent(new Event('change', {{bubbles: true}}));
            el.dispatchEvent(new KeyboardEvent('keyup', {{bubbles: true}}));
            return true;
        }})()
        """
        filled = await self.browser_manager.execute_script(script)
        if not filled:
            raise RuntimeError(f"Input not found: {selector}")
        await asyncio.sleep(self.settle_delay)

    async def read_text(self, selector: str) -> Optional[str]:
        script = f"""
        (() => {{
            const el = document.querySelector({json.dumps(selector)});
            return el ? el.textContent : null;
        }})()
        """
        return await self.browser_manager.execute_script(script)

    async def wait_visible(self, selector: str, timeout: float):
        script = f"""
        (() => {{
            const el = document.querySelector({json.dumps(selector)});
            return !!(el && el.getClientRects().length);
        }})()
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout

        while True:
            if await self.browser_manager.execute_script(script):
                return
            if loop.time() >= deadline:
                raise TimeoutError(f"Element not visible after {timeout}s: {selector}")
            await asyncio.sleep(ELEMENT_POLL_INTERVAL)
