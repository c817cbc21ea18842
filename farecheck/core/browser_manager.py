"""Browser automation and session management."""

import asyncio
import zendriver as zd
from fake_useragent import UserAgent

from farecheck.config import (
    CHROME_PATH,
    TARGET_URL,
    BROWSER_ARGS,
    HEADLESS,
    GRANT_GEOLOCATION,
    BROWSER_NAVIGATION_TIMEOUT,
    BROWSER_WAIT_TIMEOUT,
)


class BrowserManager:
    """Manages a zendriver browser session for the booking flow."""

    def __init__(self, headless: bool = HEADLESS):
        self.ua = UserAgent(browsers="Chrome")
        self.headless = headless
        self.browser = None
        self.tab = None

    async def create_session(self, start_url: str = TARGET_URL):
        """
        Start a fresh browser with a random Chrome user agent.

        Args:
            start_url: Page to open in the first tab

        Returns:
            tuple: (browser, tab) instances
        """
        browser_args = BROWSER_ARGS.copy()
        browser_args.append(f"--user-agent={self.ua.random}")

        self.browser = await zd.start(
            browser_executable_path=CHROME_PATH,
            headless=self.headless,
            sandbox=False,
            browser_args=browser_args,
        )

        if GRANT_GEOLOCATION:
            # The home page prompts for location before the search form is usable
            await self.browser.grant_all_permissions()

        self.tab = await self.browser.get(start_url)
        await asyncio.sleep(BROWSER_WAIT_TIMEOUT)

        return self.browser, self.tab

    async def navigate_to_url(self, url: str, wait_load: bool = True):
        """
        Navigate to a specific URL.

        Args:
            url: Target URL to navigate to
            wait_load: Whether to wait for navigation timeout (default: True)
        """
        if not self.tab:
            raise RuntimeError("Browser session not initialized")

        await self.tab.get(url)
        if wait_load:
            await asyncio.sleep(BROWSER_NAVIGATION_TIMEOUT)

    async def execute_script(self, script: str):
        """
        Execute JavaScript in the browser context.

        Args:
            script: JavaScript code to execute

        Returns:
            Result of script execution

        Raises:
            RuntimeError: If browser session not initialized or connection broken
        """
        if not self.tab:
            raise RuntimeError("Browser session not initialized")

        try:
            return await self.tab.evaluate(script)
        except Exception as e:
            error_msg = str(e).lower()
            if 'close frame' in error_msg or 'connection' in error_msg or 'websocket' in error_msg:
                raise RuntimeError(f"Browser connection lost: {e}") from e
            raise

    async def close(self):
        """Close the browser session and clean up resources."""
        if not self.browser:
            return

        tab = self.tab
        browser = self.browser
        self.tab = None
        self.browser = None

        try:
            if tab:
                try:
                    await tab.close()
                except Exception as e:
                    print(f"[BrowserManager] Error closing tab: {e}")

            await asyncio.sleep(0.5)
            await browser.stop()
        except Exception as e:
            print(f"[BrowserManager] Error during browser close: {e}")
