"""Configuration for farecheck."""

from .settings import (
    SERVER_HOST,
    SERVER_PORT,
    CHROME_PATH,
    TARGET_URL,
    HEADLESS,
    GRANT_GEOLOCATION,
    BROWSER_ARGS,
    DEFAULT_ORIGIN,
    DEFAULT_DESTINATION,
    DEFAULT_PROMO_CODES,
    BROWSER_NAVIGATION_TIMEOUT,
    BROWSER_WAIT_TIMEOUT,
    ELEMENT_VISIBLE_TIMEOUT,
    ELEMENT_POLL_INTERVAL,
    ACTION_SETTLE_DELAY,
    FLOW_TIMEOUT,
)
from .locators import LOCATORS
