"""Application configuration settings."""

import os

# Server Configuration
SERVER_HOST = "0.0.0.0"
SERVER_PORT = int(os.getenv("FARECHECK_PORT", "11000"))

# Browser Configuration
CHROME_PATH = os.getenv("CHROME_PATH")  # None lets zendriver find Chrome
TARGET_URL = "https://www.easemytrip.com/"
HEADLESS = os.getenv("FARECHECK_HEADLESS", "0") == "1"
GRANT_GEOLOCATION = True

# Browser Arguments
BROWSER_ARGS = [
    "--no-sandbox",
    "--disable-gpu",
    "--disable-dev-shm-usage",
    "--disable-blink-features=AutomationControlled",
]

# Default booking scenario
DEFAULT_ORIGIN = "Delhi"
DEFAULT_DESTINATION = "Mumbai"
DEFAULT_PROMO_CODES = ["INVALID", "VALIDCODE"]

# Timeouts (in seconds)
BROWSER_NAVIGATION_TIMEOUT = 5
BROWSER_WAIT_TIMEOUT = 3
ELEMENT_VISIBLE_TIMEOUT = 30
ELEMENT_POLL_INTERVAL = 0.25
ACTION_SETTLE_DELAY = 0.5
FLOW_TIMEOUT = 180
