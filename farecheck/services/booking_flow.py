"""End-to-end booking flow: cheapest date search and promo-code checks."""

import asyncio
import json
from typing import Dict, List, Optional

from farecheck.config import LOCATORS, TARGET_URL, ELEMENT_VISIBLE_TIMEOUT, FLOW_TIMEOUT
from farecheck.core.browser_manager import BrowserManager
from farecheck.core.fare_scanner import select_cheapest
from farecheck.core.price_verifier import verify
from farecheck.core.ui_driver import UIDriver
from farecheck.services.zendriver_driver import ZendriverUIDriver
from farecheck.models.fare_models import (
    CheapestFare,
    FareCandidate,
    FlowReport,
    PromoTrial,
    VerificationResult,
)
from farecheck.utils.price_parser import format_price, parse_discount, parse_price


class BookingFlow:
    """Walks the booking pages through a UIDriver and checks the prices shown."""

    def __init__(
        self,
        driver: UIDriver,
        locators: Optional[Dict[str, str]] = None,
        home_url: str = TARGET_URL,
        visible_timeout: float = ELEMENT_VISIBLE_TIMEOUT,
    ):
        self.driver = driver
        self.locators = {**LOCATORS, **(locators or {})}
        self.home_url = home_url
        self.visible_timeout = visible_timeout

    async def navigate_to_home_page(self):
        await self.driver.goto(self.home_url)

    async def select_flights_tab(self):
        await self.driver.click(self.locators['flight_tab'])

    async def enter_cities(self, origin: str, destination: str):
        """Type both cities and pick the matching autofill suggestions."""
        loc = self.locators

        await self.driver.click(loc['from_city'])
        await self.driver.fill(loc['from_city_dropdown'], origin)
        await self.driver.wait_visible(loc['from_autofill'], self.visible_timeout)
        await self.driver.click_text(origin, within=loc['from_autofill'])

        await self.driver.click(loc['to_city'])
        await self.driver.fill(loc['to_city_dropdown'], destination)
        await self.driver.wait_visible(loc['to_autofill'], self.visible_timeout)
        await self.driver.click_text(destination, within=loc['to_autofill'])

    async def select_cheapest_date(self) -> CheapestFare:
        """
        Scan the fare calendar and click the cheapest date.

        Returns:
            CheapestFare; price is Infinity when no tile shows a fare
        """
        tiles = await self.driver.locate(self.locators['date_tiles'])
        candidates = [FareCandidate(id=tile.id, displayed_text=tile.text) for tile in tiles]
        cheapest = select_cheapest(candidates)

        if not cheapest.found:
            print(f"[BookingFlow] No fares found among {len(candidates)} calendar tiles")
            return cheapest

        print(f"[BookingFlow] Cheapest date: {cheapest.candidate_id} at {format_price(cheapest.price)}")
        if cheapest.candidate_id:
            await self.driver.click(f'[id={json.dumps(cheapest.candidate_id)}]')
        return cheapest

    async def click_search_button(self):
        await self.driver.click(self.locators['search_button'])

    async def wait_for_flight_list(self):
        await self.driver.wait_visible(self.locators['flight_list'], self.visible_timeout)

    async def click_book_now(self):
        await self.driver.click(self.locators['first_flight'])
        await self.driver.wait_visible(self.locators['promo_code'], self.visible_timeout)

    async def apply_promo_code_and_verify(self, code: str, baseline) -> VerificationResult:
        """
        Submit a promo code and check the grand total against ``baseline``.

        Args:
            code: Promo code to type into the coupon box
            baseline: Price the total is expected to start from

        Returns:
            VerificationResult for this code
        """
        loc = self.locators

        # The review page may come with a coupon already applied
        if await self.driver.locate(loc['clear_promo_code']):
            await self.driver.click(loc['clear_promo_code'])

        await self.driver.fill(loc['promo_code'], code)
        await self.driver.click(loc['apply_promo_code'])
        await self.driver.wait_visible(loc['promo_message'], self.visible_timeout)

        message = await self.driver.read_text(loc['promo_message']) or ""
        total_text = await self.driver.read_text(loc['grand_total'])
        discount_text = await self.driver.read_text(loc['discount'])

        result = verify(
            baseline,
            message,
            parse_price(total_text),
            None if discount_text is None else parse_discount(discount_text),
        )
        print(f"[BookingFlow] Promo {code!r}: {result.outcome.value} -> {result.verdict.value} ({result.reason})")
        return result

    async def run(self, origin: str, destination: str, promo_codes: List[str]) -> FlowReport:
        """
        Run the whole scenario: search, pick the cheapest date, book the
        first flight and try each promo code in turn.

        Returns:
            FlowReport with status "success", "failed" or "no_fares"
        """
        print(f"[BookingFlow] Starting flow {origin} -> {destination}")

        await self.navigate_to_home_page()
        await self.select_flights_tab()
        await self.enter_cities(origin, destination)
        cheapest = await self.select_cheapest_date()

        if not cheapest.found:
            return FlowReport(
                status="no_fares",
                origin=origin,
                destination=destination,
                cheapest=cheapest,
                message="No fares found in the date calendar",
            )

        await self.click_search_button()
        await self.wait_for_flight_list()
        await self.click_book_now()

        trials = []
        for code in promo_codes:
            result = await self.apply_promo_code_and_verify(code, cheapest.price)
            trials.append(PromoTrial(code=code, result=result))

        failures = [f"{trial.code}: {trial.result.reason}" for trial in trials if not trial.result.passed]
        return FlowReport(
            status="failed" if failures else "success",
            origin=origin,
            destination=destination,
            cheapest=cheapest,
            trials=trials,
            message="; ".join(failures),
        )


async def run_booking_flow(
    origin: str,
    destination: str,
    promo_codes: List[str],
    timeout: float = FLOW_TIMEOUT,
) -> FlowReport:
    """
    Run the booking flow in a fresh browser session.

    Raises:
        TimeoutError: If the flow does not finish within ``timeout`` seconds
    """
    browser_manager = BrowserManager()
    try:
        print(f"[BookingFlow] Initializing browser...")
        await browser_manager.create_session()
        flow = BookingFlow(ZendriverUIDriver(browser_manager))
        return await asyncio.wait_for(flow.run(origin, destination, promo_codes), timeout=timeout)
    finally:
        await browser_manager.close()
        print(f"[BookingFlow] Browser closed")
