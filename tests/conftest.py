import pytest

from farecheck.config import LOCATORS
from farecheck.core.ui_driver import ElementSnapshot, UIDriver


class FakeUIDriver(UIDriver):
    """
    In-memory stand-in for the booking pages.

    ``tiles`` is a list of (id, text) calendar tiles and ``promo_responses``
    maps each promo code to the (message, grand total, discount) texts the
    page shows after applying it. Every interaction is recorded in
    ``actions``.
    """

    def __init__(self, tiles, promo_responses=None, coupon_applied=False):
        self.tiles = tiles
        self.promo_responses = promo_responses or {}
        self.coupon_applied = coupon_applied
        self.current_code = None
        self.actions = []

    async def goto(self, url):
        self.actions.append(('goto', url))

    async def locate(self, selector):
        if selector == LOCATORS['date_tiles']:
            return [ElementSnapshot(id=tile_id, text=text) for tile_id, text in self.tiles]
        if selector == LOCATORS['clear_promo_code'] and self.coupon_applied:
            return [ElementSnapshot(id='', text='Remove')]
        return []

    async def click(self, selector):
        self.actions.append(('click', selector))
        if selector == LOCATORS['clear_promo_code']:
            self.coupon_applied = False
        elif selector == LOCATORS['apply_promo_code']:
            self.coupon_applied = True

    async def click_text(self, text, within=None):
        self.actions.append(('click_text', text, within))

    async def fill(self, selector, value):
        self.actions.append(('fill', selector, value))
        if selector == LOCATORS['promo_code']:
            self.current_code = value

    async def read_text(self, selector):
        if self.current_code not in self.promo_responses:
            return None
        message, total, discount = self.promo_responses[self.current_code]
        return {
            LOCATORS['promo_message']: message,
            LOCATORS['grand_total']: total,
            LOCATORS['discount']: discount,
        }.get(selector)

    async def wait_visible(self, selector, timeout):
        self.actions.append(('wait_visible', selector))


@pytest.fixture
def make_driver():
    """Factory for FakeUIDriver instances."""
    return FakeUIDriver
