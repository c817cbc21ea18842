from decimal import Decimal

import pytest

from farecheck.core.fare_scanner import select_cheapest
from farecheck.models.fare_models import FareCandidate
from farecheck.utils.price_parser import parse_price


def candidates(*tiles):
    return [FareCandidate(id=tile_id, displayed_text=text) for tile_id, text in tiles]


def test_empty_calendar_selects_nothing():
    cheapest = select_cheapest([])
    assert cheapest == (None, Decimal("Infinity"))
    assert not cheapest.found


def test_selects_lowest_price():
    candidate_id, price = select_cheapest(candidates(
        ("fare_01", "₹ 4,567"),
        ("fare_02", "₹ 3,210"),
        ("fare_03", "₹ 5,000"),
    ))
    assert candidate_id == "fare_02"
    assert price == Decimal("3210.00")


def test_equal_prices_keep_first_seen():
    cheapest = select_cheapest(candidates(
        ("fare_01", "₹ 3,000"),
        ("fare_02", "₹ 2,500"),
        ("fare_03", "₹ 2,500"),
        ("fare_04", "2500.00"),
    ))
    assert cheapest.candidate_id == "fare_02"


def test_unreadable_price_never_wins():
    cheapest = select_cheapest(candidates(
        ("fare_01", ""),
        ("fare_02", "Sold out"),
        ("fare_03", "₹ 9,999"),
    ))
    assert cheapest.candidate_id == "fare_03"
    assert cheapest.found


def test_all_unreadable_prices_select_nothing():
    cheapest = select_cheapest(candidates(("fare_01", ""), ("fare_02", "--")))
    assert cheapest.candidate_id is None
    assert not cheapest.found


def test_accepts_generator():
    tiles = (FareCandidate(id=f"fare_{n}", displayed_text=f"₹ {price}") for n, price in enumerate([900, 700, 800]))
    assert select_cheapest(tiles).candidate_id == "fare_1"


@pytest.mark.parametrize("prices", [
    ["4,100", "3,950", "3,951", "12,000"],
    ["99.99", "99.98", "100"],
    ["1", "1", "1"],
    ["7,777"],
])
def test_selected_price_is_not_above_any_other(prices):
    tiles = candidates(*[(f"fare_{n}", f"₹ {price}") for n, price in enumerate(prices)])
    cheapest = select_cheapest(tiles)
    assert all(cheapest.price <= parse_price(tile.displayed_text) for tile in tiles)
    assert cheapest.candidate_id == tiles[[parse_price(t.displayed_text) for t in tiles].index(cheapest.price)].id


def test_none_is_a_contract_violation():
    with pytest.raises(TypeError):
        select_cheapest(None)


def test_oversized_price_never_wins():
    cheapest = select_cheapest(candidates(("a", "9" * 30), ("b", "₹ 100")))
    assert cheapest == ("b", Decimal("100.00"))
