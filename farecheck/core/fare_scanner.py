"""Cheapest-fare selection over the fare calendar."""

from typing import Iterable

from farecheck.models.fare_models import CheapestFare, FareCandidate
from farecheck.utils.price_parser import INFINITY, parse_price


def select_cheapest(candidates: Iterable[FareCandidate]) -> CheapestFare:
    """
    Pick the lowest-priced fare tile.

    Tiles are scanned in order and only a strictly lower price replaces
    the current pick, so among equal prices the first tile wins.

    Args:
        candidates: Fare tiles in display order (may be empty)

    Returns:
        CheapestFare(candidate_id, price); (None, Infinity) when no tile
        has a readable price
    """
    if candidates is None:
        raise TypeError("candidates is required")

    cheapest_id = None
    cheapest_price = INFINITY

    for candidate in candidates:
        price = parse_price(candidate.displayed_text)
        if price < cheapest_price:
            cheapest_price = price
            cheapest_id = candidate.id

    return CheapestFare(cheapest_id, cheapest_price)
