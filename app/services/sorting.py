"""
Ordering of merged flight offers.

Ascending uses Python's stable sort. Descending is the exact reverse of the
ascending result, so offers with equal keys come out in the mirror image of
their ascending order instead of keeping their original relative order.
"""

from typing import Callable, Dict, Optional

from app.models.flights import FlightOffer, FlightOfferSet, SortDirective, SortKey, SortOrder

SORT_KEYS: Dict[SortKey, Callable[[FlightOffer], float]] = {
    SortKey.PRICE: lambda offer: offer.total_amount,
    SortKey.DURATION: lambda offer: offer.duration_minutes,
}


def sort_flights(
    flights: FlightOfferSet,
    directive: Optional[SortDirective] = None
) -> FlightOfferSet:
    """
    Return a new list of offers ordered according to the directive.

    An absent directive, an unrecognized key or an unrecognized order leaves
    the offers in their original order.
    """
    if directive is None:
        return list(flights)

    key, direction = directive.key, directive.direction
    if key is None or direction is None:
        return list(flights)

    ordered = sorted(flights, key=SORT_KEYS[key])
    if direction == SortOrder.DESC:
        ordered.reverse()
    return ordered
