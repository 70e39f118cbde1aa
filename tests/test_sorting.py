"""
Unit tests for offer ordering.
"""

import random

import pytest

from app.models.flights import SortDirective
from app.services.sorting import sort_flights
from tests.fixtures import OfferFixtures, make_offer


def numbers(flights):
    return [flight.flight_number for flight in flights]


@pytest.fixture
def merged():
    """Provider A offers followed by provider B offers."""
    return OfferFixtures.flights_a() + OfferFixtures.flights_b()


class TestSortFlights:
    """Test sort_flights ordering rules"""

    def test_price_ascending(self, merged):
        result = sort_flights(merged, SortDirective("price", "asc"))
        assert numbers(result) == ["A1", "A0", "B1", "B0"]

    def test_price_descending(self, merged):
        result = sort_flights(merged, SortDirective("price", "desc"))
        assert numbers(result) == ["B0", "B1", "A0", "A1"]

    def test_duration_ascending(self, merged):
        result = sort_flights(merged, SortDirective("duration", "asc"))
        assert numbers(result) == ["A0", "B0", "A1", "B1"]

    def test_duration_descending(self, merged):
        result = sort_flights(merged, SortDirective("duration", "desc"))
        assert numbers(result) == ["B1", "A1", "B0", "A0"]

    def test_no_directive_keeps_merge_order(self, merged):
        assert numbers(sort_flights(merged)) == ["A0", "A1", "B0", "B1"]
        assert numbers(sort_flights(merged, SortDirective())) == ["A0", "A1", "B0", "B1"]

    @pytest.mark.parametrize("sort_by,order", [
        ("price", None),
        ("price", "ascending"),
        ("price", "ASC"),
        ("duration", "down"),
        ("stops", "asc"),
        (None, "desc"),
        ("Price", "asc"),
    ])
    def test_unrecognized_directive_is_noop(self, merged, sort_by, order):
        """Unknown keys or orders leave the offers untouched"""
        result = sort_flights(merged, SortDirective(sort_by, order))
        assert numbers(result) == ["A0", "A1", "B0", "B1"]

    def test_input_is_not_mutated(self, merged):
        before = numbers(merged)
        result = sort_flights(merged, SortDirective("price", "asc"))

        assert numbers(merged) == before
        assert result is not merged

    def test_ascending_ties_keep_original_order(self):
        flights = [
            make_offer(duration_minutes=5, total_amount=10.0, flight_number="first"),
            make_offer(duration_minutes=1, total_amount=99.0, flight_number="cheap"),
            make_offer(duration_minutes=5, total_amount=10.0, flight_number="second"),
            make_offer(duration_minutes=5, total_amount=10.0, flight_number="third"),
        ]

        result = sort_flights(flights, SortDirective("price", "asc"))
        assert numbers(result) == ["first", "second", "third", "cheap"]

    def test_descending_ties_mirror_ascending_order(self):
        flights = [
            make_offer(duration_minutes=5, total_amount=10.0, flight_number="first"),
            make_offer(duration_minutes=1, total_amount=99.0, flight_number="cheap"),
            make_offer(duration_minutes=5, total_amount=10.0, flight_number="second"),
        ]

        result = sort_flights(flights, SortDirective("price", "desc"))
        assert numbers(result) == ["cheap", "second", "first"]

    @pytest.mark.parametrize("sort_by", ["price", "duration"])
    def test_descending_is_reverse_of_ascending(self, sort_by):
        """Reversing the ascending result gives the descending result, ties included"""
        rng = random.Random(1234)
        for _ in range(25):
            flights = [
                make_offer(
                    duration_minutes=rng.randint(0, 4),
                    total_amount=float(rng.randint(0, 4)),
                    flight_number=str(i)
                )
                for i in range(rng.randint(0, 12))
            ]

            ascending = sort_flights(flights, SortDirective(sort_by, "asc"))
            descending = sort_flights(flights, SortDirective(sort_by, "desc"))

            assert numbers(list(reversed(ascending))) == numbers(descending)

    def test_empty_list(self):
        assert sort_flights([], SortDirective("price", "asc")) == []
