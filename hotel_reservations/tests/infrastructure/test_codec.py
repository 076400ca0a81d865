from decimal import Decimal

import pytest

from hotel_reservations.domain.booking import Booking
from hotel_reservations.domain.exceptions import MalformedRecordError
from hotel_reservations.domain.room import RoomCategory
from hotel_reservations.infrastructure.codec import (
    booking_from_line,
    booking_to_line,
    decode_line,
)


@pytest.fixture
def booking() -> Booking:
    return Booking(
        booking_id="B12345678",
        customer_name="Jane Doe",
        category=RoomCategory.STANDARD,
        nights=3,
        total_amount=Decimal("4500"),
        created_at_ms=1699999999000,
    )


def test_booking_to_line(booking: Booking):
    assert booking_to_line(booking) == "B12345678,Jane Doe,STANDARD,3,4500.00,1699999999000"


def test_commas_in_name_are_replaced(booking: Booking):
    line = booking_to_line(booking.model_copy(update={"customer_name": "Doe, Jane"}))

    assert line.split(",")[1] == "Doe  Jane"
    assert booking_from_line(line).customer_name == "Doe  Jane"


def test_booking_from_line():
    booking = booking_from_line("B12345678,Jane Doe,suite,2,12000.00,1699999999000\n")

    assert booking.booking_id == "B12345678"
    assert booking.category is RoomCategory.SUITE
    assert booking.nights == 2
    assert booking.total_amount == Decimal("12000.00")
    assert booking.created_at_ms == 1699999999000


@pytest.mark.parametrize(
    "line",
    [
        "B1,Jane,STANDARD",
        "",
        "B1,Jane,PENTHOUSE,3,4500.00,1",
        "B1,Jane,STANDARD,three,4500.00,1",
        "B1,Jane,STANDARD,3,lots,1",
        "B1,Jane,STANDARD,3,4500.00,yesterday",
        "B1,Jane,STANDARD,3,4500.00,1,extra",
        "B1,,STANDARD,3,4500.00,1",
        "B1,Jane,STANDARD,0,0.00,1",
        "B1,Jane,STANDARD,3,-5.00,1",
    ],
)
def test_malformed_lines(line: str):
    with pytest.raises(MalformedRecordError):
        booking_from_line(line)


def test_decode_line():
    assert decode_line("José\n".encode("utf-8")) == "José\n"


def test_decode_invalid_utf8_line():
    with pytest.raises(MalformedRecordError):
        decode_line(b"B2,Jos\xe9,SUITE,1,6000.00,1\n")
