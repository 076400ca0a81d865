"""
Доменный слой: категории номеров, каталог, бронирования и журнал.
"""

from .booking import Booking, BookingCancelled, DomainEvent, RoomBooked
from .catalog import CategoryOffer, RoomCatalog
from .exceptions import (
    DomainException,
    InvalidCustomerNameError,
    MalformedRecordError,
    UnknownCategoryError,
)
from .ledger import ReservationLedger
from .room import RoomCategory, parse_category
from .value_objects import BookingIdGenerator, CustomerName, Money, current_time_ms

__all__ = [
    "Booking",
    "BookingCancelled",
    "BookingIdGenerator",
    "CategoryOffer",
    "CustomerName",
    "DomainEvent",
    "DomainException",
    "InvalidCustomerNameError",
    "MalformedRecordError",
    "Money",
    "ReservationLedger",
    "RoomBooked",
    "RoomCatalog",
    "RoomCategory",
    "UnknownCategoryError",
    "current_time_ms",
    "parse_category",
]
