"""
Инфраструктурный слой: файловое хранилище, формат строк и консольный логгер.
"""

from .codec import booking_from_line, booking_to_line
from .logging import ConsoleLogger
from .repositories import InMemoryBookingRepository, TextFileBookingRepository

__all__ = [
    "ConsoleLogger",
    "InMemoryBookingRepository",
    "TextFileBookingRepository",
    "booking_from_line",
    "booking_to_line",
]
