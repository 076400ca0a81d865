"""
Прикладной слой: сервис бронирования и порты для инфраструктуры.
"""

from .ports import ILogger
from .repositories import BookingRepository, LoadResult
from .services import AvailabilityLine, ReservationService

__all__ = [
    "AvailabilityLine",
    "BookingRepository",
    "ILogger",
    "LoadResult",
    "ReservationService",
]
