"""
Общие фикстуры для тестов системы бронирования.
"""

import itertools
from typing import Any, List, Tuple

import pytest

from hotel_reservations.application.services import ReservationService
from hotel_reservations.config import HotelSettings
from hotel_reservations.domain.catalog import RoomCatalog
from hotel_reservations.domain.ledger import ReservationLedger
from hotel_reservations.infrastructure.repositories import InMemoryBookingRepository

FIXED_TIME_MS = 1_699_999_999_000


class RecordingLogger:
    """Логгер, запоминающий сообщения вместо вывода."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, dict]] = []

    def _record(self, level: str, message: str, **kwargs: Any) -> None:
        self.records.append((level, message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("info", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("error", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("warning", message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("debug", message, **kwargs)

    def levels(self) -> List[str]:
        return [level for level, _, _ in self.records]


def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"B{next(counter):08d}"


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def catalog() -> RoomCatalog:
    return HotelSettings().build_catalog()


@pytest.fixture
def ledger(catalog: RoomCatalog) -> ReservationLedger:
    """Журнал с предсказуемыми идентификаторами и фиксированным временем."""
    return ReservationLedger(
        catalog, id_generator=sequential_ids(), clock=lambda: FIXED_TIME_MS
    )


@pytest.fixture
def repository() -> InMemoryBookingRepository:
    return InMemoryBookingRepository()


@pytest.fixture
def service(
    ledger: ReservationLedger,
    repository: InMemoryBookingRepository,
    logger: RecordingLogger,
) -> ReservationService:
    return ReservationService(ledger, repository, logger)
