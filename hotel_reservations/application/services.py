"""
Сервис приложения для управления бронированиями.

Координирует журнал бронирований (агрегат) и хранилище: журнал загружается
один раз при создании сервиса и полностью сохраняется после каждого
успешного бронирования или отмены.
"""

from dataclasses import dataclass
from typing import List, Optional

from hotel_reservations.application.ports import ILogger
from hotel_reservations.application.repositories import BookingRepository
from hotel_reservations.domain.booking import Booking
from hotel_reservations.domain.ledger import ReservationLedger
from hotel_reservations.domain.room import RoomCategory
from hotel_reservations.domain.value_objects import Money


@dataclass(frozen=True)
class AvailabilityLine:
    """Строка отчета о свободных номерах."""

    category: RoomCategory
    available: int
    price_per_night: Money


class ReservationService:
    """Сервис приложения для бронирования номеров."""

    def __init__(
        self,
        ledger: ReservationLedger,
        repository: BookingRepository,
        logger: ILogger,
    ):
        self._ledger = ledger
        self._repository = repository
        self._logger = logger
        self._load()

    def _load(self) -> None:
        result = self._repository.load()
        self._ledger.restore(result.bookings)
        if result.skipped:
            self._logger.warning(
                "Пропущены некорректные строки в файле бронирований",
                skipped=result.skipped,
            )
        self._logger.debug("Журнал загружен", bookings=len(result.bookings))

    def _persist(self) -> None:
        self._repository.save(self._ledger.list_all())
        for event in self._ledger.pull_domain_events():
            self._logger.info(
                f"Событие: {type(event).__name__}", **event.model_dump(mode="json")
            )

    def availability(self, category: RoomCategory) -> int:
        return self._ledger.availability(category)

    def booked_count(self, category: RoomCategory) -> int:
        return self._ledger.booked_count(category)

    def price(self, category: RoomCategory) -> Money:
        return self._ledger.catalog.price(category)

    def availability_report(self) -> List[AvailabilityLine]:
        return [
            AvailabilityLine(
                category=category,
                available=self._ledger.availability(category),
                price_per_night=self.price(category),
            )
            for category in self._ledger.catalog.categories()
        ]

    def book(
        self, customer_name: str, category: RoomCategory, nights: int
    ) -> Optional[Booking]:
        """Бронирует номер. Возвращает None, если бронирование невозможно."""
        booking = self._ledger.book(customer_name, category, nights)
        if booking is None:
            self._logger.debug(
                "Бронирование отклонено",
                category=category.label,
                nights=nights,
                available=self._ledger.availability(category),
            )
            return None
        self._persist()
        return booking

    def cancel(self, booking_id: str) -> bool:
        """Отменяет бронирование по идентификатору без учета регистра."""
        if self._ledger.cancel(booking_id) is None:
            return False
        self._persist()
        return True

    def list_all(self) -> List[Booking]:
        return self._ledger.list_all()

    def find_by_customer(self, name: str) -> List[Booking]:
        return self._ledger.find_by_customer(name)
