"""
Агрегат "Журнал бронирований".

Хранит бронирования в порядке добавления и счетчики занятых номеров по
категориям. Инвариант: для каждой категории счетчик равен числу бронирований
этой категории и не превышает вместимость из каталога.
"""

from __future__ import annotations

from decimal import InvalidOperation
from typing import Callable, Dict, Iterable, List, Optional

from hotel_reservations.domain.booking import (
    Booking,
    BookingCancelled,
    DomainEvent,
    RoomBooked,
)
from hotel_reservations.domain.catalog import RoomCatalog
from hotel_reservations.domain.room import RoomCategory
from hotel_reservations.domain.value_objects import (
    BookingIdGenerator,
    CustomerName,
    current_time_ms,
)


class ReservationLedger:
    """Журнал бронирований (агрегат)."""

    def __init__(
        self,
        catalog: RoomCatalog,
        id_generator: Optional[Callable[[], str]] = None,
        clock: Callable[[], int] = current_time_ms,
    ):
        self._catalog = catalog
        self._id_generator = id_generator or BookingIdGenerator(clock=clock)
        self._clock = clock
        self._bookings: List[Booking] = []
        self._booked: Dict[RoomCategory, int] = {c: 0 for c in RoomCategory}
        self._events: List[DomainEvent] = []

    @property
    def catalog(self) -> RoomCatalog:
        return self._catalog

    def restore(self, bookings: Iterable[Booking]) -> None:
        """Добавляет ранее сохраненные бронирования без проверки вместимости."""
        for booking in bookings:
            self._bookings.append(booking)
            self._booked[booking.category] += 1

    def booked_count(self, category: RoomCategory) -> int:
        return self._booked.get(category, 0)

    def availability(self, category: RoomCategory) -> int:
        return self._catalog.capacity(category) - self.booked_count(category)

    def book(
        self, customer_name: str, category: RoomCategory, nights: int
    ) -> Optional[Booking]:
        """
        Бронирует номер категории на указанное число ночей.

        Возвращает None, если число ночей не положительное, свободных
        номеров нет или сумма не представима с точностью до копеек.
        Состояние при этом не меняется.
        """
        if nights <= 0:
            return None
        if self.availability(category) <= 0:
            return None

        name = CustomerName(customer_name)
        try:
            total = self._catalog.price(category) * nights
        except InvalidOperation:
            return None
        booking = Booking(
            booking_id=self._id_generator(),
            customer_name=name.value,
            category=category,
            nights=nights,
            total_amount=total.amount,
            created_at_ms=self._clock(),
        )

        self._bookings.append(booking)
        self._booked[category] += 1
        self._events.append(
            RoomBooked(
                booking_id=booking.booking_id,
                category=category,
                nights=nights,
                total_amount=booking.total_amount,
            )
        )
        return booking

    def cancel(self, booking_id: str) -> Optional[Booking]:
        """Удаляет первое бронирование с данным идентификатором (без учета регистра)."""
        for index, booking in enumerate(self._bookings):
            if booking.has_id(booking_id):
                self._booked[booking.category] = max(
                    0, self._booked[booking.category] - 1
                )
                del self._bookings[index]
                self._events.append(
                    BookingCancelled(
                        booking_id=booking.booking_id, category=booking.category
                    )
                )
                return booking
        return None

    def list_all(self) -> List[Booking]:
        return list(self._bookings)

    def find_by_customer(self, name: str) -> List[Booking]:
        return [b for b in self._bookings if b.belongs_to(name)]

    def pull_domain_events(self) -> List[DomainEvent]:
        events = list(self._events)
        self._events.clear()
        return events
