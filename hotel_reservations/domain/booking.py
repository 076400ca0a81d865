"""
Бронирование и связанные с ним доменные события.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hotel_reservations.domain.room import RoomCategory
from hotel_reservations.domain.value_objects import CustomerName


class Booking(BaseModel):
    """Подтвержденное бронирование. После создания не изменяется."""

    model_config = ConfigDict(frozen=True)

    booking_id: str = Field(..., min_length=1)
    customer_name: str
    category: RoomCategory
    nights: int = Field(..., ge=1)
    total_amount: Decimal = Field(..., ge=0, decimal_places=2)
    created_at_ms: int = Field(..., ge=0)

    @field_validator("customer_name")
    @classmethod
    def customer_name_not_empty(cls, v: str) -> str:
        return CustomerName(v).value

    def belongs_to(self, name: str) -> bool:
        return CustomerName(self.customer_name).matches(name)

    def has_id(self, booking_id: str) -> bool:
        return self.booking_id.casefold() == booking_id.casefold()

    def __str__(self) -> str:
        return (
            f"BookingID: {self.booking_id} | Name: {self.customer_name} | "
            f"Category: {self.category.label} | Nights: {self.nights} | "
            f"Amount: {self.total_amount:.2f}"
        )


class DomainEvent(BaseModel):
    """Базовый класс для доменных событий бронирования."""

    model_config = ConfigDict(frozen=True)

    booking_id: str


class RoomBooked(DomainEvent):
    category: RoomCategory
    nights: int
    total_amount: Decimal


class BookingCancelled(DomainEvent):
    category: RoomCategory
