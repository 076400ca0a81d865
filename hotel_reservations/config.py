"""
Настройки приложения.

Задаются в коде при сборке приложения (см. bootstrap); переменные окружения
и файлы конфигурации не используются.
"""

from decimal import Decimal
from pathlib import Path
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hotel_reservations.domain.catalog import CategoryOffer, RoomCatalog
from hotel_reservations.domain.room import RoomCategory
from hotel_reservations.domain.value_objects import Money


class RoomSettings(BaseModel):
    """Вместимость и цена за ночь для одной категории."""

    model_config = ConfigDict(frozen=True)

    capacity: int = Field(..., ge=0)
    price_per_night: Decimal = Field(..., ge=0)


def default_rooms() -> Dict[RoomCategory, RoomSettings]:
    return {
        RoomCategory.STANDARD: RoomSettings(capacity=10, price_per_night=Decimal("1500")),
        RoomCategory.DELUXE: RoomSettings(capacity=6, price_per_night=Decimal("3000")),
        RoomCategory.SUITE: RoomSettings(capacity=3, price_per_night=Decimal("6000")),
    }


class HotelSettings(BaseModel):
    """Настройки отеля и консольного приложения."""

    storage_path: Path = Path("bookings.txt")
    payment_delay_seconds: float = Field(0.7, ge=0)
    booking_id_prefix: str = Field("B", min_length=1, max_length=3)
    rooms: Dict[RoomCategory, RoomSettings] = Field(default_factory=default_rooms)
    verbose: bool = False

    @field_validator("booking_id_prefix")
    @classmethod
    def prefix_is_alpha(cls, v: str) -> str:
        if not v.isalpha():
            raise ValueError("Префикс идентификатора должен состоять из букв")
        return v.upper()

    def build_catalog(self) -> RoomCatalog:
        return RoomCatalog(
            {
                category: CategoryOffer(
                    total_rooms=room.capacity,
                    price_per_night=Money(amount=room.price_per_night),
                )
                for category, room in self.rooms.items()
            }
        )
