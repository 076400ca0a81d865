"""
Каталог категорий номеров: вместимость и цена за ночь.
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping

from hotel_reservations.domain.room import RoomCategory
from hotel_reservations.domain.value_objects import Money


@dataclass(frozen=True)
class CategoryOffer:
    """Параметры категории в каталоге."""

    total_rooms: int
    price_per_night: Money

    def __post_init__(self):
        if self.total_rooms < 0:
            raise ValueError("Количество номеров не может быть отрицательным.")


class RoomCatalog:
    """Неизменяемый каталог категорий номеров."""

    def __init__(self, offers: Mapping[RoomCategory, CategoryOffer]):
        self._offers: Dict[RoomCategory, CategoryOffer] = {
            category: offers[category] for category in RoomCategory if category in offers
        }

    def categories(self) -> List[RoomCategory]:
        return list(self._offers)

    def capacity(self, category: RoomCategory) -> int:
        offer = self._offers.get(category)
        return offer.total_rooms if offer else 0

    def price(self, category: RoomCategory) -> Money:
        offer = self._offers.get(category)
        return offer.price_per_night if offer else Money()
