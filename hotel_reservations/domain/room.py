"""
Категории номеров отеля.
"""

from enum import Enum

from hotel_reservations.domain.exceptions import UnknownCategoryError


class RoomCategory(str, Enum):
    """Категория номера. Значение совпадает с канонической меткой в файле."""

    STANDARD = "STANDARD"
    DELUXE = "DELUXE"
    SUITE = "SUITE"

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


def parse_category(label: str) -> RoomCategory:
    """
    Разбирает метку категории без учета регистра и пробелов по краям.

    Raises:
        UnknownCategoryError: если метка не соответствует ни одной категории
    """
    normalized = label.strip().upper()
    try:
        return RoomCategory(normalized)
    except ValueError:
        raise UnknownCategoryError(label) from None
