import pytest

from hotel_reservations.domain.exceptions import DomainException, UnknownCategoryError
from hotel_reservations.domain.room import RoomCategory, parse_category


@pytest.mark.parametrize(
    "label, expected",
    [
        ("STANDARD", RoomCategory.STANDARD),
        ("deluxe", RoomCategory.DELUXE),
        ("  Suite ", RoomCategory.SUITE),
    ],
)
def test_parse_category(label: str, expected: RoomCategory):
    assert parse_category(label) is expected


def test_parse_unknown_category_raises():
    """Тест: неизвестная метка дает явную ошибку, а не None."""
    with pytest.raises(UnknownCategoryError) as exc_info:
        parse_category("PENTHOUSE")

    assert exc_info.value.label == "PENTHOUSE"
    assert isinstance(exc_info.value, DomainException)


def test_category_label_is_uppercase_name():
    assert [c.label for c in RoomCategory] == ["STANDARD", "DELUXE", "SUITE"]
    assert str(RoomCategory.DELUXE) == "DELUXE"
