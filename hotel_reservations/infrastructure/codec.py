"""
Построчный текстовый формат файла бронирований.

Одна строка на бронирование, шесть полей через запятую:
идентификатор, имя клиента, категория, ночи, сумма, время создания (мс).
Поля не экранируются: запятые в имени заменяются пробелами при записи,
переводы строк в имени не поддерживаются.
"""

from decimal import Decimal, InvalidOperation

from pydantic import ValidationError

from hotel_reservations.domain.booking import Booking
from hotel_reservations.domain.exceptions import DomainException, MalformedRecordError
from hotel_reservations.domain.room import parse_category

FIELD_COUNT = 6
SEPARATOR = ","
ENCODING = "utf-8"


def decode_line(raw_line: bytes) -> str:
    """
    Декодирует одну строку файла.

    Raises:
        MalformedRecordError: если строка не является корректным UTF-8
    """
    try:
        return raw_line.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise MalformedRecordError(repr(raw_line), str(e)) from e


def booking_to_line(booking: Booking) -> str:
    safe_name = booking.customer_name.replace(SEPARATOR, " ")
    return SEPARATOR.join(
        [
            booking.booking_id,
            safe_name,
            booking.category.label,
            str(booking.nights),
            f"{booking.total_amount:.2f}",
            str(booking.created_at_ms),
        ]
    )


def booking_from_line(line: str) -> Booking:
    """
    Восстанавливает бронирование из строки файла.

    Raises:
        MalformedRecordError: если полей меньше шести или какое-либо поле
            не разбирается
    """
    parts = line.rstrip("\r\n").split(SEPARATOR, FIELD_COUNT - 1)
    if len(parts) < FIELD_COUNT:
        raise MalformedRecordError(line, f"ожидалось {FIELD_COUNT} полей, получено {len(parts)}")

    booking_id, name, category_label, nights, amount, timestamp = parts
    try:
        return Booking(
            booking_id=booking_id,
            customer_name=name,
            category=parse_category(category_label),
            nights=int(nights),
            total_amount=Decimal(amount),
            created_at_ms=int(timestamp),
        )
    except (ValueError, InvalidOperation, ValidationError, DomainException) as e:
        raise MalformedRecordError(line, str(e)) from e
