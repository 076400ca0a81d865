"""
Объекты-значения предметной области бронирования.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hotel_reservations.domain.exceptions import InvalidCustomerNameError

CENTS = Decimal("0.01")


class Money(BaseModel):
    """Неотрицательная денежная сумма с точностью до копеек."""

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(default=Decimal("0.00"), ge=0, description="Сумма денег")

    @field_validator("amount")
    @classmethod
    def quantize_amount(cls, v: Decimal) -> Decimal:
        return v.quantize(CENTS, rounding=ROUND_HALF_UP)

    @classmethod
    def of(cls, amount: Union[Decimal, int, str]) -> Money:
        return cls(amount=Decimal(str(amount)))

    def __mul__(self, multiplier: int) -> Money:
        if not isinstance(multiplier, int) or isinstance(multiplier, bool):
            raise TypeError("Множитель должен быть целым числом")
        if multiplier < 0:
            raise ValueError("Множитель не может быть отрицательным")
        return Money(amount=self.amount * multiplier)

    def format(self) -> str:
        """Две цифры после точки независимо от локали."""
        return f"{self.amount:.2f}"

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class CustomerName:
    """Имя клиента: непустое, без переводов строки."""

    value: str

    def __post_init__(self):
        stripped = self.value.strip()
        if not stripped:
            raise InvalidCustomerNameError("Имя клиента не может быть пустым.")
        if "\n" in stripped or "\r" in stripped:
            raise InvalidCustomerNameError(
                "Имя клиента не может содержать перевод строки."
            )
        object.__setattr__(self, "value", stripped)

    def matches(self, other: str) -> bool:
        """Точное совпадение без учета регистра."""
        return self.value.casefold() == other.strip().casefold()


def current_time_ms() -> int:
    """Текущее время в миллисекундах с начала эпохи."""
    return time.time_ns() // 1_000_000


@dataclass
class BookingIdGenerator:
    """
    Генератор идентификаторов бронирований.

    Формат: префикс + младшие пять цифр времени в миллисекундах + случайное
    трехзначное число. Уникальность не гарантируется: при двух бронированиях
    в одну миллисекунду вероятность совпадения равна 1/900, коллизии не
    проверяются.
    """

    prefix: str = "B"
    clock: Callable[[], int] = current_time_ms
    rng: random.Random = field(default_factory=random.Random)

    def __call__(self) -> str:
        timestamp = self.clock()
        salt = self.rng.randint(100, 999)
        return f"{self.prefix}{timestamp % 100000}{salt}".upper()
