from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Sequence

from hotel_reservations.domain.booking import Booking


@dataclass(frozen=True)
class LoadResult:
    """Результат загрузки: прочитанные бронирования и число пропущенных строк."""

    bookings: List[Booking] = field(default_factory=list)
    skipped: int = 0


class BookingRepository(ABC):
    """Абстрактное хранилище журнала бронирований."""

    @abstractmethod
    def load(self) -> LoadResult:
        """Загружает все сохраненные бронирования в порядке хранения."""
        raise NotImplementedError

    @abstractmethod
    def save(self, bookings: Sequence[Booking]) -> None:
        """Полностью перезаписывает хранилище текущим содержимым журнала."""
        raise NotImplementedError
