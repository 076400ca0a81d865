"""
Реализации хранилища журнала бронирований.
"""

import os
import tempfile
from pathlib import Path
from typing import List, Sequence, Union

from hotel_reservations.application.ports import ILogger
from hotel_reservations.application.repositories import BookingRepository, LoadResult
from hotel_reservations.domain.booking import Booking
from hotel_reservations.domain.exceptions import MalformedRecordError
from hotel_reservations.infrastructure.codec import (
    booking_from_line,
    booking_to_line,
    decode_line,
)


class TextFileBookingRepository(BookingRepository):
    """Хранилище в текстовом файле с полной перезаписью после каждого изменения."""

    def __init__(self, file_path: Union[str, Path], logger: ILogger):
        self._file_path = Path(file_path)
        self._logger = logger

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> LoadResult:
        """
        Читает файл построчно.

        Отсутствующий файл означает пустой журнал. Некорректные строки
        пропускаются и учитываются в LoadResult.skipped, в том числе строки,
        не декодируемые как UTF-8. Ошибка чтения файла выводится как
        предупреждение и дает пустой журнал.
        """
        if not self._file_path.exists():
            return LoadResult()

        bookings: List[Booking] = []
        skipped = 0
        try:
            with open(self._file_path, "rb") as f:
                for raw_line in f:
                    if not raw_line.strip():
                        continue
                    try:
                        bookings.append(booking_from_line(decode_line(raw_line)))
                    except MalformedRecordError as e:
                        skipped += 1
                        self._logger.debug("Строка пропущена", reason=e.reason)
        except OSError as e:
            self._logger.warning(
                "Не удалось прочитать файл бронирований, начинаем с пустого журнала",
                path=str(self._file_path),
                error=str(e),
            )
            return LoadResult()

        return LoadResult(bookings=bookings, skipped=skipped)

    def save(self, bookings: Sequence[Booking]) -> None:
        """
        Перезаписывает файл целиком.

        Данные пишутся во временный файл рядом с целевым и затем атомарно
        переименовываются. При ошибке записи состояние в памяти остается
        верным, но не сохраненным; повторных попыток нет.
        """
        tmp_name = None
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._file_path.parent,
                prefix=f".{self._file_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                for booking in bookings:
                    f.write(booking_to_line(booking) + "\n")
            os.replace(tmp_name, self._file_path)
            tmp_name = None
        except OSError as e:
            self._logger.error(
                "Ошибка сохранения бронирований в файл",
                path=str(self._file_path),
                error=str(e),
            )
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)


class InMemoryBookingRepository(BookingRepository):
    """Реализация хранилища в памяти (для тестов и запуска без файла)."""

    def __init__(self, bookings: Sequence[Booking] = ()):
        self._bookings: List[Booking] = list(bookings)
        self.save_count = 0

    def load(self) -> LoadResult:
        return LoadResult(bookings=list(self._bookings))

    def save(self, bookings: Sequence[Booking]) -> None:
        self._bookings = list(bookings)
        self.save_count += 1

    @property
    def bookings(self) -> List[Booking]:
        return list(self._bookings)
