"""
Консольная оболочка: меню и диалоги бронирования.

Оболочка получает сервис явно и не хранит глобального состояния. Ошибки
ввода сообщаются пользователю, текущая операция прерывается, цикл меню
продолжается.
"""

import time
from typing import Callable, List

import click

from hotel_reservations.application.services import ReservationService
from hotel_reservations.config import HotelSettings
from hotel_reservations.domain.booking import Booking
from hotel_reservations.domain.exceptions import InvalidCustomerNameError
from hotel_reservations.domain.room import RoomCategory

MENU_CHOICES = [
    "Поиск / просмотр свободных номеров",
    "Забронировать номер",
    "Отменить бронирование",
    "Все бронирования",
    "Поиск бронирований по имени клиента",
    "Выход",
]

CATEGORY_CHOICES = [RoomCategory.STANDARD, RoomCategory.DELUXE, RoomCategory.SUITE]

PAYMENT_ACCEPTED = ("yes", "y")

# Верхняя граница как у 32-битного целого
MAX_NIGHTS = 2**31 - 1


class ReservationShell:
    """Интерактивное меню системы бронирования."""

    def __init__(
        self,
        service: ReservationService,
        settings: HotelSettings,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._service = service
        self._settings = settings
        self._sleep = sleep
        self._handlers = {
            1: self.show_availability,
            2: self.book_room,
            3: self.cancel_booking,
            4: self.show_all_bookings,
            5: self.search_by_name,
        }

    def run(self) -> None:
        click.echo("==== Добро пожаловать в систему бронирования отеля ====")
        while True:
            self.show_menu()
            try:
                choice = click.prompt("Выберите пункт", type=int)
            except click.Abort:
                # Конец ввода
                click.echo()
                break
            if choice == len(MENU_CHOICES):
                click.echo("Сохранение и выход... До свидания!")
                break
            handler = self._handlers.get(choice)
            if handler is None:
                click.echo("Неверный пункт меню. Попробуйте снова.")
            else:
                try:
                    handler()
                except click.Abort:
                    click.echo()
                    break
            click.echo()

    def show_menu(self) -> None:
        click.echo("Меню:")
        for number, title in enumerate(MENU_CHOICES, start=1):
            click.echo(f"{number}. {title}")

    def show_availability(self) -> None:
        click.echo("Свободные номера:")
        for line in self._service.availability_report():
            click.echo(
                f"{line.category.label:<8} : {line.available} свободно "
                f"(цена за ночь: {line.price_per_night})"
            )

    def book_room(self) -> None:
        click.echo("---- Бронирование номера ----")
        name = click.prompt("Введите ваше имя", default="", show_default=False).strip()
        if not name:
            click.echo("Имя не может быть пустым.")
            return

        click.echo("Выберите категорию: 1. Standard  2. Deluxe  3. Suite")
        choice = click.prompt("Категория (1-3)", type=int)
        if not 1 <= choice <= len(CATEGORY_CHOICES):
            click.echo("Неверная категория.")
            return
        category = CATEGORY_CHOICES[choice - 1]

        available = self._service.availability(category)
        if available <= 0:
            click.echo("Извините, свободных номеров этой категории нет.")
            return
        price = self._service.price(category)
        click.echo(f"Свободно номеров: {available}. Цена за ночь: {price}")

        nights = click.prompt("Количество ночей", type=click.IntRange(max=MAX_NIGHTS))
        if nights <= 0:
            click.echo("Неверное количество ночей.")
            return

        click.echo(f"Сумма к оплате (имитация): {price * nights}")
        answer = click.prompt(
            "Перейти к оплате? (yes/no)", default="", show_default=False
        )
        if answer.strip().lower() not in PAYMENT_ACCEPTED:
            click.echo("Бронирование отменено пользователем (оплата не проведена).")
            return

        click.echo("Обработка платежа...")
        self._sleep(self._settings.payment_delay_seconds)
        click.echo("Оплата прошла успешно!")

        try:
            booking = self._service.book(name, category, nights)
        except InvalidCustomerNameError as e:
            click.echo(str(e))
            return
        if booking is None:
            click.echo("Не удалось забронировать номер. Попробуйте снова.")
            return
        click.echo("Бронирование подтверждено!")
        click.echo(str(booking))
        click.echo(f"Сохраните идентификатор для отмены: {booking.booking_id}")

    def cancel_booking(self) -> None:
        click.echo("---- Отмена бронирования ----")
        booking_id = click.prompt(
            "Введите идентификатор бронирования", default="", show_default=False
        ).strip()
        if not booking_id:
            click.echo("Идентификатор не может быть пустым.")
            return
        if self._service.cancel(booking_id):
            click.echo("Бронирование успешно отменено.")
        else:
            click.echo("Идентификатор не найден. Проверьте и попробуйте снова.")

    def show_all_bookings(self) -> None:
        click.echo("---- Все бронирования ----")
        bookings = self._service.list_all()
        if not bookings:
            click.echo("Бронирований нет.")
            return
        self._print_bookings(bookings)

    def search_by_name(self) -> None:
        name = click.prompt(
            "Введите имя клиента для поиска", default="", show_default=False
        ).strip()
        if not name:
            click.echo("Имя не может быть пустым.")
            return
        found = self._service.find_by_customer(name)
        if not found:
            click.echo(f"Бронирования для '{name}' не найдены.")
            return
        click.echo("Найденные бронирования:")
        self._print_bookings(found)

    @staticmethod
    def _print_bookings(bookings: List[Booking]) -> None:
        for booking in bookings:
            click.echo(str(booking))
