from typing import Any, Dict, Optional

from hotel_reservations.application.ports import ILogger
from hotel_reservations.application.services import ReservationService
from hotel_reservations.config import HotelSettings
from hotel_reservations.domain.ledger import ReservationLedger
from hotel_reservations.domain.value_objects import BookingIdGenerator
from hotel_reservations.infrastructure.logging import ConsoleLogger
from hotel_reservations.infrastructure.repositories import TextFileBookingRepository


def bootstrap_app(
    settings: Optional[HotelSettings] = None, logger: Optional[ILogger] = None
) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or HotelSettings()
    logger = logger or ConsoleLogger(verbose=settings.verbose)

    # 1. Журнал строится по каталогу из настроек
    ledger = ReservationLedger(
        catalog=settings.build_catalog(),
        id_generator=BookingIdGenerator(prefix=settings.booking_id_prefix),
    )

    # 2. Файловое хранилище; загрузка происходит при создании сервиса
    repository = TextFileBookingRepository(settings.storage_path, logger)
    service = ReservationService(ledger, repository, logger)

    return {
        "settings": settings,
        "logger": logger,
        "service": service,
    }
