"""Точка входа консольного приложения."""

import click

from hotel_reservations import __version__
from hotel_reservations.bootstrap import bootstrap_app
from hotel_reservations.config import HotelSettings
from hotel_reservations.interfaces.shell import ReservationShell


@click.command()
@click.version_option(version=__version__)
@click.pass_context
def main(ctx: click.Context) -> None:
    """Консольная система бронирования номеров отеля.

    Бронирования хранятся в файле bookings.txt в текущем каталоге.
    """
    settings = ctx.obj if isinstance(ctx.obj, HotelSettings) else HotelSettings()
    app = bootstrap_app(settings)
    ReservationShell(app["service"], settings).run()


if __name__ == "__main__":
    main()
