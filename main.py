"""Console entry point for the hotel reservation program."""
import logging
from typing import Optional

import click

from application.services import ReservationService
from domain.exceptions import DomainException
from domain.interfaces import InputReader
from infrastructure.config import LOG_LEVELS, settings
from infrastructure.console_input import ConsoleInputReader
from infrastructure.date_formatter import SimpleDateFormatter

__version__ = "1.0.0"

logger = logging.getLogger(__name__)


def get_reservation_service() -> ReservationService:
    formatter = SimpleDateFormatter(settings.date_format, settings.date_format_label)
    return ReservationService(formatter)


def run_session(reader: InputReader, service: ReservationService) -> None:
    """Book a room, print it, then apply one date update.

    Domain rule violations are reported on one line. Any other failure is
    logged with its traceback. The reader is closed on every path.
    """
    check_in_prompt = f"Check-in date ({settings.date_format_label}): "
    check_out_prompt = f"Check-out date ({settings.date_format_label}): "

    try:
        with reader:
            number = reader.read_int("Enter room number: ")
            reservation = service.create_reservation(
                number,
                reader.read_string(check_in_prompt),
                reader.read_string(check_out_prompt)
            )
            click.echo(f"Reservation: {service.describe(reservation)}")
            click.echo()

            click.echo("Enter data to update the reservation:")
            service.update_reservation(
                reservation,
                reader.read_string(check_in_prompt),
                reader.read_string(check_out_prompt)
            )
            click.echo(f"Reservation: {service.describe(reservation)}")
    except DomainException as e:
        click.echo(f"Error in reservation: {e}")
    except Exception:
        logger.exception("Unexpected error")
    finally:
        click.echo("End of program")


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging verbosity (defaults to RESERVATION_LOG_LEVEL or WARNING)",
)
def main(log_level: Optional[str]) -> None:
    """Record a hotel room reservation and update its dates."""
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )
    run_session(ConsoleInputReader(), get_reservation_service())


if __name__ == "__main__":
    main()
