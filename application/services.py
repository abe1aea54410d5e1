"""Application Services - Business use cases"""
from domain.entities import Reservation
from domain.interfaces import DateFormatter


class ReservationService:
    """Service for Reservation business use cases"""

    def __init__(self, date_formatter: DateFormatter):
        self.date_formatter = date_formatter

    def create_reservation(
        self,
        room_number: int,
        check_in: str,
        check_out: str
    ) -> Reservation:
        """Create new reservation from user supplied date strings"""
        # Both dates are parsed before anything is built
        check_in_date = self.date_formatter.parse(check_in)
        check_out_date = self.date_formatter.parse(check_out)

        return Reservation.create(
            room_number=room_number,
            check_in=check_in_date,
            check_out=check_out_date
        )

    def update_reservation(
        self,
        reservation: Reservation,
        check_in: str,
        check_out: str
    ) -> Reservation:
        """Reschedule an existing reservation.

        A malformed date string fails before the reservation is touched;
        a past date fails inside the aggregate with DomainException.
        """
        check_in_date = self.date_formatter.parse(check_in)
        check_out_date = self.date_formatter.parse(check_out)

        reservation.update_dates(check_in_date, check_out_date)
        return reservation

    def describe(self, reservation: Reservation) -> str:
        """Render reservation with the configured date format"""
        return reservation.describe(self.date_formatter)
