"""Domain Entities - Aggregates"""
import logging
from datetime import date, timedelta
from typing import Optional

from pydantic import BaseModel

from domain.exceptions import DomainException
from domain.interfaces import DateFormatter
from domain.value_objects import DateRange

logger = logging.getLogger(__name__)


class Reservation(BaseModel):
    """Reservation Aggregate Root Entity"""

    room_number: int
    date_range: DateRange

    class Config:
        from_attributes = True
        validate_assignment = True

    # ==================== FACTORY METHOD ====================
    @staticmethod
    def create(room_number: int, check_in: date, check_out: date) -> "Reservation":
        """Create new reservation.

        Initial dates are stored as given: past dates and inverted ranges
        are accepted here and only checked when the dates are updated.
        """
        reservation = Reservation(
            room_number=room_number,
            date_range=DateRange(check_in=check_in, check_out=check_out)
        )
        logger.debug("Created reservation for room %s", room_number)
        return reservation

    # ==================== ACCESSORS ====================
    @property
    def check_in(self) -> date:
        return self.date_range.check_in

    @property
    def check_out(self) -> date:
        return self.date_range.check_out

    # ==================== MODIFICATION METHODS ====================
    def update_dates(self, check_in: date, check_out: date, today: Optional[date] = None) -> None:
        """Replace both stay dates, which must lie in the future"""
        today = today or date.today()
        new_range = DateRange(check_in=check_in, check_out=check_out)

        # A day equal to today began at midnight, so it is already past
        if not new_range.is_after(today):
            logger.warning(
                "Rejected update of room %s to %s - %s",
                self.room_number, check_in, check_out
            )
            raise DomainException("Reservation dates for update must be future dates")

        self.date_range = new_range
        logger.info("Updated reservation for room %s", self.room_number)

    # ==================== QUERY METHODS ====================
    def duration(self) -> timedelta:
        """Raw interval between check-in and check-out"""
        return self.date_range.duration()

    def nights(self) -> int:
        """Get number of nights"""
        return self.date_range.nights()

    def describe(self, formatter: Optional[DateFormatter] = None) -> str:
        """Human readable summary of the reservation"""
        if formatter is not None:
            check_in, check_out = formatter.format(self.check_in), formatter.format(self.check_out)
        else:
            check_in = self.check_in.strftime(DateFormatter.DEFAULT_PATTERN)
            check_out = self.check_out.strftime(DateFormatter.DEFAULT_PATTERN)
        return (
            f"Room {self.room_number}, check-in: {check_in}, "
            f"check-out: {check_out}, {self.nights()} nights"
        )

    def __str__(self) -> str:
        return self.describe()
