"""Domain Value Objects"""
from datetime import date, timedelta

from pydantic import BaseModel


class DateRange(BaseModel):
    """Value Object for the stay period of a reservation"""
    check_in: date
    check_out: date

    def duration(self) -> timedelta:
        """Raw interval between check-in and check-out"""
        return self.check_out - self.check_in

    def nights(self) -> int:
        """Calculate number of nights"""
        return self.duration().days

    def is_after(self, moment: date) -> bool:
        """Check if both dates fall strictly after the given day"""
        return self.check_in > moment and self.check_out > moment

    class Config:
        frozen = True
