"""Date formatter backed by strptime/strftime patterns"""
from datetime import date, datetime

from domain.interfaces import DateFormatter


class SimpleDateFormatter(DateFormatter):
    """Stateless formatter for a single fixed pattern"""

    def __init__(
        self,
        pattern: str = DateFormatter.DEFAULT_PATTERN,
        label: str = DateFormatter.DEFAULT_LABEL
    ):
        self._pattern = pattern
        self._label = label

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def label(self) -> str:
        return self._label

    def parse(self, text: str) -> date:
        try:
            return datetime.strptime(text.strip(), self._pattern).date()
        except ValueError as e:
            raise ValueError(
                f"Invalid date '{text}', expected format {self._label}"
            ) from e

    def format(self, value: date) -> str:
        return value.strftime(self._pattern)
