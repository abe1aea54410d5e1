"""Domain Collaborator Interfaces"""
from abc import ABC, abstractmethod
from datetime import date


class InputReader(ABC):
    """Interface for the source the reservation data is read from"""

    @abstractmethod
    def read_int(self, prompt: str) -> int:
        """Read an integer after showing prompt"""
        pass

    @abstractmethod
    def read_string(self, prompt: str) -> str:
        """Read a single token after showing prompt"""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the underlying input"""
        pass

    def __enter__(self) -> "InputReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class DateFormatter(ABC):
    """Interface for converting dates to and from their text form"""

    DEFAULT_PATTERN = "%d/%m/%Y"
    DEFAULT_LABEL = "dd/MM/yyyy"

    @abstractmethod
    def parse(self, text: str) -> date:
        """Parse text into a date, raising ValueError when malformed"""
        pass

    @abstractmethod
    def format(self, value: date) -> str:
        """Format a date back into text"""
        pass
