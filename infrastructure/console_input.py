"""Console input reader"""
import logging

import click

from domain.interfaces import InputReader

logger = logging.getLogger(__name__)


class ConsoleInputReader(InputReader):
    """Reads tokens from standard input through click prompts"""

    def __init__(self):
        self._closed = False
        self._pending = []

    @property
    def closed(self) -> bool:
        return self._closed

    def read_int(self, prompt: str) -> int:
        """Read an integer; malformed input raises instead of re-prompting"""
        text = self.read_string(prompt)
        try:
            return int(text)
        except ValueError as e:
            raise ValueError(f"Expected an integer but got '{text}'") from e

    def read_string(self, prompt: str) -> str:
        if self._closed:
            raise ValueError("I/O operation on closed input reader")
        if self._pending:
            click.echo(prompt, nl=False)
        # Lines are split on whitespace; extra tokens answer later prompts
        while not self._pending:
            line = click.prompt(prompt, prompt_suffix="", type=str, show_default=False)
            self._pending.extend(line.split())
        return self._pending.pop(0)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            logger.debug("Console input reader closed")
