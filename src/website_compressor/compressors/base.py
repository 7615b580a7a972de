"""Common compressor interface and the diagnostic sink used by the JavaScript compressor."""

from abc import ABC, abstractmethod
from typing import Optional, Protocol

from rich.console import Console

from website_compressor.models.config import Configuration


class Compressor(ABC):
    """Turns the full text of one file into its minified form."""

    def __init__(self, config: Configuration):
        self.config = config

    @abstractmethod
    def compress(self, text: str) -> str:
        ...


class DiagnosticReporter(Protocol):
    def warning(self, message: str, line: Optional[int] = None, column: Optional[int] = None) -> None: ...

    def error(self, message: str, line: Optional[int] = None, column: Optional[int] = None) -> None: ...


def format_diagnostic(level: str, message: str, line: Optional[int], column: Optional[int]) -> str:
    if line is None or line < 0:
        return f"[{level}] {message}"
    return f"[{level}] {line}:{column if column is not None else 0}:{message}"


class ConsoleReporter:
    """Print diagnostics to standard error, one blank line before each."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def _emit(self, level: str, message: str, line: Optional[int], column: Optional[int]) -> None:
        self.console.print(
            "\n" + format_diagnostic(level, message, line, column),
            markup=False, highlight=False, soft_wrap=True,
        )

    def warning(self, message: str, line: Optional[int] = None, column: Optional[int] = None) -> None:
        self._emit("WARNING", message, line, column)

    def error(self, message: str, line: Optional[int] = None, column: Optional[int] = None) -> None:
        self._emit("ERROR", message, line, column)

