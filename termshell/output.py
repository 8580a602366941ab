"""Output sinks that receive the lines a shell prints."""

from dataclasses import dataclass
from typing import Optional, Protocol

from rich.console import Console
from rich.markup import escape


class OutputSink(Protocol):
    """Destination for shell output."""

    def record(self, line: str = "") -> None: ...

    def record_error(self, line: str = "") -> None: ...

    def clear(self) -> None: ...


@dataclass
class OutputLine:
    """A single line of output."""

    text: str
    is_error: bool = False


class BufferedOutput:
    """Keeps every recorded line in memory, in order."""

    def __init__(self):
        self.entries: list[OutputLine] = []

    def record(self, line: str = "") -> None:
        self.entries.append(OutputLine(line))

    def record_error(self, line: str = "") -> None:
        self.entries.append(OutputLine(line, is_error=True))

    def clear(self) -> None:
        self.entries.clear()

    @property
    def lines(self) -> list[str]:
        """Text of the normal (non-error) lines."""
        return [entry.text for entry in self.entries if not entry.is_error]

    @property
    def errors(self) -> list[str]:
        """Text of the error lines."""
        return [entry.text for entry in self.entries if entry.is_error]

    def text(self) -> str:
        """All lines joined with newlines, errors included."""
        return "\n".join(entry.text for entry in self.entries)


class ConsoleOutput:
    """Writes output to the terminal through rich consoles."""

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ):
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def record(self, line: str = "") -> None:
        self.console.print(escape(line), highlight=False)

    def record_error(self, line: str = "") -> None:
        self.error_console.print(f"[red]{escape(line)}[/red]", highlight=False)

    def clear(self) -> None:
        self.console.clear()
