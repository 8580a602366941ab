"""Run files of command lines through a shell session."""

import sys
from dataclasses import dataclass

from . import tokenizer
from .exceptions import ShellException, ShellSyntaxError
from .shell import Shell


@dataclass
class ScriptError:
    """Represents a line of a script that failed to tokenize."""

    message: str
    line_num: int
    path: str


@dataclass
class ScriptStats:
    """Statistics about a script run."""

    line_count: int
    command_count: int
    error_count: int


class ScriptFailed(ShellException):
    """Raised when one or more lines of a script are malformed."""

    pass


def is_comment(line: str) -> bool:
    """Check if a line is a comment or blank."""
    stripped = line.lstrip()
    return len(stripped) == 0 or stripped[0] == "#"


class ScriptRunner:
    """Feeds each line of a script file to a shell and collects syntax errors."""

    def __init__(self, shell: Shell):
        self.shell = shell
        self.errors: list[ScriptError] = []
        self.line_count = 0
        self.command_count = 0

    def stats(self) -> ScriptStats:
        return ScriptStats(
            line_count=self.line_count,
            command_count=self.command_count,
            error_count=len(self.errors),
        )

    def run_lines(self, lines: list[str], path: str = "<input>") -> None:
        for line_num, line in enumerate(lines, start=1):
            self.line_count += 1

            if is_comment(line):
                continue

            # Errors are collected per line so the whole file is reported at once
            try:
                tokens = tokenizer.tokenize(line)
            except ShellSyntaxError as e:
                self.errors.append(
                    ScriptError(message=type(e).__name__, line_num=line_num, path=path)
                )
                continue

            if not self.shell.is_active():
                break

            self.shell.exec_tokens(line, tokens)
            self.command_count += 1

    def run_file(self, path: str) -> None:
        """
        Execute every non-comment line of a file.

        Args:
            path: Script file to run

        Raises:
            ShellException: If the file cannot be read
            ScriptFailed: If any line failed to tokenize
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except OSError as e:
            raise ShellException(f"Cannot read script '{path}': {e}")

        self.run_lines(content.split("\n"), path)

        if self.errors:
            self._print_errors()
            raise ScriptFailed(f"{len(self.errors)} line(s) failed to parse")

    def _print_errors(self) -> None:
        """Print all errors to stderr."""
        for error in self.errors:
            print(f"{error.path}:{error.line_num}: error.{error.message}", file=sys.stderr)
