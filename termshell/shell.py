"""Simulated shell session that tokenizes, substitutes and dispatches commands."""

from dataclasses import dataclass
from typing import Optional, Union

from . import tokenizer
from .command_set import CommandSet
from .exceptions import InactiveShell, ShellSyntaxError
from .output import OutputSink

ShellVarValue = Union[int, str]


@dataclass
class ShellLogin:
    """The user logged in and the name of the host."""

    user: str
    host: str


class Shell:
    """A single shell session with its variables, history and commands."""

    def __init__(
        self,
        name: str,
        login: ShellLogin,
        output: OutputSink,
        commands: Optional[CommandSet] = None,
    ):
        self.output = output
        self.commands = commands if commands is not None else CommandSet()
        self.exit_code: Optional[int] = None
        self._history: list[str] = []
        self.vars: dict[str, ShellVarValue] = {}
        self.reset_vars(name, login)

    def reset_vars(self, name: str, login: ShellLogin) -> None:
        """Replace every variable with its initial value."""
        self.vars = {
            "?": 0,
            "SHELL": name,
            "USER": login.user,
            "HOST": login.host,
            "HISTORY": "",
        }

    def get(self, name: str) -> Optional[ShellVarValue]:
        return self.vars.get(name)

    def set(self, name: str, value: ShellVarValue) -> None:
        self.vars[name] = value

    def unset(self, name: str) -> None:
        self.vars.pop(name, None)

    def safe_get(self, name: str) -> ShellVarValue:
        """Return the variable's value, or an empty string when unset."""
        value = self.vars.get(name)
        return "" if value is None else value

    def variables(self) -> dict[str, ShellVarValue]:
        return dict(self.vars)

    def name(self) -> str:
        return str(self.safe_get("SHELL"))

    def login(self) -> ShellLogin:
        return ShellLogin(user=str(self.safe_get("USER")), host=str(self.safe_get("HOST")))

    def history(self) -> list[str]:
        return list(self._history)

    def is_active(self) -> bool:
        return self.exit_code is None

    def exit(self, code: int = 0) -> "Shell":
        """End the session; later calls to exec raise InactiveShell."""
        self.exit_code = code
        return self

    def clear(self) -> "Shell":
        self.output.clear()
        return self

    def _substitute(self, token: str) -> str:
        if not token.startswith("$"):
            return token
        return str(self.safe_get(token[1:]))

    def exec(self, line: str) -> "Shell":
        """
        Execute a raw command line.

        Syntax errors and unknown commands are reported on the output sink.
        A line that fails to tokenize is not added to history and leaves the
        last exit code untouched.

        Raises:
            InactiveShell: If the session has already exited
        """
        if not self.is_active():
            raise InactiveShell("Inactive shell cannot execute a command")

        try:
            tokens = tokenizer.tokenize(line)
        except ShellSyntaxError as e:
            self.output.record_error(f"{self.name()}: syntax error: {e}")
            return self

        return self.exec_tokens(line, tokens)

    def exec_tokens(self, line: str, tokens: list[str]) -> "Shell":
        """
        Execute a line that was already tokenized.

        Args:
            line: The raw command line, recorded in history
            tokens: The tokens of line, before variable substitution

        Raises:
            InactiveShell: If the session has already exited
        """
        if not self.is_active():
            raise InactiveShell("Inactive shell cannot execute a command")

        if not tokens:
            return self

        self._history.append(line)

        tokens = [self._substitute(token) for token in tokens]
        command_name = tokens[0]
        command_args = tokens[1:]

        exit_code = self.commands.exec(self, command_name, command_args)
        if exit_code is None:
            self.output.record_error(f"{self.name()}: command not found: {command_name}")
        else:
            self.set("?", exit_code)

        return self
