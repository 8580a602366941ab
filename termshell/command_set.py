"""Registry of commands recognized by the shell."""

from typing import TYPE_CHECKING, Iterable, Iterator, Optional

from .exceptions import DuplicateCommand, InvalidCommandName

if TYPE_CHECKING:
    from .shell import Shell


class ShellCommand:
    """Base class for a command the shell can dispatch to."""

    def __init__(
        self,
        name: str,
        usage: str,
        description: str,
        min_args: int = 0,
        max_args: Optional[int] = None,
    ):
        if not name or any(c.isspace() for c in name):
            raise InvalidCommandName(f"Command name '{name}' cannot contain whitespace")

        self.name = name
        self.usage = usage
        self.description = description
        self.min_args = min_args
        self.max_args = max_args

    def _accepts(self, count: int) -> bool:
        if count < self.min_args:
            return False
        return self.max_args is None or count <= self.max_args

    def exec(self, shell: "Shell", args: list[str]) -> int:
        """
        Run the command after checking its argument count.

        Returns:
            The command's exit code; 1 when the argument count is wrong
        """
        if not self._accepts(len(args)):
            shell.output.record_error(
                f"{self.name}: wrong number of arguments. Usage: {self.usage}"
            )
            return 1
        return self.main(shell, args)

    def main(self, shell: "Shell", args: list[str]) -> int:
        """
        Run the command body. Subclasses override this.

        Args:
            shell: The session running the command
            args: Arguments after the command name, already within bounds

        Returns:
            The command's exit code
        """
        raise NotImplementedError


class CommandSet:
    """An ordered set of commands keyed by name."""

    def __init__(self, commands: Iterable[ShellCommand] = ()):
        self.commands: dict[str, ShellCommand] = {}
        self.register(*commands)

    def __iter__(self) -> Iterator[ShellCommand]:
        return iter(self.commands.values())

    def __contains__(self, name: str) -> bool:
        return name in self.commands

    def size(self) -> int:
        return len(self.commands)

    def find(self, name: str) -> Optional[ShellCommand]:
        return self.commands.get(name)

    def lookup(self, name: str) -> Optional[ShellCommand]:
        """Return the command registered under name, or None."""
        return self.find(name)

    def register(self, *commands: ShellCommand) -> None:
        """Add commands; names must be unique within the set."""
        for command in commands:
            if command.name in self.commands:
                raise DuplicateCommand(f"Command '{command.name}' is already registered")
            self.commands[command.name] = command

    def subset(self, names: Iterable[str]) -> tuple["CommandSet", list[str]]:
        """
        Split names into the commands this set knows and those it does not.

        Returns:
            A new set with the known commands (in the order given) and the
            list of unknown names
        """
        found = CommandSet()
        missing = []
        for name in names:
            command = self.find(name)
            if command is None:
                missing.append(name)
            elif name not in found:
                found.register(command)
        return found, missing

    def exec(self, shell: "Shell", name: str, args: list[str]) -> Optional[int]:
        """Run a command by name; None means no such command exists."""
        command = self.find(name)
        if command is None:
            return None
        return command.exec(shell, args)
