"""Commands every shell session starts with."""

from typing import TYPE_CHECKING

from .command_set import CommandSet, ShellCommand

if TYPE_CHECKING:
    from .shell import Shell

# Width of the usage column in manual listings
USAGE_WIDTH = 23


class DeclareCommand(ShellCommand):
    """Declares a variable or lists the existing ones."""

    def __init__(self):
        super().__init__(
            "declare",
            "declare [name=value]",
            "Declares a variable or displays existing variables.",
            0,
            1,
        )

    def main(self, shell: "Shell", args: list[str]) -> int:
        if not args:
            for key, value in shell.variables().items():
                shell.output.record(f"({type(value).__name__}) {key}={value}")
            return 0

        parts = args[0].split("=")
        if len(parts) > 2:
            shell.output.record_error(
                "Invalid syntax. The '=' operator should only be used between the name and value."
            )
            return 1

        name = parts[0]
        value = parts[1] if len(parts) == 2 else ""
        shell.set(name, value)
        return 0


class UnsetCommand(ShellCommand):
    def __init__(self):
        super().__init__("unset", "unset <name>", "Unsets a variable with the given name.", 1, 1)

    def main(self, shell: "Shell", args: list[str]) -> int:
        shell.unset(args[0])
        return 0


class ManualCommand(ShellCommand):
    """Prints usage and description for all or some commands."""

    def __init__(self):
        super().__init__(
            "man",
            "man [commands...]",
            "Displays information about all commands or a specific given list of commands.",
        )

    def main(self, shell: "Shell", args: list[str]) -> int:
        commands = shell.commands
        missing: list[str] = []

        if args:
            commands, missing = shell.commands.subset(args)
        else:
            shell.output.record("  Manual")

        for command in commands:
            shell.output.record(f"  {command.usage:<{USAGE_WIDTH}}{command.description}")

        if missing:
            names = "', '".join(missing)
            shell.output.record_error(f"  No manual entry for command(s): '{names}'")
            return 1

        return 0


class HistoryCommand(ShellCommand):
    def __init__(self):
        super().__init__("history", "history", "Lists the commands run in this session.", 0, 0)

    def main(self, shell: "Shell", args: list[str]) -> int:
        for i, line in enumerate(shell.history(), start=1):
            shell.output.record(f"{i:>5}  {line}")
        return 0


def default_commands() -> CommandSet:
    """Return a fresh set holding every built-in command."""
    return CommandSet([ManualCommand(), DeclareCommand(), UnsetCommand(), HistoryCommand()])
