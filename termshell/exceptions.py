"""Exceptions raised by the tokenizer, shell and configuration layers."""


class ShellException(Exception):
    """Base exception for shell errors."""

    pass


class ShellSyntaxError(ShellException):
    """Raised when a command line cannot be tokenized."""

    pass


class PrematureQuote(ShellSyntaxError):
    """Raised when a quote block opens in the middle of a word."""

    pass


class MissingWhitespaceAfterQuote(ShellSyntaxError):
    """Raised when a closed quote block is not followed by whitespace."""

    pass


class IllegalEscape(ShellSyntaxError):
    """Raised when a backslash escapes something other than a quote or backslash."""

    pass


class UnterminatedQuote(ShellSyntaxError):
    """Raised when a quote is not terminated."""

    pass


class HangingEscape(ShellSyntaxError):
    """Raised when a command ends with an unresolved backslash."""

    pass


class InvalidCommandName(ShellException):
    """Raised when a command name contains whitespace or is empty."""

    pass


class DuplicateCommand(ShellException):
    """Raised when a command name is already registered."""

    pass


class InactiveShell(ShellException):
    """Raised when a command is executed after the shell exited."""

    pass


class InvalidConfig(ShellException):
    """Raised when the configuration file is missing or malformed."""

    pass
