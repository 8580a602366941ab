"""Command-line interface handler for termshell."""

import argparse
import json
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape

from . import __version__, tokenizer
from .builtins import default_commands
from .config import ShellConfig, load_config
from .exceptions import InvalidConfig, ShellSyntaxError
from .output import ConsoleOutput
from .script import ScriptFailed, ScriptRunner, ScriptStats
from .shell import Shell, ShellLogin

console = Console()
error_console = Console(stderr=True)


def print_usage() -> None:
    """Print usage information."""
    print("""Usage: termshell [-h | --help] <command> [<args>]

Commands:
  tokenize                 Split a command line into tokens and print them as JSON
      --trace              Print the scanner state after every character
      <line>               The command line to split

  run                      Execute a file of command lines
      -c, --config FILE    Shell configuration file (default: per-user config.toml)
      <script>             The script file

  repl                     Start an interactive shell session
      -c, --config FILE    Shell configuration file (default: per-user config.toml)

  help                     Show this help message
  version                  Show program version
""")


def print_version() -> None:
    """Print version information."""
    print(__version__)


def print_trace(ch: Optional[str], state: tokenizer.ScanState) -> None:
    """Print one step of the tokenizer's state."""
    label = "start" if ch is None else repr(ch)
    console.print(
        f"[dim]{escape(label):>8}[/dim] "
        f"{state.quote_mode.name:<11} "
        f"escape={int(state.escape_pending)} "
        f"ws={int(state.last_was_whitespace)} "
        f"index={state.working_index} "
        f"{escape(json.dumps(state.tokens))}",
        highlight=False,
    )


def print_stats(stats: ScriptStats) -> None:
    """Print script statistics with colored output."""
    magenta = "\x1b[35m"
    reset = "\x1b[0m"

    print(f"{magenta}┃{reset} {stats.line_count:<6} Lines")
    print(f"{magenta}┃{reset} {stats.command_count:<6} Commands")
    print(f"{magenta}┃{reset} {stats.error_count:<6} Errors")


def create_shell(config: ShellConfig) -> Shell:
    """Build a shell session with the built-in commands."""
    login = ShellLogin(user=config.user, host=config.host)
    return Shell(config.name, login, ConsoleOutput(console, error_console), default_commands())


def _load_config_or_exit(path: Optional[str]) -> ShellConfig:
    try:
        return load_config(path)
    except InvalidConfig as e:
        error_console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)


def cmd_tokenize(args: argparse.Namespace) -> None:
    """Execute the tokenize command."""
    if args.line is None:
        print("Please specify a command line to tokenize\n", file=sys.stderr)
        print_usage()
        sys.exit(1)

    trace = print_trace if args.trace else None

    try:
        tokens = tokenizer.tokenize(args.line, trace)
    except ShellSyntaxError as e:
        print(f"syntax error: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(tokens))


def cmd_run(args: argparse.Namespace) -> None:
    """Execute the run command."""
    if not args.script:
        print("Please specify a script to run\n", file=sys.stderr)
        print_usage()
        sys.exit(1)

    config = _load_config_or_exit(args.config)
    runner = ScriptRunner(create_shell(config))

    try:
        runner.run_file(args.script)
    except ScriptFailed:
        print_stats(runner.stats())
        sys.exit(1)

    print_stats(runner.stats())


def cmd_repl(args: argparse.Namespace) -> None:
    """Execute the repl command."""
    config = _load_config_or_exit(args.config)
    shell = create_shell(config)

    while shell.is_active():
        try:
            line = console.input(escape(config.format_prompt()))
        except EOFError:
            console.print()
            shell.exit(0)
            break
        shell.exec(line)


def main() -> None:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Simulated command shell", add_help=False)

    # Add global help
    parser.add_argument("-h", "--help", action="store_true", help="Show help message")

    # Add subparsers for commands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Tokenize command
    tokenize_parser = subparsers.add_parser("tokenize", add_help=False)
    tokenize_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for tokenize"
    )
    tokenize_parser.add_argument(
        "--trace", action="store_true", help="Print scanner state after each character"
    )
    tokenize_parser.add_argument("line", nargs="?", help="Command line to split")

    # Run command
    run_parser = subparsers.add_parser("run", add_help=False)
    run_parser.add_argument("-h", "--help", action="store_true", help="Show help for run")
    run_parser.add_argument("-c", "--config", type=str, help="Shell configuration file")
    run_parser.add_argument("script", nargs="?", help="Script file path")

    # Repl command
    repl_parser = subparsers.add_parser("repl", add_help=False)
    repl_parser.add_argument("-h", "--help", action="store_true", help="Show help for repl")
    repl_parser.add_argument("-c", "--config", type=str, help="Shell configuration file")

    # Help command
    subparsers.add_parser("help", add_help=False)

    # Version command
    subparsers.add_parser("version", add_help=False)

    # Parse arguments
    if len(sys.argv) < 2:
        print_usage()
        return

    args = parser.parse_args()

    # Handle global help
    if args.help or args.command == "help":
        print_usage()
        return

    # Handle version
    if args.command == "version":
        print_version()
        return

    # Execute commands
    if args.command == "tokenize":
        cmd_tokenize(args)
    elif args.command == "run":
        cmd_run(args)
    elif args.command == "repl":
        cmd_repl(args)
    else:
        print_usage()
