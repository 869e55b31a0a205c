"""
Line-oriented command sessions over stdin.

Each line is split with shell quoting rules; the first token picks an action,
the rest are passed to it as arguments.
"""

import shlex
import sys
from typing import Callable, Iterable, Iterator, TextIO

from rich.console import Console
from rich.markup import escape

console = Console()

PROMPT = "> "
EXIT_COMMANDS = {"quit", "exit"}

Action = Callable[[list[str]], None]


class SessionError(Exception):
    """Malformed command line (bad arity, bad number, ...)."""


def expect_args(args: list[str], count: int, usage: str) -> None:
    if len(args) < count:
        raise SessionError(f"usage: {usage}")


def parse_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise SessionError(f"not a whole number: {value}") from None


def report_error(message: object) -> None:
    console.print(f"[red]✗ {escape(str(message))}[/red]", emoji=False, soft_wrap=True)


def report_ok(message: str) -> None:
    console.print(f"[green]✓ {escape(message)}[/green]", emoji=False, soft_wrap=True)


def _read_lines(stream: TextIO) -> Iterator[str]:
    if stream.isatty():
        while True:
            try:
                yield console.input(PROMPT)
            except (EOFError, KeyboardInterrupt):
                return
    else:
        yield from stream


def run_session(
    actions: dict[str, Action],
    errors: tuple[type[Exception], ...] = (),
    stream: TextIO | None = None,
) -> None:
    """Dispatch lines from `stream` (stdin by default) until EOF or quit."""
    stream = stream or sys.stdin
    handled = (SessionError,) + errors

    console.print("[dim]Enter a command... (help lists them, quit leaves)[/dim]")

    for line in _read_lines(stream):
        try:
            parts = shlex.split(line)
        except ValueError as e:
            report_error(e)
            continue

        if not parts:
            continue

        name, args = parts[0].lower(), parts[1:]

        if name in EXIT_COMMANDS:
            break

        if name == "help":
            print_help(actions)
            continue

        action = actions.get(name)
        if action is None:
            report_error(f"No such command: {name}")
            continue

        try:
            action(args)
        except handled as e:
            report_error(e)


def print_help(actions: Iterable[str]) -> None:
    names = sorted(actions) + ["help"] + sorted(EXIT_COMMANDS)
    console.print("Commands: " + ", ".join(names))
