"""Command-line entry point."""

from __future__ import annotations

import json
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from advent import commands
from advent.day import Day, DayParseError

_U8 = re.compile(r"\+?[0-9]+")


class CliError(Exception):
    """Raised when a command-line argument cannot be parsed."""


@dataclass
class Invocation:
    """A parsed command line."""

    command: str
    day: Day | None = None
    release: bool = False
    submit: int | None = None
    run_all: bool = False
    store: bool = False


def _parse_day(text: str) -> Day:
    try:
        return Day.parse(text)
    except DayParseError as err:
        raise CliError(f"failed to parse '{text}': {err}") from err


def _parse_u8(text: str) -> int:
    if not _U8.fullmatch(text) or int(text) > 255:
        raise CliError(f"failed to parse '{text}': invalid number")
    return int(text)


class _Arguments:
    def __init__(self, argv: Sequence[str]) -> None:
        self._args = list(argv)

    def subcommand(self) -> str | None:
        if not self._args or self._args[0].startswith("-"):
            return None
        return self._args.pop(0)

    def contains(self, flag: str) -> bool:
        if flag in self._args:
            self._args.remove(flag)
            return True
        return False

    def free_day(self) -> Day:
        if not self._args:
            raise CliError("free-standing argument is missing")
        return _parse_day(self._args.pop(0))

    def opt_free_day(self) -> Day | None:
        return _parse_day(self._args.pop(0)) if self._args else None

    def opt_value(self, key: str) -> str | None:
        for index, arg in enumerate(self._args):
            if arg == key:
                if index + 1 >= len(self._args):
                    raise CliError(f"the '{key}' option doesn't have an associated value")
                value = self._args[index + 1]
                del self._args[index : index + 2]
                return value
            if arg.startswith(key + "="):
                del self._args[index]
                return arg[len(key) + 1 :]
        return None

    def finish(self) -> list[str]:
        return self._args


def _exit(message: str) -> None:
    print(message, file=sys.stderr)
    raise SystemExit(1)


def parse_args(argv: Sequence[str]) -> Invocation:
    """Parse the arguments after the program name."""
    args = _Arguments(argv)
    command = args.subcommand()

    if command == "all":
        invocation = Invocation("all", release=args.contains("--release"))
    elif command == "time":
        run_all = args.contains("--all")
        store = args.contains("--store")
        invocation = Invocation("time", day=args.opt_free_day(), run_all=run_all, store=store)
    elif command in ("download", "read"):
        invocation = Invocation(command, day=args.free_day())
    elif command == "solve":
        day = args.free_day()
        release = args.contains("--release")
        raw_submit = args.opt_value("--submit")
        submit = None if raw_submit is None else _parse_u8(raw_submit)
        invocation = Invocation("solve", day=day, release=release, submit=submit)
    elif command == "today":
        invocation = Invocation("today")
    elif command is None:
        _exit("No command specified.")
    else:
        _exit(f"Unknown command: {command}")

    remaining = args.finish()
    if remaining:
        print(f"Warning: unknown argument(s): {json.dumps(remaining)}.", file=sys.stderr)
    return invocation


def main(argv: Sequence[str] | None = None) -> None:
    """Run the command given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        invocation = parse_args(args)
    except CliError as err:
        _exit(f"Error: {err}")
        return

    if invocation.command == "all":
        commands.handle_all(invocation.release)
    elif invocation.command == "time":
        commands.handle_time(invocation.day, invocation.run_all, invocation.store)
    elif invocation.command == "download":
        commands.handle_download(invocation.day)
    elif invocation.command == "read":
        commands.handle_read(invocation.day)
    elif invocation.command == "solve":
        commands.handle_solve(invocation.day, invocation.release, invocation.submit)
    elif invocation.command == "today":
        commands.handle_today()


if __name__ == "__main__":
    main()