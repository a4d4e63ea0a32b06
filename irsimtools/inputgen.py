"""Interactive builder for lists of IRSIM node names saved to a ``.in`` file."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_WORD = re.compile(r"\S+")


def _check_range(begin: int, end: int) -> None:
    if begin > end or begin < 0 or end < 0:
        raise ValueError("invalid indices")


def array_names(name: str, begin: int, end: int) -> list[str]:
    """Return ``name`` suffixed with every index from ``begin`` to ``end`` inclusive."""
    _check_range(begin, end)
    return [f"{name}{index}" for index in range(begin, end + 1)]


def instance_array_names(
    net: str, cell: str, instance: int, begin: int, end: int
) -> list[str]:
    """Return the net inside each element of an arrayed cell instance."""
    _check_range(begin, end)
    return [
        f"{{{cell}_{instance}[{index}]/{net}}}" for index in range(begin, end + 1)
    ]


def instance_path(net: str, levels: Iterable[tuple[str, int]]) -> str:
    """Return the hierarchical name of ``net`` through nested cell instances."""
    prefix = "".join(f"{cell}_{number}/" for cell, number in levels)
    return f"{{{prefix}{net}}}"


def write_inputs(names: Iterable[str], directory: str | Path) -> Path:
    """Write the names, space separated, to ``<first name>.in`` in ``directory``."""
    names = list(names)
    if not names:
        raise ValueError("no names to write")
    path = Path(directory) / f"{names[0]}.in"
    path.write_text("".join(f"{name} " for name in names))
    return path


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


class _Console:
    """Reads whitespace-separated words and whole lines from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _skip_whitespace(self) -> bool:
        self._buffer = self._buffer.lstrip()
        while not self._buffer:
            line = self._stream.readline()
            if not line:
                return False
            self._buffer = line.lstrip()
        return True

    def word(self) -> str:
        if not self._skip_whitespace():
            return ""
        match = _WORD.match(self._buffer)
        self._buffer = self._buffer[match.end():]
        return match.group()

    def line(self) -> str:
        if not self._skip_whitespace():
            return ""
        text, newline, rest = self._buffer.partition("\n")
        self._buffer = rest if newline else ""
        return text

    def ask_yes(self, prompt: str) -> bool:
        print(prompt)
        return self.word().lower() == "yes"

    def ask_int(self, prompt: str) -> int:
        print(prompt)
        return _parse_int(self.line())


def _prompt_array(console: _Console, name: str) -> list[str]:
    try:
        begin = console.ask_int("What is the beginning index you want?")
        end = console.ask_int("what is the ending index you want?")
    except ValueError:
        print("did not convert to a number properly")
        return []
    try:
        return array_names(name, begin, end)
    except ValueError:
        print("invalid indices")
        return []


def _prompt_instance_array(console: _Console, net: str) -> list[str]:
    print("please enter the cell instance name")
    cell = console.word()
    try:
        instance = console.ask_int("please enter instance number")
        begin = console.ask_int("please enter beginning index")
        end = console.ask_int("please enter the ending index")
    except ValueError:
        print("invalid number entered")
        return []
    try:
        return instance_array_names(net, cell, instance, begin, end)
    except ValueError:
        print("invalid indices")
        return []


def _prompt_instance(console: _Console, net: str) -> list[str]:
    levels: list[tuple[str, int]] = []
    while True:
        print("Please enter the current level of cell instance")
        cell = console.word()
        try:
            number = console.ask_int("Please enter instance number")
        except ValueError:
            print("invalid value")
            return []
        levels.append((cell, number))
        if not console.ask_yes("do you have more instances to type? type 'yes' if so"):
            break
    return [instance_path(net, levels)]


def main(argv: list[str] | None = None) -> int:
    """Ask for node names on standard input and optionally save them."""
    console = _Console(sys.stdin)
    names: list[str] = []

    while console.ask_yes(
        "would you like to enter another value? type 'yes' to continue"
    ):
        print("please enter the name of the new item you wish to put into the list")
        name = console.word()
        is_array = console.ask_yes(
            "Is the item an array item? type 'yes' if that is the case"
        )
        is_instance = console.ask_yes(
            "Is the item an instance of a cell? type 'yes' if that is the case"
        )
        if is_array and is_instance:
            names.extend(_prompt_instance_array(console, name))
        elif is_instance:
            names.extend(_prompt_instance(console, name))
        elif is_array:
            names.extend(_prompt_array(console, name))
        else:
            names.append(name)
    print("you have decided to quit entering values")

    if console.ask_yes("would you like to write the values to a file?") and names:
        try:
            write_inputs(names, Path.cwd())
        except OSError as error:
            print(f"could not write file: {error}")
            return 1
    else:
        print("you have decided to not write values to file. Quitting program")
    return 0


if __name__ == "__main__":
    sys.exit(main())