"""Generate an IRSIM command file that walks every combination of the inputs."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

SEPARATOR = "."
DISPLAY_LIMIT = 10


class UsageError(ValueError):
    """Raised when the command-line arguments do not describe a command file."""


@dataclass
class CommandSpec:
    """What goes into a command file: its name, power rails, inputs and outputs."""

    filename: str
    inputs: list[str] = field(default_factory=list)
    outputs: list[str] = field(default_factory=list)
    vdd: str | None = None
    vss: str | None = None

    @property
    def power(self) -> bool:
        return self.vdd is not None and self.vss is not None


def usage(power: bool) -> str:
    """Return the help text describing the expected arguments."""
    if power:
        lines = [
            "Arguments at [1] onwards will have the necessary data to generate a .cmd file",
            "The first 3 arguments given by console [1] ... [3] will correspond to:",
            "[1] - fileName to save to",
            "[2] - name for VDD",
            "[3] - name for VSS",
            "Arguments at [4] onwards are inputs and outputs",
            "input arguments come first, then separated by '.' next comes outputs",
            "ex: irsimCmdCreationTool fileName VDD VSS input1 input2 input3 . out1 out2 out3",
        ]
    else:
        lines = [
            "Arguments at [1] onwards will have the necessary data to generate a .cmd file",
            "[1] - fileName to save to",
            "Arguments at [2] onwards are inputs and outputs",
            "input arguments come first, then separated by '.' next comes outputs",
            "ex: irsimCmdCreationTool fileName input1 input2 input3 . out1 out2 out3",
        ]
    return "\n".join(lines)


def parse_arguments(args: Sequence[str], power: bool) -> CommandSpec:
    """Build a spec from ``file [VDD VSS] inputs... . outputs...``."""
    args = list(args)
    minimum = 5 if power else 4
    if len(args) < minimum:
        raise UsageError("ERROR: Too few arguments passed in")

    filename = args[0]
    vdd = vss = None
    start = 1
    if power:
        vdd, vss = args[1], args[2]
        start = 3

    invalid = filename == SEPARATOR or args[start] in (SEPARATOR, "")
    if power and SEPARATOR in (vdd, vss):
        invalid = True
    if invalid:
        raise UsageError("Invalid data found '.'")

    inputs: list[str] = []
    outputs: list[str] = []
    seen_separator = False
    for value in args[start:]:
        if not seen_separator:
            if value == SEPARATOR:
                seen_separator = True
            else:
                inputs.append(value)
        elif value == SEPARATOR:
            raise UsageError("ERROR: Two '.' detected")
        else:
            outputs.append(value)

    if not outputs:
        raise UsageError("ERROR: No outputs found")
    return CommandSpec(filename, inputs, outputs, vdd, vss)


def truth_table_commands(spec: CommandSpec) -> str:
    """Return the command file text stepping through every input combination."""
    header = ["analyzer"]
    if spec.power:
        header += [spec.vdd, spec.vss]
    header += spec.inputs + spec.outputs
    parts = [" ".join(header) + "\n"]
    if spec.power:
        parts.append(f"h {spec.vdd}\nl {spec.vss}\n")
    for row in range(1 << len(spec.inputs)):
        for bit, name in enumerate(spec.inputs):
            level = "h" if (row >> bit) & 1 else "l"
            parts.append(f"{level} {name}\n")
        parts.append("s\n")
    parts.append("\n")
    return "".join(parts)


def write_commands(spec: CommandSpec, directory: str | Path) -> Path:
    """Write ``<filename>.cmd`` into ``directory`` and return its path."""
    path = Path(directory) / f"{spec.filename}.cmd"
    path.write_text(truth_table_commands(spec))
    return path


def _words(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _describe(spec: CommandSpec) -> None:
    print("The input was this: ")
    print(f"filename: {spec.filename}.cmd")
    if spec.power:
        print(f"VDD name: {spec.vdd}")
        print(f"VSS name: {spec.vss}")
    if len(spec.inputs) + len(spec.outputs) < DISPLAY_LIMIT:
        print("Inputs: ")
        for name in spec.inputs:
            print(name)
        print("Outputs: ")
        for name in spec.outputs:
            print(name)
    else:
        print("number of inputs + outputs is 10 or greater, will not display them")
    print("")


def main(argv: list[str] | None = None) -> int:
    """Ask for confirmation on standard input and write the command file."""
    args = sys.argv[1:] if argv is None else list(argv)
    words = _words(sys.stdin)

    print("Do you have a VDD name and VSS name? type 'yes' if so.")
    power = next(words, "").lower() == "yes"

    try:
        spec = parse_arguments(args, power)
    except UsageError as error:
        print(error)
        print(usage(power))
        return 1

    _describe(spec)
    print("Is this what you want? type 'yes' if this correct ")
    if next(words, "").lower() != "yes":
        print("you did not type 'yes' goodbye.")
        return 0

    try:
        write_commands(spec, Path.cwd())
    except OSError as error:
        print(f"could not write file: {error}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())