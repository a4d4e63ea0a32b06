"""Generate the IRSIM command file that exercises the 512-way decoder."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

DEFAULT_FILE = "decoder512_test.cmd"
SELECT_BITS = 9
OUTPUT_GROUPS = ((0, 44), (45, 89), (90, 134), (135, 179), (180, 224), (225, 255))


def output_vector(first: int, last: int) -> str:
    """Return the ``vector`` command grouping the outputs ``first``..``last``."""
    if first > last:
        raise ValueError("first index must not exceed last index")
    members = "".join(
        f"{{tester512_1_0[{i}]/out1}} {{tester512_1_0[{i}]/out0}} "
        for i in range(last, first - 1, -1)
    )
    return f"vector out{first}to{last} {members}"


def decoder_commands() -> str:
    """Return the full text of the decoder test command file."""
    select = " ".join(f"s{bit}" for bit in range(SELECT_BITS - 1, -1, -1))
    watched = " ".join(f"out{first}to{last}" for first, last in OUTPUT_GROUPS)
    lines = [
        "stepsize 50",
        "logfile decoder512_test.log",
        "w VDD VSS",
        f"vector sel {select}",
        *(output_vector(first, last) for first, last in OUTPUT_GROUPS),
        f"w sel {watched} ",
        "h VDD",
        "l VSS",
    ]
    for value in range(1 << SELECT_BITS):
        lines.append(f"setvector sel 0d{value}")
        lines.append("s")
    lines.append("logfile ")
    return "".join(f"{line}\n" for line in lines)


def write_decoder_commands(path: str | Path) -> Path:
    """Write the decoder command file to ``path`` and return it."""
    path = Path(path)
    path.write_text(decoder_commands())
    return path


def main(argv: list[str] | None = None) -> int:
    """Write the decoder command file."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-o", "--output", default=DEFAULT_FILE)
    args = parser.parse_args(argv)
    write_decoder_commands(args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())