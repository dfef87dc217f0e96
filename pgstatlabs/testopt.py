"""Parse the short options -a, -b and -c VALUE, in the style of getopt."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, Sequence


class OptionError(ValueError):
    """An unknown option or an option missing its argument."""

    def __init__(self, message: str, optopt: str) -> None:
        super().__init__(message)
        self.optopt = optopt


@dataclass
class ShortOptions:
    """The result of parsing: two flags, one value and the operands."""

    aflag: bool = False
    bflag: bool = False
    cvalue: str | None = None
    operands: list[str] = field(default_factory=list)


def _unknown(char: str) -> OptionError:
    if char.isprintable():
        return OptionError(f"Unknown option `-{char}'.", char)
    return OptionError(f"Unknown option character `\\x{ord(char):x}'.", char)


def _parse_cluster(arg: str, rest: Iterator[str], result: ShortOptions) -> None:
    for pos, char in enumerate(arg[1:], start=1):
        if char == "a":
            result.aflag = True
        elif char == "b":
            result.bflag = True
        elif char == "c":
            value = arg[pos + 1:] or next(rest, None)
            if value is None:
                raise OptionError("Option -c requires an argument.", "c")
            result.cvalue = value
            return
        else:
            raise _unknown(char)


def parse_args(argv: Sequence[str]) -> ShortOptions:
    """Parse ``argv`` (without the program name); options may follow operands."""
    result = ShortOptions()
    rest = iter(argv)
    for arg in rest:
        if arg == "--":
            result.operands.extend(rest)
            break
        if arg.startswith("-") and arg != "-":
            _parse_cluster(arg, rest, result)
        else:
            result.operands.append(arg)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Print the parsed flags and every operand."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_args(args)
    except OptionError as error:
        print(error, file=sys.stderr)
        return 1
    cvalue = options.cvalue if options.cvalue is not None else "(null)"
    print(
        f"aflag = {int(options.aflag)}, bflag = {int(options.bflag)}, "
        f"cvalue = {cvalue}"
    )
    for operand in options.operands:
        print(f"Non-option argument {operand}")
    return 0