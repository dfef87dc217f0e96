"""Parse short and long options in the style of getopt_long."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, Sequence

PROGRAM = "testoptlong"


@dataclass(frozen=True)
class _LongOption:
    name: str
    takes_arg: bool
    short: str | None = None
    verbose: bool | None = None


_LONG_OPTIONS = (
    _LongOption("verbose", False, verbose=True),
    _LongOption("brief", False, verbose=False),
    _LongOption("add", False, short="a"),
    _LongOption("append", False, short="b"),
    _LongOption("delete", True, short="d"),
    _LongOption("create", True, short="c"),
    _LongOption("file", True, short="f"),
)

_FLAGS = "ab"
_WITH_VALUE = "cdf"


@dataclass
class LongOptions:
    """Messages produced while parsing, the verbose flag, operands and errors."""

    messages: list[str] = field(default_factory=list)
    verbose: bool = False
    operands: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def _report(result: LongOptions, short: str, value: str | None = None) -> None:
    if short in _FLAGS:
        result.messages.append(f"option -{short}\n\n")
    else:
        result.messages.append(f"option -{short} with value `{value}'\n")


def _lookup(name: str) -> list[_LongOption]:
    exact = [option for option in _LONG_OPTIONS if option.name == name]
    if exact:
        return exact
    return [option for option in _LONG_OPTIONS if option.name.startswith(name)]


def _parse_long(arg: str, rest: Iterator[str], result: LongOptions) -> None:
    name, sep, value = arg[2:].partition("=")
    matches = _lookup(name)
    if not matches:
        result.errors.append(f"unrecognized option '{arg}'")
        return
    if len(matches) > 1:
        choices = " ".join(f"'--{option.name}'" for option in matches)
        result.errors.append(
            f"option '--{name}' is ambiguous; possibilities: {choices}"
        )
        return
    option = matches[0]
    if not option.takes_arg:
        if sep:
            result.errors.append(
                f"option '--{option.name}' doesn't allow an argument"
            )
            return
    elif not sep:
        following = next(rest, None)
        if following is None:
            result.errors.append(f"option '--{option.name}' requires an argument")
            return
        value = following
    if option.verbose is not None:
        result.verbose = option.verbose
    else:
        _report(result, option.short, value if option.takes_arg else None)


def _parse_short(arg: str, rest: Iterator[str], result: LongOptions) -> None:
    for pos, char in enumerate(arg[1:], start=1):
        if char in _FLAGS:
            _report(result, char)
        elif char in _WITH_VALUE:
            value = arg[pos + 1:] or next(rest, None)
            if value is None:
                result.errors.append(f"option requires an argument -- '{char}'")
            else:
                _report(result, char, value)
            return
        else:
            result.errors.append(f"invalid option -- '{char}'")


def parse_args(argv: Sequence[str]) -> LongOptions:
    """Parse ``argv`` (without the program name); errors are collected, not raised."""
    result = LongOptions()
    rest = iter(argv)
    for arg in rest:
        if arg == "--":
            result.operands.extend(rest)
            break
        if arg.startswith("--"):
            _parse_long(arg, rest, result)
        elif arg.startswith("-") and arg != "-":
            _parse_short(arg, rest, result)
        else:
            result.operands.append(arg)
    return result


def render(options: LongOptions) -> str:
    """The standard output text for a parse result."""
    parts = list(options.messages)
    if options.verbose:
        parts.append("verbose flag is set\n")
    if options.operands:
        parts.append(
            "non-option ARGV-elements: "
            + "".join(f"{operand} " for operand in options.operands)
            + "\n"
        )
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Report every option seen, the verbose flag and the operands."""
    args = list(sys.argv[1:] if argv is None else argv)
    options = parse_args(args)
    for error in options.errors:
        print(f"{PROGRAM}: {error}", file=sys.stderr)
    sys.stdout.write(render(options))
    return 0