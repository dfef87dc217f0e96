"""Open a file, copy it to a stream and describe the open file."""

from __future__ import annotations

import sys
from typing import IO, Sequence

USAGE = "usage: [./fmgmt hello.txt]"
_CHUNK = 65536


def sopen(path: str, mode: str = "r") -> IO:
    """Open ``path`` with ``mode``; raises OSError when it cannot be opened."""
    return open(path, mode)


def s2s(source: IO, stream: IO) -> int:
    """Copy everything left in ``source`` to ``stream``; return the amount copied."""
    total = 0
    while chunk := source.read(_CHUNK):
        stream.write(chunk)
        total += len(chunk)
    return total


def stream_info(stream: IO) -> str:
    """Describe an open file: its descriptor and open mode."""
    mode = getattr(stream, "mode", "")
    return f"_fileno:{stream.fileno()}\n_mode:{mode}\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print a file named on the command line, followed by details of the open file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(USAGE)
        return 1
    path = args[0]
    try:
        source = sopen(path, "r")
    except OSError:
        print(f"{path} failed!")
        return 2
    with source:
        print(f"{path} opened!")
        s2s(source, sys.stdout)
        sys.stdout.write(stream_info(source))
    return 0