"""Command line entry point: ``pipex infile cmd ... outfile``."""

from __future__ import annotations

import contextlib
import os
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Invocation:
    """The parsed command line."""

    infile: str
    commands: Tuple[str, ...]
    outfile: str


def parse_arguments(argv: Sequence[str]) -> Invocation:
    """Split arguments (program name excluded) into infile, commands, outfile."""
    args: List[str] = list(argv)
    if len(args) < 2:
        raise ValueError("usage: pipex infile cmd ... outfile")
    return Invocation(args[0], tuple(args[1:-1]), args[-1])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the input file and create or truncate the output file."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        invocation = parse_arguments(argv)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    infile = None
    with contextlib.suppress(OSError):
        infile = os.open(invocation.infile, os.O_RDONLY)
    try:
        outfile = os.open(
            invocation.outfile, os.O_RDWR | os.O_CREAT | os.O_TRUNC, 0o644
        )
    except OSError as exc:
        print(f"{invocation.outfile}: {exc.strerror}", file=sys.stderr)
        return 1
    finally:
        if infile is not None:
            os.close(infile)
    os.close(outfile)
    return 0