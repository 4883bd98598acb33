"""Command that reads one integer from standard input and echoes it."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _read_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return max(_INT_MIN, min(_INT_MAX, int(match.group(1))))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a leading 32-bit integer from stdin and write it back without a newline.

    Input that does not start with an integer yields 0; values out of range
    are clamped to the 32-bit limits.
    """
    parser = argparse.ArgumentParser(
        prog="arraydrills",
        description="Echo the integer read from standard input.",
    )
    parser.parse_args(argv)
    sys.stdout.write(str(_read_int(sys.stdin.read())))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())