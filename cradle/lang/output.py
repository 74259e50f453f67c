"""Emission primitives: tab-prefixed text, with or without a line terminator."""

import sys


def emit(s, file=None):
    """Output a string with tab."""
    print(f"\t{s}", end="", file=file if file is not None else sys.stdout)


def emitln(s, file=None):
    """Output a string with tab and newline."""
    print(f"\t{s}", file=file if file is not None else sys.stdout)
