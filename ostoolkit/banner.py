"""Boxed title banners shown at the top of the interactive tools."""

from __future__ import annotations

import sys
from typing import TextIO

_INDENT = "\t\t\t\t"


def header_lines(text: str) -> list[str]:
    """Return the three lines of a boxed banner around ``text``."""
    rule = f"{_INDENT}<{'=' * (len(text) + 8)}>"
    return [rule, f"{_INDENT}=   {text}   =", rule]


def print_header(text: str, file: TextIO | None = None) -> None:
    """Write the banner for ``text``; the last line is left unterminated."""
    out = file if file is not None else sys.stdout
    out.write("\n".join(header_lines(text)))
    out.flush()