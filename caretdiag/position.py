"""
caretdiag/position.py
═════════════════════

Byte-offset → (line, column) mapping.

Offsets are measured in bytes of the UTF-8 encoding of the source, not in
Python characters, so ranges produced by byte-oriented lexers line up.
Lines and columns are zero-indexed here; the layout builder adds one for
display.

Boundary rule
─────────────
An offset that sits exactly on a newline belongs to the *end* of the line
the newline terminates, not to the start of the next one::

    >>> position("abc\\ndef", 3)
    (0, 3)
    >>> position("abc\\ndef", 4)
    (1, 0)
"""

from __future__ import annotations

import logging
from typing import Tuple

from caretdiag.errors import PositionOutOfRangeError

_log = logging.getLogger(__name__)


def position(source: str, offset: int) -> Tuple[int, int]:
    """
    Return the zero-indexed ``(line, column)`` of byte *offset* in *source*.

    Raises :class:`PositionOutOfRangeError` when *offset* is negative or
    past the end of the encoded source.
    """
    data = source.encode("utf-8")
    if offset < 0:
        raise PositionOutOfRangeError(offset, len(data))

    consumed = 0
    for line_idx, line in enumerate(data.split(b"\n")):
        line_length = len(line)
        # >= keeps an offset on the newline itself on this line
        if consumed + line_length >= offset:
            _log.debug("offset %d -> line %d, column %d",
                       offset, line_idx, offset - consumed)
            return line_idx, offset - consumed
        consumed += line_length + 1

    raise PositionOutOfRangeError(offset, len(data))


def line_text(source: str, line: int) -> str:
    """Return the text of zero-indexed *line*, without its newline."""
    lines = source.split("\n")
    if not 0 <= line < len(lines):
        raise PositionOutOfRangeError(line, len(lines), unit="line")
    return lines[line]


def line_start_offset(source: str, line: int) -> int:
    """Byte offset at which zero-indexed *line* begins."""
    lines = source.encode("utf-8").split(b"\n")
    if not 0 <= line < len(lines):
        raise PositionOutOfRangeError(line, len(lines), unit="line")
    return sum(len(prior) + 1 for prior in lines[:line])


__all__ = ["position", "line_text", "line_start_offset"]
