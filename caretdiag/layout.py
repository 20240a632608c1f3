"""
caretdiag/layout.py
═══════════════════

Plain-text layout of a diagnostic and its styled-segment form.

A rendered diagnostic is always five pieces, in this order::

    header   demo.src:2:5           bold
    label    " error: "             bold + severity colour
    message  unknown identifier     bold
    context  "\\n" + source line    unstyled
    caret    "\\n    ^~~"           bold + severity colour

The pieces carry their own leading newlines, so concatenating them with no
separator gives the finished text. No backend is needed to build or test
the layout; backends only consume the segment list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Optional

from caretdiag.info import DiagnosticInfo
from caretdiag.position import line_text, position
from caretdiag.severity import Severity

_log = logging.getLogger(__name__)


class Layout(NamedTuple):
    """The five unstyled pieces of a diagnostic, in output order."""
    header: str
    label: str
    message: str
    context: str
    caret: str

    def plain(self) -> str:
        return "".join(self)


@dataclass(frozen=True)
class Style:
    """Presentation of one segment: bold and/or a termcolor colour name."""
    bold: bool = False
    colour: Optional[str] = None

    @property
    def is_default(self) -> bool:
        return not self.bold and self.colour is None


DEFAULT = Style()
BOLD = Style(bold=True)


class StyledSegment(NamedTuple):
    text: str
    style: Style


def caret_line(column: int, width: int) -> str:
    """``column`` spaces, one ``^``, then ``width - 1`` tildes (none for width 0)."""
    return "\n" + " " * column + "^" + "~" * max(width - 1, 0)


def build_layout(info: DiagnosticInfo) -> Layout:
    """Assemble the plain-text pieces for *info*."""
    header = info.filename
    context = ""
    caret = ""

    if info.position is not None and info.source is not None:
        line_idx, column_idx = position(info.source, info.position.start)
        header = f"{info.filename}:{line_idx + 1}:{column_idx + 1}"
        context = "\n" + line_text(info.source, line_idx)
        caret = caret_line(column_idx, info.position.width)
    elif info.position is not None or info.source is not None:
        _log.debug("%s: position and source not both given, location omitted",
                   info.filename)

    return Layout(header, info.level.label, info.message, context, caret)


def style_segments(layout: Layout, level: Severity) -> List[StyledSegment]:
    """Pair each layout piece with its style."""
    accent = Style(bold=True, colour=level.colour)
    return [
        StyledSegment(layout.header, BOLD),
        StyledSegment(layout.label, accent),
        StyledSegment(layout.message, BOLD),
        StyledSegment(layout.context, DEFAULT),
        StyledSegment(layout.caret, accent),
    ]


__all__ = [
    "Layout",
    "Style",
    "StyledSegment",
    "DEFAULT",
    "BOLD",
    "caret_line",
    "build_layout",
    "style_segments",
]
