"""
caretdiag — Compiler-style diagnostic rendering
===============================================

Formats a single error or warning as::

    prog.src:2:5 error: unknown identifier
    let yy = x;
        ^~

with the header, label and message in bold, the label and underline in the
severity colour, and the offending source line in between. Offsets are byte
offsets into the UTF-8 source.

Core modules
------------
severity
    ``Severity`` enumeration with its label text and colour.
info
    ``ByteRange`` and the immutable ``DiagnosticInfo`` value.
position
    Byte offset → zero-indexed ``(line, column)`` mapping.
layout
    The five plain-text pieces of a diagnostic and their styles.
render
    Terminal (termcolor), plain and HTML (Jinja2) backends; ``render`` and
    ``write``.
config
    ``RenderConfig`` built from flags or ``CARETDIAG_*`` variables.
errors
    ``CaretDiagError`` and its subclasses.
main
    Command-line interface (``caretdiag`` / ``python -m caretdiag``).

Quick start
-----------
>>> from caretdiag import DiagnosticInfo, render, PlainBackend
>>> info = DiagnosticInfo.error("a.src", "bad token", (4, 7), "abc\\ndef ghi")
>>> print(render(info, PlainBackend()))
a.src:2:1 error: bad token
def ghi
^~~
"""

from __future__ import annotations

import logging
from typing import List

__version__ = "0.1.0"

_log = logging.getLogger(__name__)
_log.addHandler(logging.NullHandler())

from caretdiag.config import ColourMode, RenderConfig  # noqa: E402
from caretdiag.errors import (  # noqa: E402
    CaretDiagError,
    ConfigError,
    InvalidRangeError,
    PositionOutOfRangeError,
    UnknownSeverityError,
)
from caretdiag.info import ByteRange, DiagnosticInfo  # noqa: E402
from caretdiag.layout import Layout, Style, StyledSegment, build_layout, style_segments  # noqa: E402
from caretdiag.position import line_start_offset, line_text, position  # noqa: E402
from caretdiag.render import (  # noqa: E402
    Backend,
    HtmlBackend,
    PlainBackend,
    TerminalBackend,
    render,
    select_backend,
    strip_styles,
    write,
)
from caretdiag.severity import Severity  # noqa: E402

__all__: List[str] = [
    "__version__",
    "Severity",
    "ByteRange",
    "DiagnosticInfo",
    "position",
    "line_text",
    "line_start_offset",
    "Layout",
    "Style",
    "StyledSegment",
    "build_layout",
    "style_segments",
    "Backend",
    "PlainBackend",
    "TerminalBackend",
    "HtmlBackend",
    "select_backend",
    "render",
    "write",
    "strip_styles",
    "ColourMode",
    "RenderConfig",
    "CaretDiagError",
    "ConfigError",
    "InvalidRangeError",
    "PositionOutOfRangeError",
    "UnknownSeverityError",
]
