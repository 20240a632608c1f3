"""
caretdiag/render.py
═══════════════════

Turn a :class:`DiagnosticInfo` into text.

Output formats
──────────────
  • Terminal : ANSI bold/colour via termcolor (default on a tty)
  • Plain    : the layout text untouched (non-tty, log files)
  • HTML     : a ``<pre>`` fragment with one ``<span>`` per styled segment

All three consume the same segment list from :mod:`caretdiag.layout`, so
swapping backend never changes the text content, only its decoration.

Usage
─────
    from caretdiag import DiagnosticInfo, render, write

    info = DiagnosticInfo.warning("a.src", "unused value", (4, 5), text)
    write(info)                 # stderr, coloured if it is a tty
    s = render(info)            # string, per RenderConfig.from_env()
"""

from __future__ import annotations

import logging
import re
import sys
from typing import List, Optional, Sequence, TextIO

import jinja2
from termcolor import colored

from caretdiag.config import RenderConfig
from caretdiag.info import DiagnosticInfo
from caretdiag.layout import StyledSegment, build_layout, style_segments

_log = logging.getLogger(__name__)

_ANSI_SGR = re.compile(r"\x1b\[[0-9;]*m")


def strip_styles(text: str) -> str:
    """Remove ANSI SGR escape sequences from *text*."""
    return _ANSI_SGR.sub("", text)


# ═════════════════════════════════════════════════════════════════════════
#  BACKENDS
# ═════════════════════════════════════════════════════════════════════════

class Backend:
    """Concatenates painted segments; subclasses decide how to paint."""

    name = "plain"

    def paint(self, segment: StyledSegment) -> str:
        return segment.text

    def render_segments(self, segments: Sequence[StyledSegment]) -> str:
        return "".join(self.paint(seg) for seg in segments)


class PlainBackend(Backend):
    """No decoration at all."""


class TerminalBackend(Backend):
    """ANSI escapes via termcolor; colour is forced, the caller already chose."""

    name = "terminal"

    def paint(self, segment: StyledSegment) -> str:
        text, style = segment
        if not text or style.is_default:
            return text
        attrs = ["bold"] if style.bold else None
        return colored(text, style.colour, attrs=attrs, force_color=True)


_HTML_TEMPLATE = (
    '<pre class="caretdiag">'
    "{% for seg in segments %}"
    "{% if seg.classes %}"
    '<span class="{{ seg.classes }}">{{ seg.text }}</span>'
    "{% else %}{{ seg.text }}{% endif %}"
    "{% endfor %}"
    "</pre>"
)


class HtmlBackend(Backend):
    """Renders to an autoescaped HTML fragment with Jinja2."""

    name = "html"

    def __init__(self, template: Optional[str] = None) -> None:
        env = jinja2.Environment(autoescape=True)
        self._template = env.from_string(template or _HTML_TEMPLATE)

    @staticmethod
    def css_classes(segment: StyledSegment) -> str:
        classes: List[str] = []
        if segment.style.bold:
            classes.append("bold")
        if segment.style.colour:
            classes.append(f"fg-{segment.style.colour}")
        return " ".join(classes)

    def render_segments(self, segments: Sequence[StyledSegment]) -> str:
        items = [
            {"text": seg.text, "classes": self.css_classes(seg)}
            for seg in segments
            if seg.text
        ]
        return self._template.render(segments=items)


def select_backend(config: RenderConfig, stream: Optional[TextIO] = None) -> Backend:
    """Pick the backend *config* asks for, honouring the colour mode."""
    if config.backend == "html":
        backend: Backend = HtmlBackend()
    elif config.backend == "plain" or not config.use_colour(stream):
        backend = PlainBackend()
    else:
        backend = TerminalBackend()
    _log.debug("selected %s backend (colour=%s)", backend.name, config.colour.value)
    return backend


# ═════════════════════════════════════════════════════════════════════════
#  ENTRY POINTS
# ═════════════════════════════════════════════════════════════════════════

def render(
    info: DiagnosticInfo,
    backend: Optional[Backend] = None,
    config: Optional[RenderConfig] = None,
) -> str:
    """
    Render *info* to a string.

    Without an explicit *backend* one is chosen from *config* (or the
    environment); with no stream to inspect, ``auto`` colour means plain.
    """
    if backend is None:
        backend = select_backend(config or RenderConfig.from_env())
    layout = build_layout(info)
    return backend.render_segments(style_segments(layout, info.level))


def write(
    info: DiagnosticInfo,
    stream: Optional[TextIO] = None,
    config: Optional[RenderConfig] = None,
) -> None:
    """Render *info* followed by a newline to *stream* (default stderr)."""
    if stream is None:
        stream = sys.stderr
    backend = select_backend(config or RenderConfig.from_env(), stream)
    stream.write(render(info, backend) + "\n")
    stream.flush()


__all__ = [
    "Backend",
    "PlainBackend",
    "TerminalBackend",
    "HtmlBackend",
    "select_backend",
    "render",
    "write",
    "strip_styles",
]
