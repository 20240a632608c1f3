"""
caretdiag/config.py
═══════════════════

Render configuration.

Environment
───────────
  • CARETDIAG_COLOR   : ``auto`` (default), ``always`` or ``never``
  • NO_COLOR          : any non-empty value means ``never`` unless
                        CARETDIAG_COLOR says otherwise
  • CARETDIAG_BACKEND : ``terminal`` (default), ``plain`` or ``html``
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Mapping, Optional, TextIO

from caretdiag.errors import ConfigError

BACKENDS = ("terminal", "plain", "html")


class ColourMode(enum.Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def parse(cls, text: str) -> ColourMode:
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise ConfigError("colour mode", text, [m.value for m in cls]) from None


@dataclass(frozen=True)
class RenderConfig:
    colour: ColourMode = ColourMode.AUTO
    backend: str = "terminal"

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ConfigError("backend", self.backend, list(BACKENDS))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> RenderConfig:
        """Build a config from ``CARETDIAG_*`` / ``NO_COLOR`` variables."""
        env = os.environ if environ is None else environ

        colour = ColourMode.AUTO
        raw_colour = env.get("CARETDIAG_COLOR", "")
        if raw_colour:
            colour = ColourMode.parse(raw_colour)
        elif env.get("NO_COLOR", ""):
            colour = ColourMode.NEVER

        backend = env.get("CARETDIAG_BACKEND", "").strip().lower() or "terminal"
        return cls(colour=colour, backend=backend)

    def use_colour(self, stream: Optional[TextIO] = None) -> bool:
        """Resolve ``AUTO`` against *stream*: colour only on a tty."""
        if self.colour is ColourMode.ALWAYS:
            return True
        if self.colour is ColourMode.NEVER:
            return False
        return stream is not None and hasattr(stream, "isatty") and stream.isatty()


__all__ = ["BACKENDS", "ColourMode", "RenderConfig"]
