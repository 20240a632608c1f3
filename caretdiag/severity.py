"""
caretdiag/severity.py
═════════════════════

Diagnostic severity levels and their presentation constants.
"""

from __future__ import annotations

import enum

from caretdiag.errors import UnknownSeverityError


class Severity(enum.Enum):
    """
    Diagnostic severity levels.

    Each carries:
      • name_text — the lowercase name used in documents and on the CLI
      • label     — the exact text placed between header and message
      • colour    — termcolor colour name
    """

    WARNING = ("warning", " warning: ", "magenta")
    ERROR = ("error", " error: ", "red")

    def __init__(self, name_text: str, label: str, colour: str) -> None:
        self.name_text = name_text
        self.label = label
        self.colour = colour

    @classmethod
    def from_string(cls, s: str) -> Severity:
        """Parse a severity from its name (case-insensitive)."""
        s_low = s.strip().lower()
        for member in cls:
            if member.name_text == s_low:
                return member
        raise UnknownSeverityError(s)

    def __str__(self) -> str:
        return self.name_text


__all__ = ["Severity"]
