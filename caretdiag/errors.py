# caretdiag/errors.py
"""
caretdiag Error Types

Exceptions raised by the diagnostic renderer when a caller hands it input
that breaks a precondition. Rendering itself never fails for well-formed
input; a missing position or missing source text is a recognised degraded
mode and is *not* reported through this module.

Error Hierarchy:
────────────────
┌─────────────────────────────────────────────────────────────────────────┐
│  CaretDiagError (base)                                                  │
│  ├── PositionOutOfRangeError  - byte offset outside the source text     │
│  ├── InvalidRangeError        - negative start, or start > end          │
│  ├── UnknownSeverityError     - severity name not in the enumeration    │
│  └── ConfigError              - bad colour mode / backend name          │
└─────────────────────────────────────────────────────────────────────────┘

Each concrete error also derives from the matching builtin (``IndexError``
or ``ValueError``) so callers that only know the builtin still catch it.

Error Codes:
────────────
Every error carries a code of the form ``CDIAG-NNNN``:
  - 0001-0099: position / range errors
  - 0100-0199: data-model errors
  - 0200-0299: configuration errors
"""

from __future__ import annotations

from typing import Optional


# ═══════════════════════════════════════════════════════════════════════════
# ERROR CODES
# ═══════════════════════════════════════════════════════════════════════════

class ErrorCode:
    """Structured ``PREFIX-NNNN`` error code."""

    __slots__ = ("prefix", "number", "summary")

    def __init__(self, prefix: str, number: int, summary: str) -> None:
        self.prefix = prefix
        self.number = number
        self.summary = summary

    @property
    def code(self) -> str:
        return f"{self.prefix}-{self.number:04d}"

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"ErrorCode({self.code!r}, {self.summary!r})"

    def __hash__(self) -> int:
        return hash((self.prefix, self.number))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ErrorCode):
            return self.prefix == other.prefix and self.number == other.number
        if isinstance(other, str):
            return self.code == other
        return False


class ErrorCodes:
    """Predefined error codes."""

    OFFSET_OUT_OF_RANGE = ErrorCode("CDIAG", 1, "byte offset outside source text")
    INVALID_RANGE = ErrorCode("CDIAG", 2, "malformed byte range")
    UNKNOWN_SEVERITY = ErrorCode("CDIAG", 100, "unknown severity name")
    INVALID_DOCUMENT = ErrorCode("CDIAG", 101, "malformed diagnostic document")
    INVALID_CONFIG = ErrorCode("CDIAG", 200, "invalid configuration value")


# ═══════════════════════════════════════════════════════════════════════════
# EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════════════

class CaretDiagError(Exception):
    """Base exception for all caretdiag errors."""

    default_code: ErrorCode = ErrorCodes.INVALID_DOCUMENT

    def __init__(self, message: str, code: Optional[ErrorCode] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class PositionOutOfRangeError(CaretDiagError, IndexError):
    """A byte offset does not fall inside (or at the end of) the source."""

    default_code = ErrorCodes.OFFSET_OUT_OF_RANGE

    def __init__(self, offset: int, length: int, unit: str = "byte") -> None:
        super().__init__(
            f"{unit} offset {offset} is outside source of {length} {unit}s"
        )
        self.offset = offset
        self.length = length


class InvalidRangeError(CaretDiagError, ValueError):
    """A byte range with a negative start or ``start > end``."""

    default_code = ErrorCodes.INVALID_RANGE

    def __init__(self, start: int, end: int) -> None:
        super().__init__(f"invalid byte range [{start}, {end})")
        self.start = start
        self.end = end


class UnknownSeverityError(CaretDiagError, ValueError):
    """Severity name that is neither ``warning`` nor ``error``."""

    default_code = ErrorCodes.UNKNOWN_SEVERITY

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown severity {name!r}")
        self.name = name


class ConfigError(CaretDiagError, ValueError):
    """Unrecognised configuration value."""

    default_code = ErrorCodes.INVALID_CONFIG

    def __init__(self, setting: str, value: str, allowed: Optional[list] = None) -> None:
        msg = f"invalid {setting} {value!r}"
        if allowed:
            msg += f", expected one of: {', '.join(allowed)}"
        super().__init__(msg)
        self.setting = setting
        self.value = value


__all__ = [
    "ErrorCode",
    "ErrorCodes",
    "CaretDiagError",
    "PositionOutOfRangeError",
    "InvalidRangeError",
    "UnknownSeverityError",
    "ConfigError",
]
