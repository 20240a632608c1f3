"""
caretdiag/info.py
═════════════════

The value consumed by the renderer.

Usage
─────
    from caretdiag import DiagnosticInfo, render

    info = DiagnosticInfo.error(
        "demo.src", "unknown identifier",
        position=(15, 18), source=text,
    )
    print(render(info))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from caretdiag.errors import CaretDiagError, ErrorCodes, InvalidRangeError
from caretdiag.severity import Severity

PositionLike = Union["ByteRange", Tuple[int, int], range]


@dataclass(frozen=True)
class ByteRange:
    """
    Half-open byte interval ``[start, end)`` into a source text.

    ``start == end`` is allowed (an empty span still gets a caret).
    """
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.start > self.end:
            raise InvalidRangeError(self.start, self.end)

    @property
    def width(self) -> int:
        return self.end - self.start

    @classmethod
    def coerce(cls, value: PositionLike) -> ByteRange:
        """Accept a ``ByteRange``, a ``(start, end)`` pair or a step-1 ``range``."""
        if isinstance(value, ByteRange):
            return value
        if isinstance(value, range):
            if value.step != 1:
                raise InvalidRangeError(value.start, value.stop)
            return cls(value.start, value.stop)
        start, end = value
        return cls(int(start), int(end))

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


@dataclass(frozen=True)
class DiagnosticInfo:
    """
    A single diagnostic: severity, file label, message and an optional
    byte span into the source text.

    Location details are only rendered when both ``position`` and
    ``source`` are present.
    """
    level: Severity
    filename: str
    message: str
    position: Optional[ByteRange] = None
    source: Optional[str] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.position is not None and not isinstance(self.position, ByteRange):
            object.__setattr__(self, "position", ByteRange.coerce(self.position))

    # ── convenience constructors ─────────────────────────────────────

    @classmethod
    def error(
        cls,
        filename: str,
        message: str,
        position: Optional[PositionLike] = None,
        source: Optional[str] = None,
    ) -> DiagnosticInfo:
        return cls(Severity.ERROR, filename, message, position, source)

    @classmethod
    def warning(
        cls,
        filename: str,
        message: str,
        position: Optional[PositionLike] = None,
        source: Optional[str] = None,
    ) -> DiagnosticInfo:
        return cls(Severity.WARNING, filename, message, position, source)

    @property
    def has_location(self) -> bool:
        return self.position is not None and self.source is not None

    # ── (de)serialisation ────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """JSON-compatible mapping; inverse of :meth:`from_dict`."""
        doc: Dict[str, Any] = {
            "level": self.level.name_text,
            "filename": self.filename,
            "message": self.message,
        }
        if self.position is not None:
            doc["start"] = self.position.start
            doc["end"] = self.position.end
        if self.source is not None:
            doc["source"] = self.source
        return doc

    @classmethod
    def from_dict(cls, doc: Dict[str, Any]) -> DiagnosticInfo:
        missing = [k for k in ("filename", "message") if k not in doc]
        if missing:
            raise CaretDiagError(
                f"diagnostic document is missing: {', '.join(missing)}",
                ErrorCodes.INVALID_DOCUMENT,
            )
        if ("start" in doc) != ("end" in doc):
            raise CaretDiagError(
                "diagnostic document needs both 'start' and 'end'",
                ErrorCodes.INVALID_DOCUMENT,
            )

        position = None
        if "start" in doc:
            try:
                start, end = int(doc["start"]), int(doc["end"])
            except (TypeError, ValueError):
                raise CaretDiagError(
                    f"non-integer range {doc['start']!r}..{doc['end']!r}",
                    ErrorCodes.INVALID_DOCUMENT,
                ) from None
            position = ByteRange(start, end)

        level = doc.get("level", "error")
        if not isinstance(level, str):
            raise CaretDiagError(
                f"'level' must be a string, got {level!r}",
                ErrorCodes.INVALID_DOCUMENT,
            )
        source = doc.get("source")
        if source is not None and not isinstance(source, str):
            raise CaretDiagError(
                f"'source' must be a string, got {type(source).__name__}",
                ErrorCodes.INVALID_DOCUMENT,
            )

        return cls(
            level=Severity.from_string(level),
            filename=str(doc["filename"]),
            message=str(doc["message"]),
            position=position,
            source=source,
        )

    def __str__(self) -> str:
        from caretdiag.render import PlainBackend, render

        return render(self, PlainBackend())


__all__ = ["ByteRange", "DiagnosticInfo", "PositionLike"]
