# tests/test_info.py
"""
Tests for the data model: Severity, ByteRange, DiagnosticInfo and the
error hierarchy they raise.
"""

import dataclasses

import pytest

from caretdiag.errors import (
    CaretDiagError,
    ErrorCode,
    ErrorCodes,
    InvalidRangeError,
    UnknownSeverityError,
)
from caretdiag.info import ByteRange, DiagnosticInfo
from caretdiag.severity import Severity


class TestSeverity:

    def test_labels(self):
        assert Severity.WARNING.label == " warning: "
        assert Severity.ERROR.label == " error: "

    def test_colours(self):
        assert Severity.WARNING.colour == "magenta"
        assert Severity.ERROR.colour == "red"

    def test_closed_enumeration(self):
        assert {s.name for s in Severity} == {"WARNING", "ERROR"}

    @pytest.mark.parametrize("text,expected", [
        ("error", Severity.ERROR),
        ("ERROR", Severity.ERROR),
        (" Warning ", Severity.WARNING),
    ])
    def test_from_string(self, text, expected):
        assert Severity.from_string(text) is expected

    def test_from_string_unknown(self):
        with pytest.raises(UnknownSeverityError) as info:
            Severity.from_string("fatal")
        assert info.value.name == "fatal"
        assert isinstance(info.value, ValueError)

    def test_str(self):
        assert str(Severity.WARNING) == "warning"


class TestByteRange:

    def test_width(self):
        assert ByteRange(4, 7).width == 3
        assert ByteRange(5, 5).width == 0

    def test_start_after_end(self):
        with pytest.raises(InvalidRangeError):
            ByteRange(7, 4)

    def test_negative_start(self):
        with pytest.raises(InvalidRangeError):
            ByteRange(-1, 2)

    def test_invalid_range_is_value_error(self):
        with pytest.raises(ValueError):
            ByteRange(3, 1)

    def test_coerce(self):
        assert ByteRange.coerce((1, 3)) == ByteRange(1, 3)
        assert ByteRange.coerce(range(2, 6)) == ByteRange(2, 6)
        r = ByteRange(0, 1)
        assert ByteRange.coerce(r) is r

    def test_coerce_stepped_range(self):
        with pytest.raises(InvalidRangeError):
            ByteRange.coerce(range(0, 6, 2))

    def test_str(self):
        assert str(ByteRange(4, 7)) == "4..7"


class TestDiagnosticInfo:

    def test_constructors(self):
        err = DiagnosticInfo.error("a", "m")
        warn = DiagnosticInfo.warning("a", "m")
        assert err.level is Severity.ERROR
        assert warn.level is Severity.WARNING
        assert err.position is None and err.source is None

    def test_position_is_normalised(self):
        info = DiagnosticInfo.error("a", "m", (1, 2), "xyz")
        assert info.position == ByteRange(1, 2)

    def test_invalid_position_rejected(self):
        with pytest.raises(InvalidRangeError):
            DiagnosticInfo.error("a", "m", (2, 1), "xyz")

    def test_immutable(self):
        info = DiagnosticInfo.error("a", "m")
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.message = "other"

    def test_has_location(self):
        assert DiagnosticInfo.error("a", "m", (0, 1), "x").has_location
        assert not DiagnosticInfo.error("a", "m", (0, 1)).has_location
        assert not DiagnosticInfo.error("a", "m", source="x").has_location

    def test_repr_hides_source(self):
        info = DiagnosticInfo.error("a", "m", (0, 1), "secret source text")
        assert "secret source text" not in repr(info)


class TestDocuments:

    def test_to_dict_full(self):
        info = DiagnosticInfo.warning("a.src", "m", (1, 3), "abcd")
        assert info.to_dict() == {
            "level": "warning",
            "filename": "a.src",
            "message": "m",
            "start": 1,
            "end": 3,
            "source": "abcd",
        }

    def test_to_dict_minimal(self):
        assert DiagnosticInfo.error("a.src", "m").to_dict() == {
            "level": "error",
            "filename": "a.src",
            "message": "m",
        }

    def test_from_dict(self):
        info = DiagnosticInfo.from_dict({
            "level": "warning",
            "filename": "a.src",
            "message": "m",
            "start": 1,
            "end": 3,
            "source": "abcd",
        })
        assert info == DiagnosticInfo.warning("a.src", "m", (1, 3), "abcd")

    def test_from_dict_defaults_to_error(self):
        info = DiagnosticInfo.from_dict({"filename": "a", "message": "m"})
        assert info.level is Severity.ERROR

    def test_from_dict_missing_fields(self):
        with pytest.raises(CaretDiagError) as info:
            DiagnosticInfo.from_dict({"filename": "a"})
        assert info.value.code == ErrorCodes.INVALID_DOCUMENT
        assert "message" in info.value.message

    def test_from_dict_half_range(self):
        with pytest.raises(CaretDiagError):
            DiagnosticInfo.from_dict({"filename": "a", "message": "m", "start": 1})

    def test_from_dict_non_integer_range(self):
        with pytest.raises(CaretDiagError):
            DiagnosticInfo.from_dict(
                {"filename": "a", "message": "m", "start": "x", "end": 2}
            )

    @pytest.mark.parametrize("doc", [
        {"filename": "a", "message": "m", "level": 3},
        {"filename": "a", "message": "m", "level": None},
        {"filename": "a", "message": "m", "start": 0, "end": 1, "source": 5},
        {"filename": "a", "message": "m", "source": ["x"]},
    ])
    def test_from_dict_wrong_field_types(self, doc):
        with pytest.raises(CaretDiagError) as info:
            DiagnosticInfo.from_dict(doc)
        assert info.value.code == ErrorCodes.INVALID_DOCUMENT

    def test_from_dict_bad_level(self):
        with pytest.raises(UnknownSeverityError):
            DiagnosticInfo.from_dict({"filename": "a", "message": "m", "level": "x"})


class TestErrorCodes:

    def test_format(self):
        assert ErrorCodes.OFFSET_OUT_OF_RANGE.code == "CDIAG-0001"
        assert str(ErrorCodes.INVALID_CONFIG) == "CDIAG-0200"

    def test_equality(self):
        assert ErrorCode("CDIAG", 2, "x") == ErrorCodes.INVALID_RANGE
        assert ErrorCodes.INVALID_RANGE == "CDIAG-0002"
        assert ErrorCodes.INVALID_RANGE != 2
        assert len({ErrorCode("CDIAG", 2, "a"), ErrorCode("CDIAG", 2, "b")}) == 1

    def test_exception_codes(self):
        assert InvalidRangeError(3, 1).code == ErrorCodes.INVALID_RANGE
        assert UnknownSeverityError("x").code == ErrorCodes.UNKNOWN_SEVERITY
