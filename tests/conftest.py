# tests/conftest.py
"""Shared fixtures for the caretdiag test-suite."""

import pytest


SAMPLE_SOURCE = "let x = 1;\nlet y bad;"


@pytest.fixture
def sample_source():
    """Two lines; line 2 starts at byte 11 and ``bad`` sits at 17..20."""
    return SAMPLE_SOURCE


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's colour settings out of every test."""
    for var in ("CARETDIAG_COLOR", "CARETDIAG_BACKEND", "NO_COLOR",
                "FORCE_COLOR", "ANSI_COLORS_DISABLED"):
        monkeypatch.delenv(var, raising=False)


class FakeTty:
    """Minimal text stream that claims (or denies) being a terminal."""

    def __init__(self, tty=True):
        self._tty = tty
        self.chunks = []

    def isatty(self):
        return self._tty

    def write(self, text):
        self.chunks.append(text)
        return len(text)

    def flush(self):
        pass

    def getvalue(self):
        return "".join(self.chunks)


@pytest.fixture
def fake_tty():
    return FakeTty(tty=True)
