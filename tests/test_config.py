# tests/test_config.py
"""Tests for RenderConfig: colour-mode parsing, environment and tty rules."""

import io

import pytest

from caretdiag.config import ColourMode, RenderConfig
from caretdiag.errors import ConfigError


class TestColourMode:

    @pytest.mark.parametrize("text,expected", [
        ("auto", ColourMode.AUTO),
        ("ALWAYS", ColourMode.ALWAYS),
        (" never ", ColourMode.NEVER),
    ])
    def test_parse(self, text, expected):
        assert ColourMode.parse(text) is expected

    def test_parse_unknown(self):
        with pytest.raises(ConfigError) as info:
            ColourMode.parse("sometimes")
        assert "sometimes" in str(info.value)
        assert info.value.code == "CDIAG-0200"


class TestFromEnv:

    def test_defaults(self):
        config = RenderConfig.from_env({})
        assert config == RenderConfig(ColourMode.AUTO, "terminal")

    def test_colour_variable(self):
        config = RenderConfig.from_env({"CARETDIAG_COLOR": "always"})
        assert config.colour is ColourMode.ALWAYS

    def test_no_color(self):
        config = RenderConfig.from_env({"NO_COLOR": "1"})
        assert config.colour is ColourMode.NEVER

    def test_empty_no_color_is_ignored(self):
        config = RenderConfig.from_env({"NO_COLOR": ""})
        assert config.colour is ColourMode.AUTO

    def test_explicit_colour_beats_no_color(self):
        config = RenderConfig.from_env({"NO_COLOR": "1", "CARETDIAG_COLOR": "always"})
        assert config.colour is ColourMode.ALWAYS

    def test_backend_variable(self):
        config = RenderConfig.from_env({"CARETDIAG_BACKEND": "HTML"})
        assert config.backend == "html"

    def test_bad_values(self):
        with pytest.raises(ConfigError):
            RenderConfig.from_env({"CARETDIAG_COLOR": "rainbow"})
        with pytest.raises(ConfigError):
            RenderConfig.from_env({"CARETDIAG_BACKEND": "pdf"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("CARETDIAG_COLOR", "never")
        assert RenderConfig.from_env().colour is ColourMode.NEVER


class TestUseColour:

    def test_always_and_never(self):
        assert RenderConfig(ColourMode.ALWAYS).use_colour(io.StringIO())
        assert not RenderConfig(ColourMode.NEVER).use_colour(None)

    def test_auto_follows_tty(self, fake_tty):
        assert RenderConfig().use_colour(fake_tty)
        assert not RenderConfig().use_colour(io.StringIO())
        assert not RenderConfig().use_colour(None)

    def test_auto_stream_without_isatty(self):
        class Sink:
            def write(self, text):
                return len(text)

        assert not RenderConfig().use_colour(Sink())
