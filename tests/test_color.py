"""Tests for color mode handling."""

import io

from devmatrix.render.color import Color


class TestBold:
    def test_enabled(self):
        assert Color.ALWAYS.bold("bmp") == "[bold]bmp[/bold]"
        assert Color.AUTO.bold("bmp") == "[bold]bmp[/bold]"

    def test_disabled(self):
        assert Color.NEVER.bold("bmp") == "bmp"

    def test_escapes_markup(self):
        assert Color.NEVER.bold("[red]") == "\\[red]"


class TestConsole:
    def test_never_emits_no_escape_codes(self):
        buf = io.StringIO()
        Color.NEVER.console(buf).print(Color.ALWAYS.bold("x"))
        assert buf.getvalue() == "x\n"

    def test_always_emits_bold(self, monkeypatch):
        monkeypatch.setenv("TERM", "xterm-256color")
        buf = io.StringIO()
        Color.ALWAYS.console(buf).print(Color.ALWAYS.bold("x"))
        assert "\x1b[1m" in buf.getvalue()
