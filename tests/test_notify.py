"""Tests for console notifications."""

from __future__ import annotations

import io

from rich.console import Console

from sectiongen.notify import Notifier


def _notifier() -> tuple[Notifier, io.StringIO]:
    buf = io.StringIO()
    return Notifier(Console(file=buf, width=120, force_terminal=False)), buf


class TestNotifier:
    def test_success_prints_headline_and_items(self):
        n, buf = _notifier()
        n.success("Created section Hero in /app/sections", ["<div/>"])
        out = buf.getvalue()
        assert "Created section Hero in /app/sections" in out
        assert "<div/>" in out

    def test_items_are_not_markup(self):
        n, buf = _notifier()
        n.success("Created component Badge", ["[bold]literal[/bold]"])
        assert "[bold]literal[/bold]" in buf.getvalue()

    def test_info(self):
        n, buf = _notifier()
        n.info("Downloading section Hero from https://registry.test/sections/Hero.json")
        assert "Downloading section Hero" in buf.getvalue()

    def test_quiet(self):
        buf = io.StringIO()
        n = Notifier(Console(file=buf), quiet=True)
        n.info("x")
        n.success("y", ["z"])
        assert buf.getvalue() == ""
