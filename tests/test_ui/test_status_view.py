"""Tests for the status list view."""

import io
from pathlib import Path

import readchar
from rich.console import Console
from rich.style import Style
from rich.text import Span, Text

from gitglance.app import App
from gitglance.models import StatusEntry
from gitglance.selection import SelectableList
from gitglance.ui.status_view import (
    DEFAULT_HIGHLIGHT_STYLE,
    StatusView,
    build_panel,
    render_rows,
)


def _items(*paths: str) -> SelectableList[StatusEntry]:
    return SelectableList(StatusEntry(p, " ", "M") for p in paths)


def _render(panel) -> str:
    console = Console(file=io.StringIO(), width=100, color_system=None)
    console.print(panel)
    return console.file.getvalue()


class TestRenderRows:
    def test_empty_list(self):
        rows = render_rows(_items())
        assert [row.plain for row in rows] == ["  Working tree clean"]

    def test_no_highlight_when_unselected(self):
        rows = render_rows(_items("a.txt", "b.txt"), show_codes=False)

        assert [row.plain for row in rows] == ["  a.txt", "  b.txt"]
        assert all(not row.spans for row in rows)

    def test_selected_row_highlighted(self):
        items = _items("a.txt", "b.txt")
        items.next()
        items.next()

        rows = render_rows(items, highlight_style="bold", show_codes=False)

        assert [row.plain for row in rows] == ["  a.txt", "> b.txt"]
        assert rows[1].spans == [Span(0, 7, Style.parse("bold"))]

    def test_codes_shown(self):
        rows = render_rows(_items("a.txt"))

        assert rows[0].plain == "   M a.txt"
        assert rows[0].spans == [Span(2, 4, "yellow")]

    def test_markup_in_paths_is_literal(self):
        rows = render_rows(_items("[red]x.txt"), show_codes=False)
        assert rows[0].plain == "  [red]x.txt"

    def test_invalid_style_falls_back_to_default(self, caplog):
        items = _items("a.txt")
        items.next()

        rows = render_rows(items, highlight_style="not-a-colour", show_codes=False)

        assert rows[0].spans == [Span(0, 7, Style.parse(DEFAULT_HIGHLIGHT_STYLE))]
        assert "Invalid highlight style" in caplog.text

    def test_empty_style_renders(self):
        items = _items("a.txt")
        items.next()

        rows = render_rows(items, highlight_style="", show_codes=False)

        assert rows[0].plain == "> a.txt"
        assert "> a.txt" in _render(Text("\n").join(rows))

    def test_undecodable_path_is_replaced(self):
        rows = render_rows(_items("caf\udce9.bin"), show_codes=False)
        assert rows[0].plain == "  caf\ufffd.bin"


class TestBuildPanel:
    def test_shows_title_and_selected_path(self):
        app = App(Path("/repo"), "my repo", _items("a.txt", "b.txt"))
        app.items.previous()

        output = _render(build_panel(app))

        assert "my repo" in output
        assert "> " in output
        assert "a.txt (modified)" in output

    def test_clean_tree(self):
        app = App(Path("/repo"), "my repo", _items())

        output = _render(build_panel(app))

        assert "Working tree clean" in output


class TestStatusView:
    def _view(self, app: App) -> StatusView:
        console = Console(file=io.StringIO(), width=80, color_system=None)
        return StatusView(app, console=console)

    def test_returns_selected_entry_on_quit(self, monkeypatch):
        keys = iter([readchar.key.DOWN, readchar.key.DOWN, "q"])
        monkeypatch.setattr(readchar, "readkey", lambda: next(keys))
        app = App(Path("/repo"), "t", _items("a.txt", "b.txt", "c.txt"))

        entry = self._view(app).show()

        assert entry == StatusEntry("b.txt", " ", "M")

    def test_returns_none_when_unselected(self, monkeypatch):
        keys = iter(["j", "u", "q"])
        monkeypatch.setattr(readchar, "readkey", lambda: next(keys))
        app = App(Path("/repo"), "t", _items("a.txt"))

        assert self._view(app).show() is None

    def test_ctrl_c_returns_none(self, monkeypatch):
        def interrupt():
            raise KeyboardInterrupt

        monkeypatch.setattr(readchar, "readkey", interrupt)
        app = App(Path("/repo"), "t", _items("a.txt"))

        assert self._view(app).show() is None

    def test_empty_list_navigation(self, monkeypatch):
        keys = iter(["j", "k", "j", "q"])
        monkeypatch.setattr(readchar, "readkey", lambda: next(keys))
        app = App(Path("/repo"), "t", _items())

        assert self._view(app).show() is None
