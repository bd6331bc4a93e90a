"""Rich + readchar view of the status list."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.text import Text

from gitglance.models import StatusEntry
from gitglance.selection import SelectableList

if TYPE_CHECKING:
    from gitglance.app import App
    from gitglance.config import Config

logger = logging.getLogger("gitglance.ui")

# UI Constants
LIVE_REFRESH_RATE = 20
DEFAULT_PANEL_WIDTH = 100
DEFAULT_HIGHLIGHT_STYLE = "bold reverse"
FOOTER = "[dim]  ↑↓/jk nav · esc/u unselect · r refresh · q quit[/dim]"
EMPTY_MESSAGE = "[dim]  Working tree clean[/dim]"


def resolve_style(style: object) -> Style:
    """Parse a configured style, falling back to the default if it is invalid."""
    try:
        return Style.parse(str(style))
    except StyleSyntaxError:
        logger.warning("Invalid highlight style %r, using %r", style, DEFAULT_HIGHLIGHT_STYLE)
        return Style.parse(DEFAULT_HIGHLIGHT_STYLE)


def render_rows(
    items: SelectableList[StatusEntry],
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE,
    show_codes: bool = True,
) -> list[Text]:
    """Build one line per entry, highlighting the selected row."""
    if not len(items):
        return [Text.from_markup(EMPTY_MESSAGE)]

    style = resolve_style(highlight_style)
    selected = items.current()
    lines: list[Text] = []
    for i, entry in enumerate(items):
        line = Text("> " if i == selected else "  ")
        if show_codes:
            line.append(entry.code, style="yellow")
            line.append(" ")
        line.append(entry.display_path)
        if i == selected:
            line.stylize(style)
        lines.append(line)
    return lines


def build_panel(
    app: App,
    width: int = DEFAULT_PANEL_WIDTH,
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE,
    show_codes: bool = True,
) -> Panel:
    lines = [Text()]
    lines.extend(render_rows(app.items, highlight_style, show_codes))

    status_line = Text()
    entry = app.items.selected_item()
    if entry is not None:
        status_line.append(f"  {entry.display_path} ")
        status_line.append(f"({entry.label})", style="dim")

    lines.append(Text())
    lines.append(status_line)
    lines.append(Text.from_markup(FOOTER))

    title = str(app.title) if app.title else ""
    return Panel(
        Text("\n").join(lines),
        title=Text(title, style="bold") if title else None,
        border_style="blue",
        width=width,
    )


class StatusView:
    """Interactive status list driven by single key presses."""

    def __init__(self, app: App, config: Config | None = None, console: Console | None = None):
        self.app = app
        self.console = console or Console()
        self.width = config.panel_width if config else DEFAULT_PANEL_WIDTH
        self.highlight_style = config.highlight_style if config else DEFAULT_HIGHLIGHT_STYLE
        self.show_codes = config.show_status_codes if config else True

    def _panel(self) -> Panel:
        term_width = self.console.width or self.width
        return build_panel(
            self.app,
            width=min(self.width, term_width),
            highlight_style=self.highlight_style,
            show_codes=self.show_codes,
        )

    def show(self) -> StatusEntry | None:
        """Run the key loop. Returns the selected entry on quit, or None."""
        self.console.clear()
        with Live(
            self._panel(), console=self.console, refresh_per_second=LIVE_REFRESH_RATE
        ) as live:
            while True:
                try:
                    key = readchar.readkey()
                except KeyboardInterrupt:
                    return None

                if not self.app.handle_key(key):
                    break

                live.update(self._panel())

        return self.app.items.selected_item()
