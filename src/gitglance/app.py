"""Application state: the repository and its selectable status list."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import readchar

from gitglance.models import StatusEntry
from gitglance.repo import find_repo_root, read_status
from gitglance.selection import SelectableList

if TYPE_CHECKING:
    from gitglance.config import Config

logger = logging.getLogger("gitglance.app")

NEXT_KEYS = (readchar.key.DOWN, "j")
PREVIOUS_KEYS = (readchar.key.UP, "k")
UNSELECT_KEYS = (readchar.key.ESC, "u")
REFRESH_KEYS = ("r",)
QUIT_KEYS = ("q",)
# "\x1b[" and "\x1bO" start arrow and function key sequences
ESCAPE_SEQUENCE_INTRODUCERS = ("[", "O")


class App:
    """Repository root, panel title and the list of status entries."""

    def __init__(
        self,
        root: Path,
        title: str,
        items: SelectableList[StatusEntry],
        config: Config | None = None,
    ):
        self.root = root
        self.title = title
        self.items = items
        self._config = config

    @classmethod
    def open(cls, path: Path | None = None, config: Config | None = None) -> App:
        """Open the repository containing `path` (default: cwd) and read its status."""
        if config is None:
            from gitglance.config import Config

            config = Config.load()

        root = find_repo_root(path)
        title = str(config.title).replace("{repo}", root.name)
        app = cls(root, title, SelectableList(), config)
        app.refresh()
        return app

    def refresh(self) -> None:
        """Re-read status into a fresh list. The selection is cleared."""
        include_untracked = self._config.show_untracked if self._config else True
        include_ignored = self._config.show_ignored if self._config else False
        entries = read_status(
            self.root,
            include_untracked=include_untracked,
            include_ignored=include_ignored,
        )
        self.items = SelectableList(entries)
        logger.debug("Loaded %d entries from %s", len(self.items), self.root)

    def handle_key(self, key: str) -> bool:
        """Apply the operation bound to `key`. Returns False if the key quits."""
        if key in QUIT_KEYS:
            return False
        if key in NEXT_KEYS:
            self.items.next()
        elif key in PREVIOUS_KEYS:
            self.items.previous()
        elif key in UNSELECT_KEYS:
            self.items.unselect()
        elif key in REFRESH_KEYS:
            self.refresh()
        elif key.startswith(readchar.key.ESC) and key[1:2] not in ESCAPE_SEQUENCE_INTRODUCERS:
            # On POSIX readkey returns a lone escape glued to the next key press
            self.items.unselect()
            return self.handle_key(key[1:]) if len(key) > 1 else True
        return True
