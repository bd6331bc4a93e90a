"""Data models for gitglance."""

from dataclasses import dataclass

_CONFLICT_CODES = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})

_LABELS = {
    "M": "modified",
    "T": "modified",
    "A": "added",
    "D": "deleted",
    "R": "renamed",
    "C": "copied",
}


@dataclass(frozen=True)
class StatusEntry:
    """One path reported by `git status`, with its two porcelain columns."""

    path: str
    index: str = " "
    worktree: str = " "

    @property
    def code(self) -> str:
        return f"{self.index}{self.worktree}"

    @property
    def display_path(self) -> str:
        """Path safe to print; undecodable filename bytes become U+FFFD."""
        return self.path.encode("utf-8", "surrogateescape").decode("utf-8", "replace")

    @property
    def label(self) -> str:
        """Short human-readable description of the status code."""
        code = self.code
        if code in _CONFLICT_CODES:
            return "conflicted"
        if code == "??":
            return "untracked"
        if code == "!!":
            return "ignored"
        # Staged change wins over the worktree column
        for column in (self.index, self.worktree):
            if column in _LABELS:
                return _LABELS[column]
        return "changed"

    def __str__(self) -> str:
        return self.path
