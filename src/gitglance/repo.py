"""Read working-tree status from git."""

import logging
import os
import subprocess
from pathlib import Path

from gitglance.errors import GitStatusError, RepoNotFoundError
from gitglance.models import StatusEntry

logger = logging.getLogger("gitglance.repo")

# Rename and copy records are followed by the original path
_TWO_PATH_CODES = ("R", "C")


def find_repo_root(path: Path | None = None) -> Path:
    """Get the work tree root of the repository containing `path` (default: cwd)."""
    path = path or Path.cwd()
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=path,
            capture_output=True,
            text=True,
            check=True,
        )
    except (subprocess.CalledProcessError, FileNotFoundError, NotADirectoryError) as e:
        raise RepoNotFoundError(path) from e
    root = Path(result.stdout.strip())
    logger.debug("Repository root for %s is %s", path, root)
    return root


def parse_porcelain(output: str) -> list[StatusEntry]:
    """Parse `git status --porcelain=v1 -z` output into entries, in order.

    Each record is "XY PATH"; rename and copy records carry a second
    NUL-terminated field with the source path, which is skipped.
    """
    entries: list[StatusEntry] = []
    fields = output.split("\0")
    i = 0
    while i < len(fields):
        record = fields[i]
        i += 1
        if not record:
            continue
        if len(record) < 4:
            logger.warning("Skipping malformed status record: %r", record)
            continue
        index, worktree, path = record[0], record[1], record[3:]
        entries.append(StatusEntry(path=path, index=index, worktree=worktree))
        if index in _TWO_PATH_CODES or worktree in _TWO_PATH_CODES:
            i += 1
    return entries


def read_status(
    root: Path,
    include_untracked: bool = True,
    include_ignored: bool = False,
) -> list[StatusEntry]:
    """Return the status entries for the repository at `root`.

    Raises:
        GitStatusError: If git exits with an error.
    """
    cmd = ["git", "status", "--porcelain=v1", "-z"]
    cmd.append("--untracked-files=all" if include_untracked else "--untracked-files=no")
    if include_ignored:
        cmd.append("--ignored")

    logger.debug("Running %s in %s", " ".join(cmd), root)
    try:
        result = subprocess.run(cmd, cwd=root, capture_output=True)
    except FileNotFoundError as e:
        raise GitStatusError(str(e)) from e
    if result.returncode != 0:
        raise GitStatusError(result.stderr.decode(errors="replace"))

    # Filenames are bytes; fsdecode keeps non-UTF-8 names round-trippable
    entries = parse_porcelain(os.fsdecode(result.stdout))
    logger.debug("Read %d status entries", len(entries))
    return entries
