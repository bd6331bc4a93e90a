"""Exceptions raised at the git and config boundaries."""


class GitglanceError(Exception):
    """Base class for errors reported to the user by the CLI."""


class RepoNotFoundError(GitglanceError):
    """Path is not inside a git work tree, or git is not installed."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Not a git repository: {path}")


class GitStatusError(GitglanceError):
    """`git status` exited with an error."""

    def __init__(self, stderr: str = ""):
        self.stderr = stderr.strip()
        message = "Unable to get status."
        if self.stderr:
            message = f"{message} {self.stderr}"
        super().__init__(message)


class ConfigKeyError(GitglanceError):
    """Unknown configuration key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown config key: {key}")
