"""UI module."""

from .status_view import StatusView, build_panel, render_rows

__all__ = [
    "StatusView",
    "build_panel",
    "render_rows",
]
