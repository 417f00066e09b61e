"""Live code table: frame building, redraw bookkeeping and terminal output."""

from .loop import LiveDisplay, format_header, format_row, run_display
from .renderer import Renderer, TerminalRenderer

__all__ = [
    "LiveDisplay",
    "Renderer",
    "TerminalRenderer",
    "format_header",
    "format_row",
    "run_display",
]
