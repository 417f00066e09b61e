from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Optional, Sequence, TextIO


class Renderer(ABC):
    """Output port for the live table."""

    @abstractmethod
    def clear_lines(self, count: int) -> None:  # pragma: no cover - abstract
        """Make the previous ``count`` lines the target of the next frame."""
        raise NotImplementedError

    @abstractmethod
    def write_frame(self, lines: Sequence[str]) -> None:  # pragma: no cover - abstract
        raise NotImplementedError


class TerminalRenderer(Renderer):
    """ANSI renderer: moves the cursor up and prints over the old frame."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream or sys.stdout

    def clear_lines(self, count: int) -> None:
        if count > 0:
            self.stream.write(f"\x1b[{count}A")

    def write_frame(self, lines: Sequence[str]) -> None:
        for line in lines:
            self.stream.write(line + "\n")
        self.stream.flush()
