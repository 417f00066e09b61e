from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import pytest

from authtui.display.renderer import Renderer
from authtui.logging import PACKAGE_LOGGER, configure_logging


class RecordingRenderer(Renderer):
    def __init__(self) -> None:
        self.calls: List[Tuple[str, object]] = []

    def clear_lines(self, count: int) -> None:
        self.calls.append(("clear", count))

    def write_frame(self, lines: Sequence[str]) -> None:
        self.calls.append(("frame", list(lines)))

    @property
    def frames(self) -> List[List[str]]:
        return [payload for kind, payload in self.calls if kind == "frame"]  # type: ignore[misc]

    @property
    def clears(self) -> List[int]:
        return [payload for kind, payload in self.calls if kind == "clear"]  # type: ignore[misc]


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def secrets_file(tmp_path):
    return tmp_path / "secrets.txt"


@pytest.fixture
def authtui_logs(caplog):
    """caplog wired to the package logger, which does not propagate to root."""

    logger = configure_logging()
    caplog.set_level(logging.DEBUG, logger=PACKAGE_LOGGER)
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)
