from __future__ import annotations

import sys
import time
from typing import Callable, List, Optional, Sequence, Set

from ..auth.totp import generate_code, seconds_remaining
from ..core.clock import Clock, SystemClock
from ..core.errors import CodeGenerationError
from ..core.schemas import Unparsable
from ..logging import get_logger
from ..store import load_secrets
from ..uri.parser import parse_uri
from .renderer import Renderer, TerminalRenderer

logger = get_logger(__name__)

HEADER_LINES = 2
RULE_WIDTH = 68
EMPTY_STORE_MESSAGE = "No secrets found. Import some with: auth-tui import <file>"


def format_header() -> List[str]:
    return [
        f"{'USERNAME':<30} {'ISSUER':<20} {'CODE':>8} {'TTL':>4}",
        "-" * RULE_WIDTH,
    ]


def format_row(account: str, issuer: str, code: str, ttl: int) -> str:
    return f"{account:<30} {issuer:<20} {code:>8} {ttl:>3}s"


class LiveDisplay:
    """Redraws the code table in place once per interval.

    The cursor moves up ``2 + len(entries)`` lines before every frame after
    the first, counting stored entries rather than rendered rows. When some
    entries cannot be parsed the frames are shorter than that distance and
    the redraw drifts upward over earlier terminal output.
    """

    def __init__(
        self,
        entries: Sequence[str],
        *,
        clock: Optional[Clock] = None,
        renderer: Optional[Renderer] = None,
        sleep: Callable[[float], None] = time.sleep,
        interval: float = 1.0,
    ) -> None:
        self.entries = list(entries)
        self.clock = clock or SystemClock()
        self.renderer = renderer or TerminalRenderer()
        self.sleep = sleep
        self.interval = interval
        self._reported: Set[str] = set()

    @property
    def redraw_height(self) -> int:
        return HEADER_LINES + len(self.entries)

    def build_frame(self) -> List[str]:
        now = self.clock.now()
        ttl = seconds_remaining(now)
        lines = format_header()
        for uri in self.entries:
            result = parse_uri(uri)
            if isinstance(result, Unparsable):
                self._report(uri, result.reason)
                continue
            try:
                code = generate_code(result, now)
            except CodeGenerationError as e:
                self._report(uri, str(e))
                continue
            lines.append(format_row(result.account, result.issuer, code, ttl))
        return lines

    def _report(self, uri: str, reason: str) -> None:
        if uri in self._reported:
            return
        self._reported.add(uri)
        logger.debug("Skipping entry %d: %s", self.entries.index(uri) + 1, reason)

    def run(self, max_frames: Optional[int] = None) -> bool:
        """Draw frames until the process is stopped.

        Returns False without drawing anything when there are no entries.
        ``max_frames`` bounds the loop for embedding and tests.
        """

        if not self.entries:
            return False

        self.renderer.write_frame(self.build_frame())
        frames = 1
        while max_frames is None or frames < max_frames:
            self.sleep(self.interval)
            self.renderer.clear_lines(self.redraw_height)
            self.renderer.write_frame(self.build_frame())
            frames += 1
        return True


def run_display(
    path: str,
    *,
    clock: Optional[Clock] = None,
    renderer: Optional[Renderer] = None,
    sleep: Callable[[float], None] = time.sleep,
    max_frames: Optional[int] = None,
) -> bool:
    """Load ``path`` once and run the live table against that snapshot."""

    display = LiveDisplay(load_secrets(path), clock=clock, renderer=renderer, sleep=sleep)
    if not display.run(max_frames=max_frames):
        print(EMPTY_STORE_MESSAGE, file=sys.stderr)
        return False
    return True
