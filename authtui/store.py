from __future__ import annotations

from typing import Iterable, List, Sequence

from .core.errors import StoreWriteError
from .core.schemas import ImportResult
from .logging import get_logger
from .uri.parser import SCHEME_PREFIX

logger = get_logger(__name__)


def load_secrets(path: str) -> List[str]:
    """Return the otpauth lines of ``path`` in file order.

    Every other line (blank, comment, foreign scheme) is dropped. A missing or
    unreadable file yields an empty list rather than an error.
    """

    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except FileNotFoundError:
        logger.debug("Secrets file %s does not exist; starting empty", path)
        return []
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read secrets file %s: %s", path, e)
        return []

    lines = []
    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if line.startswith(SCHEME_PREFIX):
            lines.append(line)
    logger.debug("Loaded %d entries from %s", len(lines), path)
    return lines


def save_secrets(path: str, lines: Sequence[str]) -> None:
    """Overwrite ``path`` with ``lines`` joined by newlines (no trailing newline)."""

    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write("\n".join(lines))
    except OSError as e:
        raise StoreWriteError(str(e), context={"path": path}) from e


def import_secrets(current: Sequence[str], incoming: Iterable[str]) -> ImportResult:
    """Append incoming lines not already present, keeping incoming order.

    ``incoming_count`` counts every incoming line, duplicates included; that is
    the number reported to the user.
    """

    merged = list(current)
    seen = set(merged)
    incoming_count = 0
    for line in incoming:
        incoming_count += 1
        if line not in seen:
            merged.append(line)
            seen.add(line)
    return ImportResult(
        merged=merged,
        incoming_count=incoming_count,
        appended_count=len(merged) - len(current),
    )


def export_secrets(lines: Sequence[str], destination: str) -> None:
    save_secrets(destination, lines)


class SecretsStore:
    """Facade over one secrets file.

    ``entries`` is a snapshot taken at construction; later edits to the file by
    other processes are not observed.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self.entries: List[str] = load_secrets(path)

    def __len__(self) -> int:
        return len(self.entries)

    def import_from(self, source: str) -> ImportResult:
        result = import_secrets(self.entries, load_secrets(source))
        save_secrets(self.path, result.merged)
        self.entries = result.merged
        logger.debug(
            "Imported %d entries from %s (%d new)", result.incoming_count, source, result.appended_count
        )
        return result

    def export_to(self, destination: str) -> int:
        export_secrets(self.entries, destination)
        logger.debug("Exported %d entries to %s", len(self.entries), destination)
        return len(self.entries)
