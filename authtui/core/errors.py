from __future__ import annotations

from typing import Any, Optional


class AuthTuiError(Exception):
    """Base error for authtui."""

    def __init__(self, message: str, *, context: Optional[dict[str, Any]] = None) -> None:  # noqa: D401
        super().__init__(message)
        self.context = context or {}


class StoreError(AuthTuiError):
    """Secrets file could not be used."""


class StoreWriteError(StoreError):
    """Writing the secrets file (or an export target) failed."""


class CodeGenerationError(AuthTuiError):
    """Descriptor parameters cannot produce a one-time code."""


class ClockError(AuthTuiError):
    """System clock is unreadable or before the unix epoch."""
