from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

SECRETS_FILE_NAME = ".auth-tui"


def getenv(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return the env var, treating an empty value as unset."""

    v = os.getenv(key)
    if v in (None, ""):
        return default
    return v


def default_secrets_path() -> str:
    """Resolve the secrets file used when no --file override is given.

    Order: AUTHTUI_FILE env, then ~/.auth-tui, then .auth-tui in the working
    directory when no home directory can be determined.
    """

    override = getenv("AUTHTUI_FILE")
    if override:
        return os.path.expanduser(override)
    try:
        home = Path.home()
    except RuntimeError:
        return SECRETS_FILE_NAME
    return str(home / SECRETS_FILE_NAME)
