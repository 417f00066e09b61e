from __future__ import annotations

import hashlib
from enum import Enum
from typing import Any, Callable, Optional


class Algorithm(str, Enum):
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @property
    def digest(self) -> Callable[..., Any]:
        """hashlib constructor used as the HMAC digest."""

        return getattr(hashlib, self.value.lower())

    @classmethod
    def from_param(cls, value: Optional[str]) -> "Algorithm":
        # Only SHA256/SHA512 are recognised; anything else falls back to SHA1
        normalized = (value or "").upper()
        if normalized == cls.SHA256.value:
            return cls.SHA256
        if normalized == cls.SHA512.value:
            return cls.SHA512
        return cls.SHA1
