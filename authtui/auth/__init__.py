"""Time-based one-time code generation."""

from .totp import TTL_WINDOW, generate_code, seconds_remaining

__all__ = ["TTL_WINDOW", "generate_code", "seconds_remaining"]
