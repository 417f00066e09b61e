"""
authtui: terminal authenticator for otpauth:// credentials.

- URI decoding into code descriptors in `authtui.uri`
- RFC 6238 code generation in `authtui.auth`
- The flat secrets file in `authtui.store`
- The in-place refreshing code table in `authtui.display`
- Command-line entry point in `authtui.cli`
"""

from __future__ import annotations

from .core.enums import Algorithm
from .core.schemas import Descriptor, ImportResult, ParseResult, Unparsable
from .core.clock import Clock, FixedClock, SystemClock
from .auth.totp import generate_code, seconds_remaining
from .uri.parser import parse_uri
from .store import SecretsStore, export_secrets, import_secrets, load_secrets, save_secrets
from .display import LiveDisplay, Renderer, TerminalRenderer

__all__ = [
    "Algorithm",
    "Descriptor",
    "ImportResult",
    "ParseResult",
    "Unparsable",
    "Clock",
    "FixedClock",
    "SystemClock",
    "generate_code",
    "seconds_remaining",
    "parse_uri",
    "SecretsStore",
    "export_secrets",
    "import_secrets",
    "load_secrets",
    "save_secrets",
    "LiveDisplay",
    "Renderer",
    "TerminalRenderer",
]
