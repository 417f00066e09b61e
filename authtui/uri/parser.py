from __future__ import annotations

import base64
import binascii
from typing import Optional, Tuple
from urllib.parse import parse_qsl, unquote, urlsplit

from ..core.enums import Algorithm
from ..core.schemas import Descriptor, ParseResult, Unparsable

SCHEME_PREFIX = "otpauth://"

DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30

_TYPE_PREFIX = "/totp/"
_BASE32_ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567")
_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


def decode_base32_nopad(text: str) -> bytes:
    """Decode canonical, unpadded RFC 4648 base32.

    Rejects padding characters, characters outside ``A-Z2-7``, impossible
    lengths and non-zero trailing bits. The empty string decodes to ``b""``.
    """

    if any(ch not in _BASE32_ALPHABET for ch in text):
        raise ValueError("secret contains non-base32 characters")
    try:
        raw = base64.b32decode(text + "=" * (-len(text) % 8))
    except binascii.Error as e:
        raise ValueError(f"secret is not valid base32: {e}") from e
    if base64.b32encode(raw).decode("ascii").rstrip("=") != text:
        raise ValueError("secret has an invalid base32 length or trailing bits")
    return raw


def _parse_unsigned(value: str, default: int, limit: int) -> int:
    digits = value[1:] if value.startswith("+") else value
    if not digits or not (digits.isascii() and digits.isdigit()):
        return default
    n = int(digits)
    return n if n <= limit else default


def split_label(label: str) -> Tuple[Optional[str], str]:
    """Split ``[issuer:]account`` on the first colon."""

    if ":" in label:
        issuer, account = label.split(":", 1)
        return issuer, account
    return None, label


def parse_uri(uri: str) -> ParseResult:
    """Turn one otpauth URI into a Descriptor, or an Unparsable explaining why.

    Never raises for malformed input. Only ``secret`` is mandatory; issuer,
    algorithm, digits and period fall back to their defaults when absent or
    unreadable. The ``totp``/``hotp`` type segment is not checked.
    """

    try:
        parts = urlsplit(uri)
        parts.port  # validates the authority
    except ValueError:
        return Unparsable(uri, "malformed URL")
    if not parts.scheme:
        return Unparsable(uri, "missing URL scheme")

    path = parts.path
    while path.startswith(_TYPE_PREFIX):
        path = path[len(_TYPE_PREFIX):]
    try:
        label = unquote(path.lstrip("/"), errors="strict")
    except UnicodeDecodeError:
        return Unparsable(uri, "label is not valid UTF-8 after percent-decoding")

    issuer, account = split_label(label)

    secret: Optional[str] = None
    algorithm = Algorithm.SHA1
    digits = DEFAULT_DIGITS
    period = DEFAULT_PERIOD
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        if key == "secret":
            secret = value
        elif key == "issuer":
            issuer = value
        elif key == "algorithm":
            algorithm = Algorithm.from_param(value)
        elif key == "digits":
            digits = _parse_unsigned(value, DEFAULT_DIGITS, _U32_MAX)
        elif key == "period":
            period = _parse_unsigned(value, DEFAULT_PERIOD, _U64_MAX)

    if secret is None:
        return Unparsable(uri, "missing secret")
    try:
        secret_bytes = decode_base32_nopad(secret.upper())
    except ValueError as e:
        return Unparsable(uri, str(e))

    return Descriptor(
        account=account,
        issuer=issuer or "",
        secret=secret_bytes,
        algorithm=algorithm,
        digits=digits,
        period=period,
    )
