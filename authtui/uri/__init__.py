"""otpauth URI decoding."""

from .parser import SCHEME_PREFIX, decode_base32_nopad, parse_uri

__all__ = ["SCHEME_PREFIX", "decode_base32_nopad", "parse_uri"]
