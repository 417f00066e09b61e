from __future__ import annotations

import base64

import pyotp

from ..core.errors import CodeGenerationError
from ..core.schemas import Descriptor

# The displayed TTL always uses a 30 second window, whatever the descriptor's
# period. Codes for non-default periods can therefore expire at a different
# moment than the TTL column suggests.
TTL_WINDOW = 30

MAX_DIGITS = 10


def _otp(descriptor: Descriptor) -> pyotp.OTP:
    if not 1 <= descriptor.digits <= MAX_DIGITS:
        raise CodeGenerationError(
            f"unsupported code length {descriptor.digits}",
            context={"account": descriptor.account, "digits": descriptor.digits},
        )
    secret = base64.b32encode(descriptor.secret).decode("ascii")
    return pyotp.OTP(secret, digits=descriptor.digits, digest=descriptor.algorithm.digest)


def time_counter(descriptor: Descriptor, unix_time: int) -> int:
    if descriptor.period <= 0:
        raise CodeGenerationError(
            "period must be a positive number of seconds",
            context={"account": descriptor.account, "period": descriptor.period},
        )
    return unix_time // descriptor.period


def generate_code(descriptor: Descriptor, unix_time: int) -> str:
    """Return the RFC 6238 code for ``descriptor`` at ``unix_time``.

    The HMAC over the big-endian time counter and the RFC 4226 dynamic
    truncation are done by pyotp; the result is zero-padded to ``digits``.
    """

    counter = time_counter(descriptor, unix_time)
    return _otp(descriptor).generate_otp(counter)


def seconds_remaining(unix_time: int) -> int:
    """Seconds left in the fixed 30 second window, in ``[1, 30]``."""

    return TTL_WINDOW - (unix_time % TTL_WINDOW)
