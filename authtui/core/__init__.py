"""Core enums, schemas, errors and the clock port."""

from .enums import Algorithm
from .schemas import Descriptor, ImportResult, ParseResult, Unparsable
from .errors import (
    AuthTuiError,
    StoreError,
    StoreWriteError,
    CodeGenerationError,
    ClockError,
)
from .clock import Clock, FixedClock, SystemClock

__all__ = [
    # Enums
    "Algorithm",
    # Schemas
    "Descriptor",
    "ImportResult",
    "ParseResult",
    "Unparsable",
    # Errors
    "AuthTuiError",
    "StoreError",
    "StoreWriteError",
    "CodeGenerationError",
    "ClockError",
    # Clock
    "Clock",
    "FixedClock",
    "SystemClock",
]
