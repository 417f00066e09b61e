from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

from .enums import Algorithm


@dataclass(frozen=True)
class Descriptor:
    """Everything needed to compute codes for one stored credential."""

    account: str
    issuer: str
    secret: bytes = field(repr=False)
    algorithm: Algorithm = Algorithm.SHA1
    digits: int = 6
    period: int = 30


@dataclass(frozen=True)
class Unparsable:
    """A credential URI that cannot become a Descriptor."""

    uri: str = field(repr=False)
    reason: str


ParseResult = Union[Descriptor, Unparsable]


@dataclass
class ImportResult:
    merged: List[str]
    incoming_count: int
    appended_count: int = 0
