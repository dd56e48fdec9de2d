"""Tagged outcome of a single probe.

Every probe resolves to exactly one of ``Success`` or ``Unavailable``; the
pipeline never sees a probe raise.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Probe produced a value."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Unavailable:
    """Probe could not produce a value; reason is human-readable."""

    reason: str

    @property
    def ok(self) -> bool:
        return False


ProbeResult = Union[Success[T], Unavailable]
