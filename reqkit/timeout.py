"""Timeout and low-speed limits for a transfer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)


class Timeout:
    """A duration in whole milliseconds; zero means no timeout."""

    def __init__(self, duration: int | timedelta) -> None:
        if isinstance(duration, timedelta):
            self.ms = duration // timedelta(milliseconds=1)
        else:
            self.ms = int(duration)

    def milliseconds(self) -> int:
        """Return the duration, checked to fit a signed 64-bit integer."""
        if self.ms > _LONG_MAX:
            raise OverflowError(f"timeout value overflow: {self.ms} ms.")
        if self.ms < _LONG_MIN:
            raise ArithmeticError(f"timeout value underflow: {self.ms} ms.")
        return self.ms

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.ms == other.ms

    def __hash__(self) -> int:
        return hash((type(self), self.ms))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.ms})"


class ConnectTimeout(Timeout):
    """A timeout that applies only to establishing the connection."""


@dataclass(frozen=True)
class LowSpeed:
    """Abort when fewer than ``limit`` bytes per second arrive for ``time`` seconds."""

    limit: int
    time: int