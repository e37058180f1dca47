from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timezone


_NANOS_PER_MICRO = 1_000
_NANOS_PER_MILLI = 1_000_000
_NANOS_PER_SECOND = 1_000_000_000


def _with_fraction(value: int, unit: int) -> str:
    whole, remainder = divmod(value, unit)
    if remainder == 0:
        return str(whole)
    digits = len(str(unit)) - 1
    fraction = f"{remainder:0{digits}d}".rstrip("0")
    return f"{whole}.{fraction}"


def format_duration(nanoseconds: int) -> str:
    """Render a duration as ``1h2m3.456s``, ``12.5ms`` or ``0s``.

    Sub-second values use the largest of ``ns``, ``µs`` and ``ms`` that keeps
    the integer part non-zero. From one second upwards hours and minutes are
    prefixed, and minutes are always shown once hours are.
    """
    if nanoseconds == 0:
        return "0s"

    sign = "-" if nanoseconds < 0 else ""
    value = abs(nanoseconds)

    if value < _NANOS_PER_MICRO:
        return f"{sign}{value}ns"
    if value < _NANOS_PER_MILLI:
        return f"{sign}{_with_fraction(value, _NANOS_PER_MICRO)}µs"
    if value < _NANOS_PER_SECOND:
        return f"{sign}{_with_fraction(value, _NANOS_PER_MILLI)}ms"

    total_seconds, fraction = divmod(value, _NANOS_PER_SECOND)
    minutes, seconds = divmod(total_seconds, 60)
    hours, minutes = divmod(minutes, 60)
    seconds_text = _with_fraction(seconds * _NANOS_PER_SECOND + fraction, _NANOS_PER_SECOND)

    if hours:
        return f"{sign}{hours}h{minutes}m{seconds_text}s"
    if minutes:
        return f"{sign}{minutes}m{seconds_text}s"
    return f"{sign}{seconds_text}s"


def rfc3339_timestamp(moment: datetime | None = None) -> str:
    """Format ``moment`` (default: now) as an RFC 3339 UTC timestamp with second precision."""
    current = moment or datetime.now(timezone.utc)
    return current.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass(frozen=True)
class RuntimeState:
    """Identity and start time captured once before the service starts serving."""

    name: str
    version: str
    started_at: datetime
    started_monotonic_ns: int

    @classmethod
    def capture(cls, name: str, version: str) -> "RuntimeState":
        return cls(
            name=name,
            version=version,
            started_at=datetime.now(timezone.utc),
            started_monotonic_ns=time.monotonic_ns(),
        )

    def uptime_ns(self) -> int:
        return time.monotonic_ns() - self.started_monotonic_ns

    def uptime(self) -> str:
        return format_duration(self.uptime_ns())
