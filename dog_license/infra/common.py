"""
Infrastructure layer - shared primitives.

- clock: single source of "now" so tests can freeze time
- id_factory: tracking number generation
"""
from __future__ import annotations

import random
import re
import threading
from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, timezone
from typing import Optional


# =============================================================================
# Clock
# =============================================================================


class Clock(ABC):
    """Time service interface"""

    @abstractmethod
    def now(self) -> datetime:
        """Current UTC time (tz-aware)"""
        ...

    @abstractmethod
    def today(self) -> date:
        """Current calendar date as seen by the user"""
        ...

    def now_iso(self) -> str:
        """UTC timestamp with millisecond precision and a ``Z`` suffix."""
        return format_iso(self.now())

    def epoch_millis(self) -> int:
        return int(self.now().timestamp() * 1000)


class SystemClock(Clock):
    """System clock"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def today(self) -> date:
        return datetime.now().date()


class MockClock(Clock):
    """Fixed clock for tests"""

    def __init__(self, fixed_time: Optional[datetime] = None):
        self._fixed_time = fixed_time or datetime(2024, 1, 1, tzinfo=timezone.utc)
        self._offset = timedelta()

    def now(self) -> datetime:
        return self._fixed_time + self._offset

    def today(self) -> date:
        return self.now().date()

    def advance(self, delta: timedelta) -> None:
        self._offset += delta

    def set_time(self, dt: datetime) -> None:
        self._fixed_time = dt
        self._offset = timedelta()


_clock_instance: Clock = SystemClock()
_clock_lock = threading.Lock()


def get_clock() -> Clock:
    return _clock_instance


def set_clock(clock: Clock) -> None:
    """Replace the global clock (tests)."""
    global _clock_instance
    with _clock_lock:
        _clock_instance = clock


def format_iso(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def parse_iso(val: str) -> Optional[datetime]:
    """Parse an ISO timestamp; naive values are taken as UTC. ``None`` if unparsable."""
    if not val:
        return None
    try:
        dt = datetime.fromisoformat(str(val).replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def parse_date(val: str) -> Optional[date]:
    """Parse a ``YYYY-MM-DD`` (or full ISO timestamp) into a date."""
    if not val:
        return None
    try:
        return date.fromisoformat(str(val)[:10])
    except ValueError:
        return None


# =============================================================================
# IdFactory
# =============================================================================


TRACKING_PREFIX = "DOG"
TRACKING_RANDOM_MAX = 9999
TRACKING_NUMBER_PATTERN = re.compile(r"^DOG-(\d+)-(\d{1,4})$")


class IdFactory:
    """Tracking number generator"""

    def __init__(self, clock: Optional[Clock] = None, rng: Optional[random.Random] = None):
        self._clock = clock
        self._rng = rng or random.Random()

    def tracking_number(self) -> str:
        """
        Generate a tracking number.
        Format: DOG-<epoch milliseconds>-<random 0..9999>

        Not collision-free: two submissions in the same millisecond can draw
        the same random suffix.
        """
        clock = self._clock or get_clock()
        suffix = self._rng.randint(0, TRACKING_RANDOM_MAX)
        return f"{TRACKING_PREFIX}-{clock.epoch_millis()}-{suffix}"

    @staticmethod
    def is_tracking_number(value: str) -> bool:
        """True if ``value`` has the shape of a generated tracking number."""
        return bool(TRACKING_NUMBER_PATTERN.match(value or ""))
