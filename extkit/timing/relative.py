"""
extkit Relative Time
====================

Short human-readable labels for instants and calendar dates:
"Just now", "5 minutes ago", "Yesterday", "25 Dec 2023", ...

Every function here is pure. Pass `now` / `reference` explicitly wherever
output must be reproducible.

Example:
    >>> str(relative_from_now(datetime(2024, 1, 1, 10, 0), now=datetime(2024, 1, 1, 12, 30)))
    '2 hours ago'
    >>> str(human_friendly_date(date(2023, 12, 25), reference=date(2023, 1, 1)))
    '25 Dec 2023'
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional, Union

from extkit.core.exceptions import InvalidArgumentError
from extkit.utils.logger import get_logger


logger = get_logger("extkit.relative")

MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)

# Month names stay English whatever the process locale is
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class RelativeTimeKind(Enum):
    """Variants of a relative time label."""

    JUST_NOW = "just_now"
    MINUTES_AGO = "minutes_ago"
    HOURS_AGO = "hours_ago"
    DAYS_AGO = "days_ago"
    TODAY = "today"
    YESTERDAY = "yesterday"
    TOMORROW = "tomorrow"
    FORMATTED_DATE = "formatted_date"


_FIXED_TEXT = {
    RelativeTimeKind.JUST_NOW: "Just now",
    RelativeTimeKind.TODAY: "Today",
    RelativeTimeKind.YESTERDAY: "Yesterday",
    RelativeTimeKind.TOMORROW: "Tomorrow",
}

_UNITS = {
    RelativeTimeKind.MINUTES_AGO: ("minute", "minutes"),
    RelativeTimeKind.HOURS_AGO: ("hour", "hours"),
    RelativeTimeKind.DAYS_AGO: ("day", "days"),
}


@dataclass(frozen=True)
class RelativeTimeLabel:
    """
    A relative time label.

    Attributes:
        kind: Which variant this label is
        amount: Count for the *_AGO variants
        text: Rendered date for FORMATTED_DATE
    """

    kind: RelativeTimeKind
    amount: Optional[int] = None
    text: Optional[str] = None

    @classmethod
    def just_now(cls) -> "RelativeTimeLabel":
        return cls(RelativeTimeKind.JUST_NOW)

    @classmethod
    def minutes_ago(cls, amount: int) -> "RelativeTimeLabel":
        return cls(RelativeTimeKind.MINUTES_AGO, amount=amount)

    @classmethod
    def hours_ago(cls, amount: int) -> "RelativeTimeLabel":
        return cls(RelativeTimeKind.HOURS_AGO, amount=amount)

    @classmethod
    def days_ago(cls, amount: int) -> "RelativeTimeLabel":
        return cls(RelativeTimeKind.DAYS_AGO, amount=amount)

    @classmethod
    def today(cls) -> "RelativeTimeLabel":
        return cls(RelativeTimeKind.TODAY)

    @classmethod
    def yesterday(cls) -> "RelativeTimeLabel":
        return cls(RelativeTimeKind.YESTERDAY)

    @classmethod
    def tomorrow(cls) -> "RelativeTimeLabel":
        return cls(RelativeTimeKind.TOMORROW)

    @classmethod
    def formatted_date(cls, text: str) -> "RelativeTimeLabel":
        return cls(RelativeTimeKind.FORMATTED_DATE, text=text)

    def __str__(self) -> str:
        if self.kind in _FIXED_TEXT:
            return _FIXED_TEXT[self.kind]

        if self.kind in _UNITS:
            singular, plural = _UNITS[self.kind]
            unit = singular if self.amount == 1 else plural
            return f"{self.amount} {unit} ago"

        return self.text or ""


def relative_from_now(
    past: datetime,
    now: Optional[datetime] = None,
) -> RelativeTimeLabel:
    """
    Label the time elapsed since `past`.

    Buckets are half-open on the lower bound and counts are truncated:
    59 seconds is "Just now", 60 seconds is "1 minute ago", 90 minutes is
    "1 hour ago".

    A `past` later than `now` (clock skew) is clamped to "Just now" rather
    than reported as an error.

    Args:
        past: Instant to describe
        now: Reference instant (current time in past's timezone by default)

    Returns:
        JUST_NOW, MINUTES_AGO, HOURS_AGO or DAYS_AGO label

    Raises:
        InvalidArgumentError: If only one of past and now carries a timezone
    """
    if now is None:
        now = datetime.now(past.tzinfo)

    if (past.tzinfo is None) != (now.tzinfo is None):
        raise InvalidArgumentError(
            "Cannot compare a naive datetime with a timezone-aware one"
        )

    elapsed = now - past

    if elapsed < timedelta(0):
        logger.debug("Future timestamp clamped to just now", past=past, now=now)
        return RelativeTimeLabel.just_now()

    if elapsed < MINUTE:
        return RelativeTimeLabel.just_now()
    if elapsed < HOUR:
        return RelativeTimeLabel.minutes_ago(elapsed // MINUTE)
    if elapsed < DAY:
        return RelativeTimeLabel.hours_ago(elapsed // HOUR)
    return RelativeTimeLabel.days_ago(elapsed // DAY)


def to_relative_time(past: datetime, now: Optional[datetime] = None) -> str:
    """Rendered form of `relative_from_now`."""
    return str(relative_from_now(past, now))


def _as_date(value: Union[date, datetime]) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def format_short_date(value: Union[date, datetime]) -> str:
    """Format as "dd MMM yyyy", e.g. "25 Dec 2023"."""
    value = _as_date(value)
    return f"{value.day:02d} {MONTH_ABBREVIATIONS[value.month - 1]} {value.year:04d}"


def human_friendly_date(
    target: Union[date, datetime],
    reference: Optional[Union[date, datetime]] = None,
) -> RelativeTimeLabel:
    """
    Label a calendar date relative to `reference`.

    Args:
        target: Date to describe (datetimes are reduced to their date)
        reference: Date to compare against (today by default)

    Returns:
        TODAY, YESTERDAY, TOMORROW, or FORMATTED_DATE as "dd MMM yyyy"
    """
    target = _as_date(target)
    reference = date.today() if reference is None else _as_date(reference)

    # Day offset, not reference +/- DAY, so date.min and date.max stay valid
    offset = (target - reference).days

    if offset == 0:
        return RelativeTimeLabel.today()
    if offset == -1:
        return RelativeTimeLabel.yesterday()
    if offset == 1:
        return RelativeTimeLabel.tomorrow()
    return RelativeTimeLabel.formatted_date(format_short_date(target))


def format_date(value: Union[date, datetime], pattern: str = "%d/%m/%Y") -> str:
    """Format a date with a strftime pattern ("dd/MM/yyyy" by default)."""
    return value.strftime(pattern)


def ordinal_suffix(day: int) -> str:
    """
    Ordinal suffix for a day of the month.

    Example:
        >>> ordinal_suffix(1), ordinal_suffix(12), ordinal_suffix(23)
        ('st', 'th', 'rd')

    Raises:
        InvalidArgumentError: If day is not an integer in 1..31
    """
    if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= 31:
        raise InvalidArgumentError(f"Invalid day: {day!r}")

    # 11, 12 and 13 take "th" despite ending in 1, 2, 3
    if 11 <= day <= 13:
        return "th"

    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def ordinal_day(day: int) -> str:
    """Day number with its suffix, e.g. "21st"."""
    return f"{day}{ordinal_suffix(day)}"
