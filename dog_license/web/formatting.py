"""Display formatting for dates, money and license periods (en-US)."""
from __future__ import annotations

from datetime import tzinfo
from typing import Any, Optional

from dog_license.domain import calculate_fee, license_label
from dog_license.infra.common import parse_date, parse_iso

INVALID_DATE = "Invalid date"


def format_date(value: Any) -> str:
    """``2025-03-07`` -> ``March 7, 2025``."""
    d = parse_date(str(value)) if value else None
    if d is None:
        return INVALID_DATE
    return f"{d.strftime('%B')} {d.day}, {d.year}"


def format_datetime(value: Any, tz: Optional[tzinfo] = None) -> str:
    """ISO timestamp -> ``March 7, 2025 at 02:05 PM`` in ``tz`` (local time by default)."""
    dt = parse_iso(str(value)) if value else None
    if dt is None:
        return INVALID_DATE
    dt = dt.astimezone(tz) if tz is not None else dt.astimezone()
    return f"{dt.strftime('%B')} {dt.day}, {dt.year} at {dt.strftime('%I:%M %p')}"


def format_currency(amount: Any) -> str:
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return "$0"
    return f"${value:,.0f}" if value == int(value) else f"${value:,.2f}"


def format_period(period: Any) -> str:
    """``1-year`` -> ``1 year`` (tracking page)."""
    raw = getattr(period, "value", period) or ""
    return str(raw).replace("-", " ", 1)


def format_period_option(period: Any) -> str:
    """``1-year`` -> ``1 Year - $25`` (license period picker)."""
    label = license_label(period)
    if not label:
        return str(period)
    return f"{label} - {format_currency(calculate_fee(period))}"


def format_number(value: Any) -> str:
    """Drop a trailing ``.0`` so ``3.0`` shows as ``3``."""
    try:
        f = float(value)
    except (TypeError, ValueError):
        return str(value)
    return str(int(f)) if f == int(f) else f"{f:g}"

