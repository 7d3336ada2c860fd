"""
Dashboard Analytics - Pure derivations over the fetched bookings and trips
"""
from collections import Counter
from datetime import datetime
from typing import Any, List, Optional, Sequence, Tuple
import math

from tourdesk.config import settings
from tourdesk.schemas.common import parse_timestamp
from tourdesk.schemas.booking import Booking
from tourdesk.schemas.trip import Trip
from tourdesk.schemas.analytics import (
    MONTH_LABELS,
    DashboardSummary,
    DemographicEntry,
    MonthlyProgress,
    MonthlySeries,
    MonthlyStatistics,
)

UNKNOWN_DESTINATION = "Unknown"


def _field(record: Any, name: str) -> Any:
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def demographics(bookings: Sequence[Any], top_n: int = settings.DEMOGRAPHICS_TOP_N) -> List[DemographicEntry]:
    """
    Top destinations by number of bookings.

    Ties keep the order in which destinations were first seen.
    """
    if not bookings:
        return []

    counts = Counter(_field(booking, "destination") or UNKNOWN_DESTINATION for booking in bookings)
    total = len(bookings)

    # most_common is stable for equal counts (first-seen order)
    return [
        DemographicEntry(
            name=name,
            count=count,
            percentage=_round_half_up(count / total * 100),
        )
        for name, count in counts.most_common(top_n)
    ]


def monthly_buckets(records: Sequence[Any]) -> List[int]:
    """
    Count records per calendar month (Jan..Dec) of `created_at`.

    Years are ignored, so March of any year lands in index 2. Records
    without a readable timestamp are skipped.
    """
    buckets = [0] * 12
    for record in records:
        created_at = parse_timestamp(_field(record, "created_at"))
        if created_at is None:
            continue
        buckets[created_at.month - 1] += 1
    return buckets


def previous_month(now: datetime) -> Tuple[int, int]:
    """(year, month) of the month before `now`, rolling December back over the year"""
    if now.month == 1:
        return now.year - 1, 12
    return now.year, now.month - 1


def month_over_month(bookings: Sequence[Any], now: Optional[datetime] = None) -> Tuple[int, int]:
    """Bookings created in the current month vs. the preceding month"""
    now = now or datetime.now()
    prev_year, prev_month = previous_month(now)

    current = 0
    previous = 0
    for booking in bookings:
        created_at = parse_timestamp(_field(booking, "created_at"))
        if created_at is None:
            continue
        if created_at.year == now.year and created_at.month == now.month:
            current += 1
        elif created_at.year == prev_year and created_at.month == prev_month:
            previous += 1
    return current, previous


def progress_target(previous_count: int, fallback: int = settings.MONTHLY_TARGET_FALLBACK) -> int:
    """Last month's bookings, or the fixed fallback when there were none"""
    return previous_count if previous_count > 0 else fallback


def progress(
    current: int,
    previous: int,
    fallback: int = settings.MONTHLY_TARGET_FALLBACK,
) -> MonthlyProgress:
    target = progress_target(previous, fallback)
    return MonthlyProgress(
        percentage=min(100.0, current / target * 100),
        current=current,
        target=target,
    )


def recent_bookings(bookings: Sequence[Any], limit: int = settings.RECENT_BOOKINGS_LIMIT) -> List[Any]:
    """First entries of the collection as fetched (no sorting)"""
    return list(bookings[:limit])


def build_dashboard(
    bookings: Sequence[Booking],
    trips: Sequence[Trip],
    now: Optional[datetime] = None,
    is_loading: bool = False,
) -> DashboardSummary:
    """Assemble everything the dashboard home page shows"""
    bookings_by_month = monthly_buckets(bookings)
    trips_by_month = monthly_buckets(trips)
    current, previous = month_over_month(bookings, now)

    return DashboardSummary(
        total_customers=len(bookings),
        total_orders=len(trips),
        demographics=demographics(bookings),
        monthly_sales=MonthlySeries(labels=MONTH_LABELS, data=bookings_by_month),
        statistics=MonthlyStatistics(
            labels=MONTH_LABELS,
            sales=bookings_by_month,
            revenue=trips_by_month,
        ),
        recent_bookings=recent_bookings(bookings),
        monthly_progress=progress(current, previous),
        is_loading=is_loading,
    )
