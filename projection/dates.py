"""Calendar helpers: place day offsets on dates for charting."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Sequence, Union

from projection.config import DEFAULT_CHART_PERIOD_DAYS
from projection.instruments import Instrument
from projection.series import ReturnPoint
from projection.taxation import DEFAULT_RESOLVER, TaxBracketResolver

DateLike = Union[date, datetime]


@dataclass(frozen=True)
class BracketLine:
    """Vertical chart annotation on the last day of a tax bracket."""

    day: int
    date: date


@dataclass(frozen=True)
class DatedPoint:
    date: date
    gross_return: float
    net_return: float


def _as_date(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def days_between(start: DateLike, end: DateLike) -> int:
    """Whole calendar days from start to end; time of day is ignored."""
    return (_as_date(end) - _as_date(start)).days


def add_days(start: DateLike, days: int) -> date:
    return _as_date(start) + timedelta(days=days)


def chart_horizon_days(
    instruments: Sequence[Instrument],
    default_days: int = DEFAULT_CHART_PERIOD_DAYS,
) -> int:
    """Longest maturity among the instruments, or `default_days` if none has one."""
    horizons = [i.horizon_days for i in instruments if i.horizon_days is not None]
    return max(horizons) if horizons else default_days


def bracket_lines(
    start: DateLike,
    total_days: int,
    resolver: TaxBracketResolver = DEFAULT_RESOLVER,
) -> list[BracketLine]:
    return [
        BracketLine(day=day, date=add_days(start, day))
        for day in resolver.transition_days()
        if day <= total_days
    ]


def to_dated_points(points: Sequence[ReturnPoint], start: DateLike) -> list[DatedPoint]:
    return [
        DatedPoint(
            date=add_days(start, p.day_offset),
            gross_return=p.gross_return,
            net_return=p.net_return,
        )
        for p in points
    ]
