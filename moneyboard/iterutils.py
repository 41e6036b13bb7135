"""Iteration helpers for grouping dated records and walking date ranges."""

from __future__ import annotations

import calendar
import re
from collections.abc import Callable, Iterable, Iterator
from datetime import datetime, timedelta
from typing import Any, TypeVar

T = TypeVar("T")
K = TypeVar("K")

_FRACTION = re.compile(r"\.(\d+)")


def cluster(
    items: Iterable[T], keys: Iterable[K], key: Callable[[T], Any]
) -> Iterator[tuple[K | None, list[T]]]:
    """Split sorted items at each boundary key.

    For every boundary the items whose key lies below it are yielded with
    that boundary. Items left after the last boundary are yielded with
    ``None`` as key, if there are any.
    """
    iterator = iter(items)
    pending: list[T] = []
    for boundary in keys:
        group = pending
        pending = []
        for item in iterator:
            if key(item) >= boundary:
                pending = [item]
                break
            group.append(item)
        yield boundary, group
    rest = pending + list(iterator)
    if rest:
        yield None, rest


def pairs(items: Iterable[T]) -> Iterator[tuple[T, T | None]]:
    """Yield each item with its successor, the last one with ``None``."""
    iterator = iter(items)
    try:
        current = next(iterator)
    except StopIteration:
        return
    for following in iterator:
        yield current, following
        current = following
    yield current, None


def add_months(moment: datetime, months: int) -> datetime:
    """Shift by whole months, clamping the day to the end of the month."""
    total = moment.year * 12 + (moment.month - 1) + months
    year, month_index = divmod(total, 12)
    month = month_index + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def date_range(
    current: datetime, year: int, month: int, day: int, length: int
) -> Iterator[datetime]:
    """Yield ``length`` period boundaries ending just after ``current``.

    The period is ``year`` years plus ``month`` months plus ``day`` days.
    """
    tz = current.tzinfo
    if day == 0 and month == 0:
        start = datetime(current.year + 1, 1, 1, tzinfo=tz)
    elif day == 0:
        start = add_months(datetime(current.year, current.month, 1, tzinfo=tz), 1)
    else:
        start = datetime(current.year, current.month, current.day, tzinfo=tz) + timedelta(
            days=1
        )
    step_months = month + 12 * year
    moment = add_months(start, -length * step_months) - timedelta(days=length * day)
    for _ in range(length):
        moment = add_months(moment, step_months) + timedelta(days=day)
        yield moment


def parse_timestamp(value: str | datetime) -> datetime:
    """Parse an ISO 8601 timestamp as written by the API."""
    if isinstance(value, datetime):
        return value
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION.sub(lambda m: "." + (m.group(1) + "000000")[:6], text, count=1)
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"invalid timestamp: {value!r}") from exc