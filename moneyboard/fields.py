"""Parsers for the date and amount formats found in queries and bank exports."""

from __future__ import annotations

import re
from datetime import datetime, timezone

_SIGNED_INT = re.compile(r"[+-]?\d+")
_UNSIGNED_INT = re.compile(r"\+?\d+")


def _as_local_offset(naive: datetime) -> datetime:
    """Read a naive time as UTC and express it in the current local offset."""
    offset = datetime.now().astimezone().tzinfo
    return naive.replace(tzinfo=timezone.utc).astimezone(offset)


def parse_optional_ymd(value: object) -> datetime | None:
    """Parse ``YYYY[-MM[-DD]]`` as local midnight.

    Returns ``None`` for anything that is not a string with a numeric year.
    Missing or unreadable month and day default to 1.
    """
    if not isinstance(value, str):
        return None
    parts = iter(value.split("-"))
    year_text = next(parts)
    if not _SIGNED_INT.fullmatch(year_text):
        return None

    def part() -> int:
        text = next(parts, "1")
        return int(text) if _UNSIGNED_INT.fullmatch(text) else 1

    month = part()
    day = part()
    try:
        return datetime(int(year_text), month, day).astimezone()
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"invalid date: {value!r}") from exc


def _parse_with(value: object, fmt: str) -> datetime:
    if not isinstance(value, str):
        raise ValueError(f"expected a date string, got {value!r}")
    try:
        naive = datetime.strptime(value, fmt)
    except ValueError as exc:
        raise ValueError(f"invalid date: {value!r}") from exc
    return _as_local_offset(naive)


def parse_ymd(value: object) -> datetime:
    """Parse ``YYYY-MM-DD``."""
    return _parse_with(value, "%Y-%m-%d")


def parse_optional_dmy(value: object) -> datetime | None:
    """Parse ``DD.MM.YYYY``; the empty string gives ``None``."""
    if value == "":
        return None
    return _parse_with(value, "%d.%m.%Y")


def _trim_to_digits(text: str) -> str:
    digits = [i for i, c in enumerate(text) if c.isdecimal()]
    if not digits:
        return text
    return text[digits[0] : digits[-1] + 1]


def parse_amount(value: object) -> int:
    """Parse a money amount such as ``"+1,23 €"`` or ``"-8.99"`` into cents.

    The sign is dropped. With a comma present, dots are thousands separators.
    """
    if not isinstance(value, str):
        raise ValueError(f"expected an amount string, got {value!r}")
    text = _trim_to_digits(value)
    if "," in text:
        text = text.replace(".", "").replace(",", ".")
    parts = text.split(".")
    if len(parts) < 2:
        raise ValueError(f"amount has no decimal part: {value!r}")
    before, after = parts[0], parts[1]
    if not _SIGNED_INT.fullmatch(before) or not _SIGNED_INT.fullmatch(after):
        raise ValueError(f"invalid amount: {value!r}")
    scale = 10 if len(after) == 1 and not after.startswith("0") else 1
    return int(before) * 100 + int(after) * scale