"""Filters and query parameters for transaction and history requests."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from moneyboard.fields import parse_optional_ymd
from moneyboard.transaction import Transaction

_UINT = re.compile(r"\+?\d+")
_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


def _display(moment: datetime) -> str:
    offset = moment.utcoffset() or timedelta(0)
    minutes = int(offset.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{moment:%Y-%m-%d %H:%M:%S} {sign}{hours:02d}:{mins:02d}"


def _optional_uint(params: Mapping[str, str], name: str, limit: int) -> int | None:
    value = params.get(name)
    if value is None:
        return None
    if not _UINT.fullmatch(value) or int(value) > limit:
        raise ValueError(f"invalid {name}: {value!r}")
    return int(value)


@dataclass(frozen=True)
class Filter:
    """Restrictions on which transactions a request sees."""

    start: datetime | None = None
    end: datetime | None = None
    pod: str | None = None
    debt: str | None = None
    budget: str | None = None
    inbudget: str | None = None
    kind: str | None = None

    def with_start(self, start: datetime | None) -> Filter:
        return replace(self, start=start)

    def conditions(self) -> list[str]:
        """The filter as query conditions on stored records."""
        conditions = []
        if self.start is not None:
            conditions.append(f'content.date >= "{_display(self.start)}"')
        if self.end is not None:
            conditions.append(f'content.date < "{_display(self.end)}"')
        if self.pod is not None:
            conditions.append(
                f'(content.sender == "{self.pod}" OR content.receiver == "{self.pod}")'
            )
        if self.debt is not None:
            conditions.append(f'content.debts["{self.debt}"]')
        if self.budget is not None:
            conditions.append(f'content.budgets["{self.budget}"]')
        if self.inbudget is not None:
            conditions.append(f'content.inbudgets["{self.inbudget}"]')
        if self.kind is not None:
            conditions.append(f'content.type == "{self.kind}"')
        return conditions

    def matches(self, transaction: Transaction) -> bool:
        """Whether the transaction satisfies every condition."""
        if self.start is not None and transaction.date < self.start:
            return False
        if self.end is not None and not transaction.date < self.end:
            return False
        if self.pod is not None and self.pod not in (transaction.sender, transaction.receiver):
            return False
        if self.debt is not None and not transaction.debts.get(self.debt):
            return False
        if self.budget is not None and not transaction.budgets.get(self.budget):
            return False
        if self.inbudget is not None and not transaction.inbudgets.get(self.inbudget):
            return False
        if self.kind is not None and transaction.kind.value != self.kind:
            return False
        return True

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> Filter:
        """A filter from URL query parameters."""
        return cls(
            start=parse_optional_ymd(params.get("start")),
            end=parse_optional_ymd(params.get("end")),
            pod=params.get("pod"),
            debt=params.get("debt"),
            budget=params.get("budget"),
            inbudget=params.get("inbudget"),
            kind=params.get("type"),
        )


@dataclass(frozen=True)
class HistoryQuery:
    """Period and range of a history request."""

    year: int | None = None
    month: int | None = None
    day: int | None = None
    length: int | None = None
    start: datetime | None = None
    end: datetime | None = None

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> HistoryQuery:
        """A history query from URL query parameters."""
        return cls(
            year=_optional_uint(params, "year", _U32_MAX),
            month=_optional_uint(params, "month", _U32_MAX),
            day=_optional_uint(params, "day", _U64_MAX),
            length=_optional_uint(params, "len", _U32_MAX),
            start=parse_optional_ymd(params.get("start")),
            end=parse_optional_ymd(params.get("end")),
        )