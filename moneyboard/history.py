"""Wealth and per-key value histories over fixed periods."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from itertools import accumulate, chain
from typing import Any

from moneyboard.iterutils import cluster, date_range, pairs
from moneyboard.transaction import Transaction, TransactionValues

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class ValueDiff:
    """A value together with its change towards the following period."""

    value: int = 0
    delta: int = 0

    @classmethod
    def of(cls, value: int) -> ValueDiff:
        """A value without change."""
        return cls(value, 0)

    def __add__(self, other: object) -> ValueDiff:
        if not isinstance(other, ValueDiff):
            return NotImplemented
        return ValueDiff(self.value + other.value, self.delta + other.delta)

    def diff(self, other: ValueDiff) -> ValueDiff:
        """Keep this value and record the change from it to ``other``."""
        return ValueDiff(self.value, other.value - self.value)


def _value_diff_dict(item: ValueDiff) -> dict[str, int]:
    return {"value": item.value, "diff": item.delta}


def _new_value() -> ValueDiff:
    return ValueDiff()


@dataclass
class Wealth:
    """Income, spending and balances of one period."""

    date: datetime = _EPOCH
    income: ValueDiff = field(default_factory=_new_value)
    out: ValueDiff = field(default_factory=_new_value)
    change: ValueDiff = field(default_factory=_new_value)
    real: ValueDiff = field(default_factory=_new_value)
    debt: ValueDiff = field(default_factory=_new_value)
    total: ValueDiff = field(default_factory=_new_value)

    def __add__(self, other: object) -> Wealth:
        if not isinstance(other, Wealth):
            return NotImplemented
        return Wealth(
            date=other.date,
            income=self.income + other.income,
            out=self.out + other.out,
            change=self.change + other.change,
            real=self.real + other.real,
            debt=self.debt + other.debt,
            total=self.total + other.total,
        )

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> Wealth:
        return cls(
            date=transaction.date,
            income=ValueDiff.of(transaction.income()),
            out=ValueDiff.of(transaction.out()),
            change=ValueDiff.of(transaction.income() - transaction.out()),
            real=ValueDiff.of(transaction.signed_amount() - transaction.signed_debt_sum()),
            debt=ValueDiff.of(transaction.signed_debt_sum()),
            total=ValueDiff.of(transaction.signed_amount()),
        )

    @classmethod
    def from_transactions(
        cls, transactions: Iterable[Transaction], date: datetime | None = None
    ) -> Wealth:
        """Sum of the transactions, dated ``date`` if one is given."""
        wealth = sum((cls.from_transaction(t) for t in transactions), cls())
        if date is not None:
            wealth = replace(wealth, date=date)
        return wealth

    @staticmethod
    def _accumulate(items: Iterable[Wealth]) -> Iterator[Wealth]:
        real = debt = total = ValueDiff()
        for item in items:
            real = real + item.real
            debt = debt + item.debt
            total = total + item.total
            yield replace(item, real=real, debt=debt, total=total)

    def _shift(self, following: Wealth) -> Wealth:
        return replace(
            self, income=following.income, out=following.out, change=following.change
        )

    def _diff(self, following: Wealth) -> Wealth:
        return Wealth(
            date=self.date,
            income=self.income.diff(following.income),
            out=self.out.diff(following.out),
            change=self.change.diff(following.change),
            real=self.real.diff(following.real),
            debt=self.debt.diff(following.debt),
            total=self.total.diff(following.total),
        )

    @classmethod
    def history(
        cls,
        transactions: Iterable[Transaction],
        date: datetime,
        year: int,
        month: int,
        day: int,
        length: int,
    ) -> list[Wealth]:
        """Per-period wealth for date-sorted transactions."""
        boundaries = date_range(date, year, month, day, length)
        grouped = (
            cls.from_transactions(group, boundary)
            for boundary, group in cluster(transactions, boundaries, key=lambda t: t.date)
        )
        shifted = (
            current._shift(following if following is not None else cls())
            for current, following in pairs(cls._accumulate(grouped))
        )
        return [
            current._diff(following if following is not None else current)
            for current, following in pairs(shifted)
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "income": _value_diff_dict(self.income),
            "out": _value_diff_dict(self.out),
            "change": _value_diff_dict(self.change),
            "real": _value_diff_dict(self.real),
            "debt": _value_diff_dict(self.debt),
            "sum": _value_diff_dict(self.total),
        }


@dataclass
class AssociatedTypeValues:
    """Values per key (pod, budget, debt) at the end of a period."""

    date: datetime = _EPOCH
    data: dict[str, ValueDiff] = field(default_factory=dict)

    def __add__(self, other: object) -> AssociatedTypeValues:
        if not isinstance(other, AssociatedTypeValues):
            return NotImplemented
        data: dict[str, ValueDiff] = {}
        for key, value in chain(self.data.items(), other.data.items()):
            data[key] = data.get(key, ValueDiff()) + value
        return AssociatedTypeValues(date=other.date, data=data)

    @classmethod
    def from_values(cls, values: TransactionValues) -> AssociatedTypeValues:
        return cls(
            date=values.date,
            data={key: ValueDiff.of(value) for key, value in values.data.items()},
        )

    @classmethod
    def _from_group(
        cls, values: Iterable[TransactionValues], date: datetime | None
    ) -> AssociatedTypeValues:
        total = sum((cls.from_values(v) for v in values), cls())
        if date is not None:
            total = replace(total, date=date)
        return total

    def _diff(self, following: AssociatedTypeValues) -> AssociatedTypeValues:
        return AssociatedTypeValues(
            date=self.date,
            data={
                key: value.diff(self.data[key])
                for key, value in following.data.items()
                if key in self.data
            },
        )

    @classmethod
    def history(
        cls,
        values: Iterable[TransactionValues],
        date: datetime,
        year: int,
        month: int,
        day: int,
        length: int,
    ) -> list[AssociatedTypeValues]:
        """Running per-key totals for date-sorted values."""
        boundaries = date_range(date, year, month, day, length)
        grouped = (
            cls._from_group(group, boundary)
            for boundary, group in cluster(values, boundaries, key=lambda v: v.date)
        )
        return [
            current._diff(following if following is not None else current)
            for current, following in pairs(accumulate(grouped))
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "data": {key: _value_diff_dict(value) for key, value in self.data.items()},
        }