"""Monthly extrapolation of contract payments, savings and free money."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from moneyboard.contract import Contract
from moneyboard.goal import Goal
from moneyboard.history import Wealth


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass
class ExtrapolationItem:
    """Planned and actual money flows of one month."""

    date: datetime
    contract_expenses: int = 0
    contract_income: int = 0
    planned_savings: int = 0
    freely_available: int = 0
    actual_expenses: int = 0
    actual_income: int = 0
    actual_savings: int = 0
    actual_overspent: int = 0

    @classmethod
    def from_wealth(cls, wealth: Wealth) -> ExtrapolationItem:
        """An item holding what actually happened in a past period."""
        return cls(
            date=wealth.date,
            actual_expenses=wealth.out.value,
            actual_income=wealth.income.value,
            actual_savings=max(wealth.real.delta, 0),
            actual_overspent=max(-wealth.real.delta, 0),
        )

    @staticmethod
    def _contract_sum(contracts: Iterable[Contract], date: datetime, income: bool) -> int:
        total = 0
        for contract in contracts:
            payment = contract.payment
            if payment.has_income() != income:
                continue
            if payment.cycle == 0:
                raise ValueError("payment cycle must be positive")
            if payment.first.month % payment.cycle == date.month % payment.cycle:
                total += payment.net_amount()
        return total

    @classmethod
    def planned(
        cls, contracts: Sequence[Contract], savings_rate: int, date: datetime
    ) -> ExtrapolationItem:
        """An item planned from the contracts due in ``date``'s month."""
        expenses = cls._contract_sum(contracts, date, False)
        income = cls._contract_sum(contracts, date, True)
        return cls(
            date=date,
            contract_expenses=expenses,
            contract_income=income,
            planned_savings=savings_rate,
            freely_available=income - (expenses + savings_rate),
        )

    def equalize_freely_available(self, new_freely_available: int) -> ExtrapolationItem:
        """Move money between savings and free money to reach the given amount."""
        return replace(
            self,
            planned_savings=self.planned_savings + self.freely_available - new_freely_available,
            freely_available=new_freely_available,
            actual_expenses=0,
            actual_income=0,
            actual_savings=0,
            actual_overspent=0,
        )

    def max_freely_available(self) -> int:
        return self.freely_available + self.planned_savings

    def _to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "contract_expenses": self.contract_expenses,
            "contract_income": self.contract_income,
            "planned_savings": self.planned_savings,
            "freely_available": self.freely_available,
            "actual_expenses": self.actual_expenses,
            "actual_income": self.actual_income,
            "actual_savings": self.actual_savings,
            "actual_overspent": self.actual_overspent,
        }


@dataclass
class Extrapolation:
    """The extrapolated year, plain and with free money spread evenly."""

    date: datetime
    freely_available: int = 0
    planned_savings: int = 0
    normal: list[ExtrapolationItem] = field(default_factory=list)
    equalized_free_money: list[ExtrapolationItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "freely_available": self.freely_available,
            "planned_savings": self.planned_savings,
            "normal": [item._to_dict() for item in self.normal],
            "equalized_free_money": [item._to_dict() for item in self.equalized_free_money],
        }


def month_range(year: int, month: int) -> Iterator[datetime]:
    """First days, in local time, from ``month`` to the end of ``year``."""
    datetime(year, month, 1)
    for current in range(month, 13):
        yield datetime(year, current, 1).astimezone()


def savings_rate(goals: Iterable[Goal], wealth: Wealth) -> int:
    """Monthly saving needed to reach the most demanding goal in time."""

    def rate(goal: Goal) -> int:
        months = (
            goal.due.month
            - wealth.date.month
            + (goal.due.year - wealth.date.year) * 12
        )
        if months <= 0:
            return 0
        return _trunc_div(goal.data.amount - wealth.real.value, months)

    return max(max((rate(goal) for goal in goals), default=0), 0)


def create_extrapolation(
    contracts: Sequence[Contract],
    goals: Sequence[Goal],
    history_wealth: Iterable[Wealth],
    current_wealth: Wealth,
    year: int,
    month: int,
) -> Extrapolation:
    """Combine past wealth with the planned months to the end of ``year``."""
    rate = savings_rate(goals, current_wealth)
    normal = [ExtrapolationItem.from_wealth(wealth) for wealth in history_wealth]
    normal.extend(
        ExtrapolationItem.planned(contracts, rate, date) for date in month_range(year, month)
    )
    if not normal:
        raise ValueError("nothing to extrapolate")

    freely_available = sum(item.freely_available for item in normal)
    planned_savings = sum(item.planned_savings for item in normal)
    equal_share = min(
        _trunc_div(freely_available, 12),
        min(item.max_freely_available() for item in normal),
    )
    return Extrapolation(
        date=normal[0].date,
        freely_available=freely_available,
        planned_savings=planned_savings,
        normal=normal,
        equalized_free_money=[
            item.equalize_freely_available(equal_share) for item in normal
        ],
    )