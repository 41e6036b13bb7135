"""Chart configurations for wealth history and monthly extrapolation."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from moneyboard.extrapolation import Extrapolation, ExtrapolationItem
from moneyboard.history import Wealth

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _month_name(moment: datetime) -> str:
    return _MONTHS[moment.month - 1]


@dataclass
class Dataset:
    """One series of a chart."""

    data: list[float]
    label: str | None = None
    stack: int | None = None
    border_width: int | None = None
    border_color: str | None = None
    background_color: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"data": list(self.data)}
        for key, value in (
            ("label", self.label),
            ("stack", self.stack),
            ("borderWidth", self.border_width),
            ("borderColor", self.border_color),
            ("backgroundColor", self.background_color),
        ):
            if value is not None:
                result[key] = value
        return result


@dataclass
class ChartConfig:
    """A chart of a given kind (``line``, ``bar``, ``doughnut``)."""

    kind: str
    labels: list[str] = field(default_factory=list)
    datasets: list[Dataset] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "data": {
                "labels": list(self.labels),
                "datasets": [dataset.to_dict() for dataset in self.datasets],
            },
        }


def wealth_history_url(year: int, month: int, day: int, length: int) -> str:
    """The API address of a wealth history."""
    return f"/api/history/wealth?year={year}&month={month}&day={day}&len={length}"


def wealth_history_config(wealth: Sequence[Wealth]) -> ChartConfig | None:
    """A line chart of the wealth history, or ``None`` without data."""
    if not wealth:
        return None
    series: list[tuple[str, Callable[[Wealth], int], str]] = [
        ("Sum", lambda w: w.total.value, "blue"),
        ("Real", lambda w: w.real.value, "lightgreen"),
        ("Debt", lambda w: w.debt.value, "purple"),
        ("In", lambda w: w.income.value, "green"),
        ("Out", lambda w: w.out.value, "red"),
    ]
    return ChartConfig(
        kind="line",
        labels=[f"{_month_name(w.date)}-{w.date.year}" for w in wealth],
        datasets=[
            Dataset(
                data=[value(w) / 100 for w in wealth],
                label=label,
                border_width=1,
                border_color=color,
                background_color=color,
            )
            for label, value, color in series
        ],
    )


def monthly_extrapolation_config(extrapolation: Extrapolation) -> ChartConfig:
    """A stacked bar chart of planned and actual money per month."""
    items = extrapolation.normal
    series: list[tuple[str, Callable[[ExtrapolationItem], int], str]] = [
        ("Expenses", lambda i: i.contract_expenses, "orange"),
        ("Savings", lambda i: i.planned_savings, "blue"),
        ("Free", lambda i: i.freely_available, "green"),
        ("Spent", lambda i: i.actual_expenses, "red"),
        ("Over-Spent", lambda i: i.actual_overspent, "darkred"),
        ("Saved", lambda i: i.actual_savings, "green"),
    ]
    return ChartConfig(
        kind="bar",
        labels=[_month_name(item.date) for item in items],
        datasets=[
            Dataset(
                data=[value(item) / 100 for item in items],
                label=label,
                stack=0,
                border_width=1,
                border_color=color,
                background_color=color,
            )
            for label, value, color in series
        ],
    )