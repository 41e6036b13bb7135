from datetime import datetime, timezone

from moneyboard.extrapolation import create_extrapolation
from moneyboard.frontend.charts import (
    ChartConfig,
    Dataset,
    monthly_extrapolation_config,
    wealth_history_config,
    wealth_history_url,
)
from moneyboard.history import ValueDiff, Wealth


def _wealth(month, total):
    return Wealth(
        date=datetime(2024, month, 1, tzinfo=timezone.utc),
        total=ValueDiff(total),
        real=ValueDiff(total // 2),
    )


def test_wealth_history_url():
    assert wealth_history_url(0, 1, 0, 24) == "/api/history/wealth?year=0&month=1&day=0&len=24"


def test_wealth_history_empty_gives_none():
    assert wealth_history_config([]) is None


def test_wealth_history_config():
    wealth = [_wealth(1, 1000), _wealth(2, 2500)]
    config = wealth_history_config(wealth)
    assert config.kind == "line"
    assert config.labels == ["Jan-2024", "Feb-2024"]
    assert [d.label for d in config.datasets] == ["Sum", "Real", "Debt", "In", "Out"]
    assert config.datasets[0].data == [w.total.value / 100 for w in wealth]
    assert all(len(d.data) == len(wealth) for d in config.datasets)


def test_monthly_extrapolation_config():
    extrapolation = create_extrapolation(
        [], [], [], Wealth(date=datetime(2024, 9, 1, tzinfo=timezone.utc)), 2024, 9
    )
    config = monthly_extrapolation_config(extrapolation)
    assert config.kind == "bar"
    assert len(config.labels) == len(extrapolation.normal)
    assert config.labels[-1] == "Dec"
    assert [d.label for d in config.datasets] == [
        "Expenses",
        "Savings",
        "Free",
        "Spent",
        "Over-Spent",
        "Saved",
    ]
    assert all(d.stack == 0 for d in config.datasets)


def test_to_dict_omits_unset_fields():
    config = ChartConfig("doughnut", ["a"], [Dataset([1.5])])
    assert config.to_dict() == {
        "type": "doughnut",
        "data": {"labels": ["a"], "datasets": [{"data": [1.5]}]},
    }


def test_dataset_to_dict_keys():
    data = Dataset([0.0], label="Sum", border_width=1, border_color="blue").to_dict()
    assert data["borderColor"] == "blue"
    assert data["borderWidth"] == 1
    assert "backgroundColor" not in data