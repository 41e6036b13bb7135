from datetime import datetime, timezone

import pytest

from moneyboard.contract import Contract, Payment, PaymentKind
from moneyboard.extrapolation import (
    Extrapolation,
    ExtrapolationItem,
    create_extrapolation,
    month_range,
    savings_rate,
)
from moneyboard.goal import Goal, RealWealth
from moneyboard.history import ValueDiff, Wealth

UTC = timezone.utc


def _at(year, month, day):
    return datetime(year, month, day, tzinfo=UTC)


def _contract(kind, amount, cycle=1, first_month=1, debts=None):
    return Contract(
        payment=Payment(
            first=_at(2024, first_month, 1),
            amount=amount,
            cycle=cycle,
            kind=kind,
            debts=debts or {},
        )
    )


def test_month_range_runs_to_year_end():
    dates = list(month_range(2024, 10))
    assert [d.month for d in dates] == list(range(10, 13))
    assert all(d.year == 2024 and d.day == 1 and d.hour == 0 for d in dates)
    assert all(d.tzinfo is not None for d in dates)


def test_month_range_full_year():
    assert len(list(month_range(2024, 1))) == 12


def test_month_range_invalid_month():
    with pytest.raises(ValueError):
        list(month_range(2024, 13))


def test_savings_rate_spreads_goal_over_months():
    goal = Goal(due=_at(2025, 1, 15), data=RealWealth(12000))
    wealth = Wealth(date=_at(2024, 1, 1), real=ValueDiff.of(0))
    assert savings_rate([goal], wealth) == 1000


def test_savings_rate_zero_cases():
    wealth = Wealth(date=_at(2024, 6, 1), real=ValueDiff.of(50000))
    assert savings_rate([], wealth) == 0
    assert savings_rate([Goal(due=_at(2024, 1, 1), data=RealWealth(90000))], wealth) == 0
    assert savings_rate([Goal(due=_at(2025, 6, 1), data=RealWealth(12000))], wealth) == 0


def test_savings_rate_takes_maximum():
    wealth = Wealth(date=_at(2024, 1, 1))
    near = Goal(due=_at(2024, 4, 1), data=RealWealth(9000))
    far = Goal(due=_at(2026, 1, 1), data=RealWealth(9000))
    assert savings_rate([near, far], wealth) == max(
        savings_rate([near], wealth), savings_rate([far], wealth)
    )


def test_planned_item_balances():
    contracts = [
        _contract(PaymentKind.DEBIT, 5000),
        _contract(PaymentKind.CREDIT, 20000),
    ]
    item = ExtrapolationItem.planned(contracts, 3000, _at(2024, 3, 1))
    assert item.contract_expenses == 5000
    assert item.contract_income == 20000
    assert item.planned_savings == 3000
    assert item.freely_available + item.contract_expenses + item.planned_savings == (
        item.contract_income
    )
    assert item.actual_expenses == 0


def test_planned_item_subtracts_debts():
    contract = _contract(PaymentKind.DEBIT, 5000, debts={"x": 1000})
    item = ExtrapolationItem.planned([contract], 0, _at(2024, 3, 1))
    assert item.contract_expenses == contract.payment.net_amount()


def test_planned_item_respects_cycle():
    contract = _contract(PaymentKind.DEBIT, 700, cycle=3, first_month=1)
    assert ExtrapolationItem.planned([contract], 0, _at(2024, 4, 1)).contract_expenses == 700
    assert ExtrapolationItem.planned([contract], 0, _at(2024, 2, 1)).contract_expenses == 0


def test_planned_item_zero_cycle_is_error():
    with pytest.raises(ValueError):
        ExtrapolationItem.planned(
            [_contract(PaymentKind.DEBIT, 700, cycle=0)], 0, _at(2024, 4, 1)
        )


def test_equalize_keeps_maximum():
    item = ExtrapolationItem.planned(
        [_contract(PaymentKind.CREDIT, 20000)], 3000, _at(2024, 3, 1)
    )
    equal = item.equalize_freely_available(1234)
    assert equal.freely_available == 1234
    assert equal.max_freely_available() == item.max_freely_available()
    assert equal.contract_income == item.contract_income
    assert equal.date == item.date


def test_from_wealth_overspent():
    wealth = Wealth(
        date=_at(2024, 1, 1),
        income=ValueDiff.of(700),
        out=ValueDiff.of(400),
        real=ValueDiff(0, -250),
    )
    item = ExtrapolationItem.from_wealth(wealth)
    assert item.actual_income == 700
    assert item.actual_expenses == 400
    assert item.actual_savings == 0
    assert item.actual_overspent == 250
    assert item.date == wealth.date


def test_from_wealth_saved():
    item = ExtrapolationItem.from_wealth(Wealth(real=ValueDiff(0, 90)))
    assert item.actual_savings == 90
    assert item.actual_overspent == 0


def _sample():
    contracts = [
        _contract(PaymentKind.CREDIT, 300000),
        _contract(PaymentKind.DEBIT, 100000),
    ]
    history = [
        Wealth(
            date=_at(2024, 9, 1),
            income=ValueDiff.of(500),
            out=ValueDiff.of(200),
            real=ValueDiff(0, 300),
        )
    ]
    return create_extrapolation(contracts, [], history, Wealth(), 2024, 10)


def test_create_extrapolation_structure():
    result = _sample()
    assert len(result.normal) == 4
    assert result.normal[0].actual_income == 500
    assert result.date == result.normal[0].date == _at(2024, 9, 1)
    assert result.freely_available == sum(i.freely_available for i in result.normal)
    assert result.planned_savings == sum(i.planned_savings for i in result.normal)


def test_create_extrapolation_equalized():
    result = _sample()
    assert len(result.equalized_free_money) == len(result.normal)
    shares = {item.freely_available for item in result.equalized_free_money}
    assert len(shares) == 1
    share = shares.pop()
    assert share <= min(item.max_freely_available() for item in result.normal)
    for plain, equal in zip(result.normal, result.equalized_free_money):
        assert equal.max_freely_available() == plain.max_freely_available()


def test_create_extrapolation_to_dict():
    result = _sample()
    d = result.to_dict()
    assert set(d) == {
        "date",
        "freely_available",
        "planned_savings",
        "normal",
        "equalized_free_money",
    }
    assert len(d["normal"]) == len(result.normal)
    assert d["normal"][1]["contract_income"] == result.normal[1].contract_income


def test_extrapolation_to_dict_empty():
    d = Extrapolation(date=_at(2024, 1, 1)).to_dict()
    assert d["normal"] == []
    assert d["date"] == _at(2024, 1, 1).isoformat()