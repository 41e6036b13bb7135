from datetime import datetime, timezone

import pytest

from moneyboard.goal import Goal, RealWealth


def test_default_goal_data():
    assert Goal().data == RealWealth(0)


def test_wire_format():
    goal = Goal(id="g1", due=datetime(2025, 6, 1, tzinfo=timezone.utc), data=RealWealth(500))
    assert goal.to_dict()["data"] == {"realWealth": 500}


def test_round_trip():
    goal = Goal(id="g1", due=datetime(2025, 6, 1, tzinfo=timezone.utc), data=RealWealth(12345))
    assert Goal.from_dict(goal.to_dict()) == goal


def test_unknown_variant():
    with pytest.raises(ValueError):
        Goal.from_dict({"id": None, "due": "2025-06-01T00:00:00+00:00", "data": {"other": 1}})


def test_missing_due():
    with pytest.raises(ValueError):
        Goal.from_dict({"data": {"realWealth": 1}})


def test_negative_amount():
    with pytest.raises(ValueError):
        RealWealth(-1)