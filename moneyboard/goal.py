"""Savings goals."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from moneyboard.iterutils import parse_timestamp


@dataclass(frozen=True)
class RealWealth:
    """Reach a real wealth of ``amount`` cents."""

    amount: int = 0

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("goal amount must not be negative")


@dataclass
class Goal:
    """A goal to reach by its due date."""

    id: str | None = None
    due: datetime = field(default_factory=lambda: datetime.now().astimezone())
    data: RealWealth = field(default_factory=RealWealth)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "due": self.due.isoformat(),
            "data": {"realWealth": self.data.amount},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Goal:
        try:
            payload = data["data"]
            due = parse_timestamp(data["due"])
        except KeyError as exc:
            raise ValueError(f"goal is missing field {exc.args[0]!r}") from exc
        if not isinstance(payload, dict) or set(payload) != {"realWealth"}:
            raise ValueError(f"unknown goal data: {payload!r}")
        return cls(id=data.get("id"), due=due, data=RealWealth(int(payload["realWealth"])))