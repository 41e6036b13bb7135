"""Contracts and their recurring payments."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from moneyboard.iterutils import add_months, parse_timestamp


def _now() -> datetime:
    return datetime.now().astimezone()


class State(str, Enum):
    ACTIVE = "active"
    TERMINATED = "terminated"
    EXPIRED = "expired"


class PaymentKind(str, Enum):
    ACTIVE = "active"
    DEBIT = "debit"
    CREDIT = "credit"
    PAYPAL = "paypal"
    GOOGLEPAY = "googlepay"


@dataclass
class Payment:
    """A recurring payment; ``cycle`` is in months."""

    first: datetime = field(default_factory=_now)
    amount: int = 0
    fix: bool = False
    cycle: int = 0
    kind: PaymentKind = PaymentKind.DEBIT
    pod: str = ""
    debts: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.amount < 0 or self.cycle < 0:
            raise ValueError("payment amount and cycle must not be negative")

    def has_income(self) -> bool:
        return self.kind is PaymentKind.CREDIT

    def debt_sum(self) -> int:
        return sum(self.debts.values())

    def net_amount(self) -> int:
        """The amount without the part carried as debts."""
        net = self.amount - self.debt_sum()
        if net < 0:
            raise ValueError("payment debts exceed its amount")
        return net

    def signed_amount(self) -> int:
        return self.net_amount() if self.has_income() else -self.net_amount()

    def signed_monthly_amount(self) -> int:
        signed = self.signed_amount()
        if self.cycle == 0:
            return signed
        quotient = abs(signed) // self.cycle
        return quotient if signed >= 0 else -quotient

    def date_of_next_payment(self, now: datetime | None = None) -> datetime:
        """The first payment date not earlier than ``now``."""
        if now is None:
            now = datetime.now(self.first.tzinfo) if self.first.tzinfo else datetime.now()
        cycle = self.cycle if self.cycle > 0 else 1
        result = self.first
        while result < now:
            result = add_months(result, cycle)
        return result


def _payment_to_dict(payment: Payment) -> dict[str, Any]:
    return {
        "first": payment.first.isoformat(),
        "amount": payment.amount,
        "fix": payment.fix,
        "cycle": payment.cycle,
        "kind": payment.kind.value,
        "pod": payment.pod,
        "debts": dict(payment.debts),
    }


def _payment_from_dict(data: dict[str, Any]) -> Payment:
    return Payment(
        first=parse_timestamp(data["first"]),
        amount=int(data["amount"]),
        fix=bool(data["fix"]),
        cycle=int(data["cycle"]),
        kind=PaymentKind(data["kind"]),
        pod=data["pod"],
        debts={k: int(v) for k, v in (data.get("debts") or {}).items()},
    )


@dataclass
class Contract:
    """A contract; ``term`` and ``notice`` are in months."""

    id: str | None = None
    title: str = ""
    partner: str = ""
    start: datetime = field(default_factory=_now)
    state: State = State.ACTIVE
    term: int = 0
    notice: int = 0
    management: str = ""
    payment: Payment = field(default_factory=Payment)
    attachments: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "partner": self.partner,
            "start": self.start.isoformat(),
            "state": self.state.value,
            "term": self.term,
            "notice": self.notice,
            "management": self.management,
            "payment": _payment_to_dict(self.payment),
            "attachments": list(self.attachments),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Contract:
        try:
            return cls(
                id=data.get("id"),
                title=data["title"],
                partner=data["partner"],
                start=parse_timestamp(data["start"]),
                state=State(data["state"]),
                term=int(data["term"]),
                notice=int(data["notice"]),
                management=data["management"],
                payment=_payment_from_dict(data["payment"]),
                attachments=list(data.get("attachments") or []),
            )
        except KeyError as exc:
            raise ValueError(f"contract is missing field {exc.args[0]!r}") from exc