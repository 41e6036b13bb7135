"""Transactions and the per-key values derived from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from moneyboard.iterutils import parse_timestamp


class TransactionType(str, Enum):
    """Direction of a transaction."""

    IN = "in"
    OUT = "out"
    MOVE = "move"


@dataclass
class Transaction:
    """A single booking, split into budgets, inbudgets and debts."""

    id: str | None = None
    kind: TransactionType = TransactionType.OUT
    date: datetime = field(default_factory=lambda: datetime.now().astimezone())
    amount: int = 0
    sender: str | None = None
    receiver: str | None = None
    budgets: dict[str, int] = field(default_factory=dict)
    inbudgets: dict[str, int] = field(default_factory=dict)
    debts: dict[str, int] = field(default_factory=dict)
    tags: dict[str, str] = field(default_factory=dict)
    attachments: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("transaction amount must not be negative")

    def validate(self) -> bool:
        """Whether the amount is fully and correctly distributed."""
        if self.kind is TransactionType.IN:
            return self.amount == self.debt_sum() + self.inbudget_sum()
        if self.kind is TransactionType.OUT:
            return self.amount == self.debt_sum() + self.budget_sum()
        return self.debt_sum() == 0 and self.budget_sum() == 0 and self.inbudget_sum() == 0

    def income(self) -> int:
        if self.kind is TransactionType.IN:
            return self.amount - self.debt_sum()
        return 0

    def out(self) -> int:
        if self.kind is TransactionType.OUT:
            return self.amount - self.debt_sum()
        return 0

    def signed_amount(self) -> int:
        if self.kind is TransactionType.IN:
            return self.amount
        if self.kind is TransactionType.OUT:
            return -self.amount
        return 0

    def budget_sum(self) -> int:
        return sum(self.budgets.values())

    def inbudget_sum(self) -> int:
        return sum(self.inbudgets.values())

    def debt_sum(self) -> int:
        return sum(self.debts.values())

    def signed_debt_sum(self) -> int:
        if self.kind is TransactionType.IN:
            return self.debt_sum()
        if self.kind is TransactionType.OUT:
            return -self.debt_sum()
        return 0

    def title(self) -> str:
        sender = self.sender or ""
        receiver = self.receiver or ""
        if self.kind is TransactionType.IN:
            return receiver
        if self.kind is TransactionType.OUT:
            return sender
        return f"{sender} to {receiver}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.kind.value,
            "date": self.date.isoformat(),
            "amount": self.amount,
            "sender": self.sender,
            "receiver": self.receiver,
            "budgets": dict(self.budgets),
            "inbudgets": dict(self.inbudgets),
            "debts": dict(self.debts),
            "tags": dict(self.tags),
            "attachments": list(self.attachments),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Transaction:
        try:
            return cls(
                id=data.get("id"),
                kind=TransactionType(data["type"]),
                date=parse_timestamp(data["date"]),
                amount=int(data["amount"]),
                sender=data.get("sender"),
                receiver=data.get("receiver"),
                budgets={k: int(v) for k, v in (data.get("budgets") or {}).items()},
                inbudgets={k: int(v) for k, v in (data.get("inbudgets") or {}).items()},
                debts={k: int(v) for k, v in (data.get("debts") or {}).items()},
                tags={k: str(v) for k, v in (data.get("tags") or {}).items()},
                attachments=list(data.get("attachments") or []),
            )
        except KeyError as exc:
            raise ValueError(f"transaction is missing field {exc.args[0]!r}") from exc


@dataclass
class TransactionValues:
    """Signed amounts per key (pod, debt, budget) at a given date."""

    date: datetime = field(default_factory=lambda: datetime.now().astimezone())
    data: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_transaction_pod(cls, transaction: Transaction) -> TransactionValues:
        """Credit the receiving pod and debit the sending pod."""
        data: dict[str, int] = {}
        if transaction.receiver is not None:
            data[transaction.receiver] = transaction.amount
        if transaction.sender is not None:
            data[transaction.sender] = -transaction.amount
        return cls(date=transaction.date, data=data)

    @classmethod
    def from_transaction_debt(cls, transaction: Transaction) -> TransactionValues:
        """Debts signed by the transaction's direction."""
        multiplier = {
            TransactionType.IN: 1,
            TransactionType.OUT: -1,
            TransactionType.MOVE: 0,
        }[transaction.kind]
        return cls(
            date=transaction.date,
            data={key: value * multiplier for key, value in transaction.debts.items()},
        )