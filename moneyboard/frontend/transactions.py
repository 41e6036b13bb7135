"""The transaction list page: its API query and its rows."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from datetime import date, datetime

from moneyboard.frontend.list_item import ListItem
from moneyboard.frontend.routes import Route
from moneyboard.transaction import Transaction

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_FORM_SAFE = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789*-._"
)


def _form_encode(text: str) -> str:
    """Encode as application/x-www-form-urlencoded."""
    out = []
    for char in text:
        if char in _FORM_SAFE:
            out.append(char)
        elif char == " ":
            out.append("+")
        else:
            out.extend(f"%{byte:02X}" for byte in char.encode("utf-8"))
    return "".join(out)


def _day_label(moment: datetime) -> str:
    return f"{moment.day:02d} {_MONTHS[moment.month - 1]} {moment.year}"


@dataclass(frozen=True)
class TransactionQuery:
    """Filters of the transaction list taken from the page's URL."""

    start: str | None = None
    end: str | None = None
    pod: str | None = None
    debt: str | None = None
    budget: str | None = None
    inbudget: str | None = None
    ttype: str | None = None

    def api_url(self, today: date | None = None) -> str:
        """The relative API address; the start defaults to this year."""
        today = today if today is not None else date.today()
        pairs = [("start", self.start if self.start is not None else str(today.year))]
        pairs.extend(
            (name, value)
            for name in ("end", "pod", "debt", "budget", "inbudget", "ttype")
            if (value := getattr(self, name)) is not None
        )
        query = "&".join(f"{_form_encode(k)}={_form_encode(v)}" for k, v in pairs)
        return f"api/transactions?{query}"

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> TransactionQuery:
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in params.items() if k in names})


def transaction_list_items(transactions: Iterable[Transaction]) -> list[ListItem]:
    """List rows for transactions; invalid ones are highlighted."""
    items = []
    for transaction in transactions:
        if transaction.id is None:
            raise ValueError("transaction has no id")
        items.append(
            ListItem(
                title=transaction.title(),
                subtitle=_day_label(transaction.date),
                amount=transaction.amount,
                highlight=not transaction.validate(),
                color_amount=transaction.signed_amount(),
                edit_url=Route("transaction", transaction.id).path(),
            )
        )
    return items