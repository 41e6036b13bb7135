"""A row of the frontend's lists: title, subtitle, actions and amount."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape


@dataclass(frozen=True)
class ListItem:
    """One list row; ``amount`` is in cents.

    The amount is coloured by ``color_amount`` when given, else by ``amount``.
    Actions appear as links when their URL is set.
    """

    title: str
    amount: int
    subtitle: str = ""
    highlight: bool = False
    color_amount: int | None = None
    edit_url: str | None = None
    delete_url: str | None = None
    filter_url: str | None = None

    def color(self) -> str:
        value = self.amount if self.color_amount is None else self.color_amount
        if value > 0:
            return "green"
        if value < 0:
            return "red"
        return "gray"

    def amount_text(self) -> str:
        return f"{self.amount / 100:.2f} €"

    def initial(self) -> str:
        return self.title[:1] or "?"

    def render(self) -> str:
        """The row as HTML."""
        actions = "".join(
            f'<a class="material-symbols-outlined icon" href="{escape(url)}">{icon}</a>'
            for url, icon in (
                (self.filter_url, "list_alt"),
                (self.edit_url, "edit"),
                (self.delete_url, "delete"),
            )
            if url is not None
        )
        container = "container highlight" if self.highlight else "container"
        return (
            "<li>"
            f'<div class="{container}">'
            f'<div class="left"><span class="character-icon">{escape(self.initial())}</span></div>'
            '<div class="middle-left">'
            f'<span class="title">{escape(self.title)}</span>'
            f'<span class="subtitle">{escape(self.subtitle)}</span>'
            "</div>"
            f'<div class="middle-right">{actions}</div>'
            f'<div class="right"><span class="amount {self.color()}">'
            f"{escape(self.amount_text())}</span></div>"
            "</div>"
            "</li>"
        )