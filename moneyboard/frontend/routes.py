"""Pages of the web frontend and the navigation between them."""

from __future__ import annotations

from dataclasses import dataclass

_STATIC_PATHS = {
    "/": "index",
    "/dashboard": "dashboard",
    "/transactions": "transactions",
    "/pods": "pods",
    "/budgets": "budgets",
    "/debts": "debts",
    "/contracts": "contracts",
    "/goals": "goals",
    "/404": "not_found",
}
_PATH_OF = {name: path for path, name in _STATIC_PATHS.items()}

# Pages showing one record, and the collection their path lives under.
_RECORD_PAGES = {
    "transaction": "transactions",
    "contract": "contracts",
    "goal": "goals",
}
_RECORD_PAGE_OF = {collection: name for name, collection in _RECORD_PAGES.items()}


@dataclass(frozen=True)
class Route:
    """A frontend page; record pages carry the record's id."""

    name: str
    id: str | None = None

    def __post_init__(self) -> None:
        if self.name in _RECORD_PAGES:
            if not self.id:
                raise ValueError(f"route {self.name!r} needs an id")
        elif self.name in _PATH_OF:
            if self.id is not None:
                raise ValueError(f"route {self.name!r} takes no id")
        else:
            raise ValueError(f"unknown route: {self.name!r}")

    def path(self) -> str:
        """The URL path of the page."""
        if self.name in _RECORD_PAGES:
            return f"/{_RECORD_PAGES[self.name]}/{self.id}"
        return _PATH_OF[self.name]


def parse_route(path: str) -> Route:
    """The page for a URL path; unknown paths give the not-found page."""
    for separator in ("#", "?"):
        path = path.split(separator, 1)[0]
    name = _STATIC_PATHS.get(path)
    if name is not None:
        return Route(name)
    parts = path.split("/")
    if len(parts) == 3 and parts[0] == "" and parts[2]:
        record_page = _RECORD_PAGE_OF.get(parts[1])
        if record_page is not None:
            return Route(record_page, parts[2])
    return Route("not_found")


@dataclass(frozen=True)
class NavItem:
    """An entry of the navigation bar."""

    route: Route
    path: str
    icon: str
    text: str
    index: bool = False


def nav_items() -> list[NavItem]:
    """The navigation bar entries, in display order."""
    entries = (
        ("dashboard", "dashboard", "Dashboard"),
        ("transactions", "list_alt", "Transactions"),
        ("pods", "wallet", "Pods"),
        ("budgets", "donut_large", "Budgets"),
        ("debts", "credit_card_off", "Debts"),
        ("contracts", "contract", "Contracts"),
        ("goals", "flag", "Goals"),
    )
    items = []
    for name, icon, text in entries:
        route = Route(name)
        items.append(
            NavItem(
                route=route,
                path=route.path(),
                icon=icon,
                text=text,
                index=name == "dashboard",
            )
        )
    return items