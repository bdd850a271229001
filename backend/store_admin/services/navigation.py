"""
Dashboard navigation

main_nav() derives the top menu (and which entry is highlighted) from the
current path. Router is the navigation surface forms and cell actions
call after a successful mutation.
"""
from dataclasses import dataclass
from typing import List, Protocol, Tuple

from store_admin.domain.context import DashboardContext


class Router(Protocol):
    """Navigation callbacks provided by the presentation layer"""

    def refresh(self) -> None:
        """Re-fetch server state for the current page"""

    def push(self, href: str) -> None:
        """Navigate to href"""


@dataclass(frozen=True)
class NavRoute:
    label: str
    href: str
    active: bool


# (label, path under the store root); order is the menu order
ROUTE_TABLE: Tuple[Tuple[str, str], ...] = (
    ("Overview", ""),
    ("Billboards", "/billboards"),
    ("Categories", "/categories"),
    ("Sizes", "/sizes"),
    ("Colors", "/colors"),
    ("Products", "/products"),
    ("Orders", "/orders"),
    ("Settings", "/settings"),
)


def main_nav(context: DashboardContext, pathname: str) -> List[NavRoute]:
    """Menu entries for the current store; an entry is active on exact path match"""
    routes = []
    for label, suffix in ROUTE_TABLE:
        href = f"{context.store_href}{suffix}"
        routes.append(NavRoute(label=label, href=href, active=pathname == href))
    return routes
