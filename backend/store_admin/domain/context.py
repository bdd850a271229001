"""
Dashboard request context

Explicit replacement for routing params: which store the dashboard is
operating on and, on detail pages, which entity.
"""
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class DashboardContext:
    store_id: str
    entity_id: Optional[str] = None

    def __post_init__(self):
        if not self.store_id:
            raise ValueError("store_id is required")

    def for_entity(self, entity_id: str) -> "DashboardContext":
        return replace(self, entity_id=entity_id)

    @property
    def store_href(self) -> str:
        return f"/{self.store_id}"

    def list_href(self, resource: str) -> str:
        """Dashboard list page for a resource, e.g. /{store}/categories"""
        return f"/{self.store_id}/{resource}"

    def detail_href(self, resource: str, entity_id: str) -> str:
        return f"/{self.store_id}/{resource}/{entity_id}"
