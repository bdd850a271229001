"""
Order Repository - read access to storefront orders
"""
from typing import List, Optional

from store_admin import models
from store_admin.domain.order import Order
from store_admin.repositories.base import StoreScopedRepository


class OrderRepository(StoreScopedRepository[Order]):
    """Orders are created by the storefront checkout; the dashboard only reads them"""

    model = models.Order
    domain = Order
    resource = "Order"

    def find_all(self, store_id: str, is_paid: Optional[bool] = None) -> List[Order]:
        query = self._query(store_id)
        if is_paid is not None:
            query = query.filter(self.model.is_paid == is_paid)

        rows = query.order_by(self.model.created_at.desc()).all()
        return [self._to_domain(row) for row in rows]
