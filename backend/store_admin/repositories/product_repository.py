"""
Product Repository - Data Access Layer for Products

Products own their images: saving a product replaces its image list.
"""
from typing import List, Optional

from pydantic import BaseModel

from store_admin import models
from store_admin.domain.product import Product
from store_admin.repositories.base import StoreScopedRepository


class ProductRepository(StoreScopedRepository[Product]):
    model = models.Product
    domain = Product
    resource = "Product"
    references = (
        ("category_id", models.Category, "Category"),
        ("size_id", models.Size, "Size"),
        ("color_id", models.Color, "Color"),
    )
    dependents = ((models.OrderItem, "product_id", "orders"),)

    def _column_values(self, values: BaseModel) -> dict:
        data = values.model_dump(exclude={"images"})
        data["images"] = [models.Image(url=image.url) for image in values.images]
        return data

    def find_all(
        self,
        store_id: str,
        category_id: Optional[str] = None,
        size_id: Optional[str] = None,
        color_id: Optional[str] = None,
        is_featured: Optional[bool] = None,
        is_archived: Optional[bool] = None,
    ) -> List[Product]:
        """
        Find products of a store with optional filters

        Args:
            store_id: Owning store
            category_id / size_id / color_id: Filter by reference
            is_featured: Filter by featured flag
            is_archived: Filter by archived flag (None = both)

        Returns:
            Products, newest first
        """
        query = self._query(store_id)

        if category_id:
            query = query.filter(self.model.category_id == category_id)
        if size_id:
            query = query.filter(self.model.size_id == size_id)
        if color_id:
            query = query.filter(self.model.color_id == color_id)
        if is_featured is not None:
            query = query.filter(self.model.is_featured == is_featured)
        if is_archived is not None:
            query = query.filter(self.model.is_archived == is_archived)

        rows = query.order_by(self.model.created_at.desc()).all()
        return [self._to_domain(row) for row in rows]
