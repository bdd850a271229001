"""
Catalog Repositories - billboards, categories, sizes, colors

Returns domain models; dependency guards stop deletes that would orphan
categories or products.
"""
from store_admin import models
from store_admin.domain.billboard import Billboard
from store_admin.domain.catalog import Category, Color, Size
from store_admin.repositories.base import StoreScopedRepository


class BillboardRepository(StoreScopedRepository[Billboard]):
    model = models.Billboard
    domain = Billboard
    resource = "Billboard"
    dependents = ((models.Category, "billboard_id", "categories"),)


class CategoryRepository(StoreScopedRepository[Category]):
    model = models.Category
    domain = Category
    resource = "Category"
    references = (("billboard_id", models.Billboard, "Billboard"),)
    dependents = ((models.Product, "category_id", "products"),)


class SizeRepository(StoreScopedRepository[Size]):
    model = models.Size
    domain = Size
    resource = "Size"
    dependents = ((models.Product, "size_id", "products"),)


class ColorRepository(StoreScopedRepository[Color]):
    model = models.Color
    domain = Color
    resource = "Color"
    dependents = ((models.Product, "color_id", "products"),)
