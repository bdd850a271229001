"""
Domain Layer - Business Entities

Pydantic models for every store resource plus the form schemas used to
validate create/edit bodies on both sides of the HTTP boundary.
"""
from store_admin.domain.billboard import Billboard, BillboardFormValues
from store_admin.domain.catalog import (
    Category,
    CategoryFormValues,
    Color,
    ColorFormValues,
    Size,
    SizeFormValues,
)
from store_admin.domain.context import DashboardContext
from store_admin.domain.order import Order, OrderItem
from store_admin.domain.product import Image, ImageInput, Product, ProductFormValues

__all__ = [
    'Billboard', 'BillboardFormValues',
    'Category', 'CategoryFormValues',
    'Size', 'SizeFormValues',
    'Color', 'ColorFormValues',
    'Product', 'ProductFormValues', 'Image', 'ImageInput',
    'Order', 'OrderItem',
    'DashboardContext',
]
