"""
Database models (SQLAlchemy ORM)
"""
from .catalog import Billboard, Category, Size, Color
from .product import Product, Image
from .order import Order, OrderItem

__all__ = [
    "Billboard",
    "Category",
    "Size",
    "Color",
    "Product",
    "Image",
    "Order",
    "OrderItem",
]
