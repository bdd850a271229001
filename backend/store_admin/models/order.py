"""
Order tables: orders placed from the storefront and their lines
"""
from sqlalchemy import Column, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship

from store_admin.core.database import Base
from .mixins import StoreScopedMixin, new_id


class Order(StoreScopedMixin, Base):
    __tablename__ = "orders"

    phone = Column(String(64), nullable=False, default="")
    address = Column(String(1024), nullable=False, default="")
    is_paid = Column(Boolean, default=False, nullable=False, index=True)

    # Relationships
    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")


class OrderItem(Base):
    """
    One product in an order

    Products referenced here cannot be deleted (RESTRICT).
    """
    __tablename__ = "order_items"

    id = Column(String(32), primary_key=True, default=new_id)
    order_id = Column(String(32), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String(32), ForeignKey("products.id", ondelete="RESTRICT"), nullable=False, index=True)

    # Relationships
    order = relationship("Order", back_populates="items")
    product = relationship("Product", back_populates="order_items")

    @property
    def product_name(self):
        return self.product.name if self.product else None

    @property
    def product_price(self):
        return self.product.price if self.product else 0
