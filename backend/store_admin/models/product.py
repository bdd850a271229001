"""
Product tables: products and their images
"""
from sqlalchemy import Column, String, Boolean, DateTime, DECIMAL, ForeignKey
from sqlalchemy.orm import relationship

from store_admin.core.database import Base
from .mixins import StoreScopedMixin, new_id, utcnow


class Product(StoreScopedMixin, Base):
    __tablename__ = "products"

    # References (must exist before a product can be saved)
    category_id = Column(String(32), ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True)
    size_id = Column(String(32), ForeignKey("sizes.id", ondelete="RESTRICT"), nullable=False, index=True)
    color_id = Column(String(32), ForeignKey("colors.id", ondelete="RESTRICT"), nullable=False, index=True)

    name = Column(String(255), nullable=False)
    price = Column(DECIMAL(12, 2), nullable=False)

    # Storefront flags
    is_featured = Column(Boolean, default=False, nullable=False, index=True)
    is_archived = Column(Boolean, default=False, nullable=False, index=True)

    # Relationships
    category = relationship("Category", back_populates="products")
    size = relationship("Size", back_populates="products")
    color = relationship("Color", back_populates="products")
    images = relationship(
        "Image",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="Image.created_at",
    )
    order_items = relationship("OrderItem", back_populates="product")

    @property
    def category_name(self):
        return self.category.name if self.category else None

    @property
    def size_name(self):
        return self.size.name if self.size else None

    @property
    def color_value(self):
        return self.color.value if self.color else None


class Image(Base):
    __tablename__ = "images"

    id = Column(String(32), primary_key=True, default=new_id)
    product_id = Column(String(32), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    url = Column(String(1024), nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    product = relationship("Product", back_populates="images")
