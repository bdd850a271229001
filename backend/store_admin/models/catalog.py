"""
Catalog tables: billboards, categories, sizes, colors
"""
from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from store_admin.core.database import Base
from .mixins import StoreScopedMixin


class Billboard(StoreScopedMixin, Base):
    __tablename__ = "billboards"

    label = Column(String(255), nullable=False)
    image_url = Column(String(1024), nullable=False)

    # Relationships
    categories = relationship("Category", back_populates="billboard")


class Category(StoreScopedMixin, Base):
    __tablename__ = "categories"

    billboard_id = Column(String(32), ForeignKey("billboards.id", ondelete="RESTRICT"), nullable=False, index=True)
    name = Column(String(255), nullable=False)

    # Relationships
    billboard = relationship("Billboard", back_populates="categories")
    products = relationship("Product", back_populates="category")

    @property
    def billboard_label(self):
        return self.billboard.label if self.billboard else None


class Size(StoreScopedMixin, Base):
    __tablename__ = "sizes"

    name = Column(String(255), nullable=False)
    value = Column(String(255), nullable=False)

    products = relationship("Product", back_populates="size")


class Color(StoreScopedMixin, Base):
    __tablename__ = "colors"

    name = Column(String(255), nullable=False)
    value = Column(String(32), nullable=False)

    products = relationship("Product", back_populates="color")
