"""
Product Domain Model

Represents a product entity in a store's catalog.
A product points to one category, one size and one color and carries an
ordered list of image URLs.
"""
from pydantic import Field, field_serializer
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

from store_admin.domain.base import CamelModel, FormValues


class Image(CamelModel):
    """Product image (URL only, files live in external storage)"""

    id: str = Field(..., description="Image ID")
    product_id: str = Field(..., description="Owning product")
    url: str = Field(..., description="Image URL")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")


class Product(CamelModel):
    """
    Product domain model

    Fields:
        category_id / size_id / color_id: required references
        price: Selling price
        is_featured: Shown on the storefront home page
        is_archived: Hidden everywhere on the storefront
        images: Product images, in upload order

        # Filled in list/detail responses
        category_name: Name of the referenced category
        size_name: Name of the referenced size
        color_value: Hex value of the referenced color
    """

    id: str = Field(..., description="Product ID")
    store_id: str = Field(..., description="Owning store")
    category_id: str = Field(..., description="Referenced category")
    size_id: str = Field(..., description="Referenced size")
    color_id: str = Field(..., description="Referenced color")
    name: str = Field(..., description="Product name")
    price: Decimal = Field(..., description="Selling price", ge=0)
    is_featured: bool = Field(False, description="Featured on home page")
    is_archived: bool = Field(False, description="Hidden from storefront")
    images: List[Image] = Field(default_factory=list)

    category_name: Optional[str] = None
    size_name: Optional[str] = None
    color_value: Optional[str] = None

    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    @field_serializer("price", when_used="json")
    def _price_as_float(self, value: Decimal) -> float:
        return float(value)


class ImageInput(CamelModel):
    """Image reference inside a product form"""
    url: str = Field(..., min_length=1)


class ProductFormValues(FormValues):
    """Schema for creating or editing a product"""
    name: str = Field(..., min_length=1)
    images: List[ImageInput] = Field(default_factory=list)
    price: Decimal = Field(
        ...,
        gt=0,
        max_digits=12,
        decimal_places=2,
        description="Coerced from text input; fits the DECIMAL(12, 2) column",
    )
    category_id: str = Field(..., min_length=1)
    color_id: str = Field(..., min_length=1)
    size_id: str = Field(..., min_length=1)
    is_featured: bool = False
    is_archived: bool = False

    @field_serializer("price", when_used="json")
    def _price_as_float(self, value: Decimal) -> float:
        return float(value)

    @classmethod
    def blank(cls) -> dict:
        return {
            "name": "",
            "images": [],
            "price": 0,
            "categoryId": "",
            "colorId": "",
            "sizeId": "",
            "isFeatured": False,
            "isArchived": False,
        }
