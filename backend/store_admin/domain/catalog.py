"""
Catalog Domain Models

Categories, sizes and colors: the reference data a product points to.
"""
from pydantic import Field
from typing import Optional
from datetime import datetime

from store_admin.domain.base import CamelModel, FormValues


class Category(CamelModel):
    """
    Category domain model

    Fields:
        billboard_id: Billboard shown on the category page (required)
        billboard_label: Label of that billboard, filled in list responses
    """

    id: str = Field(..., description="Category ID")
    store_id: str = Field(..., description="Owning store")
    billboard_id: str = Field(..., description="Referenced billboard")
    name: str = Field(..., description="Category name")
    billboard_label: Optional[str] = Field(None, description="Referenced billboard label")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")


class Size(CamelModel):
    """Size domain model (name + free-form value, e.g. "Small" / "S")"""

    id: str = Field(..., description="Size ID")
    store_id: str = Field(..., description="Owning store")
    name: str = Field(..., description="Size name")
    value: str = Field(..., description="Size value")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")


class Color(CamelModel):
    """Color domain model (name + hex value)"""

    id: str = Field(..., description="Color ID")
    store_id: str = Field(..., description="Owning store")
    name: str = Field(..., description="Color name")
    value: str = Field(..., description="Hex code, e.g. #FF0000")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")


class CategoryFormValues(FormValues):
    """Schema for creating or editing a category"""
    name: str = Field(..., min_length=1)
    billboard_id: str = Field(..., min_length=1)

    @classmethod
    def blank(cls) -> dict:
        return {"name": "", "billboardId": ""}


class SizeFormValues(FormValues):
    """Schema for creating or editing a size"""
    name: str = Field(..., min_length=1)
    value: str = Field(..., min_length=1)

    @classmethod
    def blank(cls) -> dict:
        return {"name": "", "value": ""}


class ColorFormValues(FormValues):
    """Schema for creating or editing a color"""
    name: str = Field(..., min_length=1)
    value: str = Field(
        ...,
        min_length=4,
        pattern=r"^#",
        description="Hex code starting with #",
    )

    @classmethod
    def blank(cls) -> dict:
        return {"name": "", "value": ""}
