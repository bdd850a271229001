"""
Billboard Domain Model

A promotional banner (label + image) shown on category pages.
"""
from pydantic import Field
from typing import Optional
from datetime import datetime

from store_admin.domain.base import CamelModel, FormValues


class Billboard(CamelModel):
    """Billboard as stored and returned by the store API"""

    id: str = Field(..., description="Billboard ID")
    store_id: str = Field(..., description="Owning store")
    label: str = Field(..., description="Banner text")
    image_url: str = Field(..., description="Banner image URL")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")


class BillboardFormValues(FormValues):
    """Schema for creating or editing a billboard"""
    label: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1)

    @classmethod
    def blank(cls) -> dict:
        return {"label": "", "imageUrl": ""}
