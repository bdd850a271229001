"""
Order Domain Models

Orders are placed from the storefront; the dashboard only lists them.
"""
from pydantic import Field, field_serializer
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

from store_admin.domain.base import CamelModel


class OrderItem(CamelModel):
    """
    Order line: one product in an order

    product_name / product_price are read from the product at query time.
    """

    id: str = Field(..., description="Order item ID")
    order_id: str = Field(..., description="Parent order ID")
    product_id: str = Field(..., description="Ordered product")
    product_name: Optional[str] = Field(None, description="Product name")
    product_price: Decimal = Field(Decimal("0"), description="Product price", ge=0)

    @field_serializer("product_price", when_used="json")
    def _price_as_float(self, value: Decimal) -> float:
        return float(value)


class Order(CamelModel):
    """Order domain model"""

    id: str = Field(..., description="Order ID")
    store_id: str = Field(..., description="Owning store")
    phone: str = Field("", description="Customer phone")
    address: str = Field("", description="Shipping address")
    is_paid: bool = Field(False, description="Payment received")
    items: List[OrderItem] = Field(default_factory=list)
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    @property
    def total_price(self) -> Decimal:
        """Sum of the ordered products' prices"""
        return sum((item.product_price for item in self.items), Decimal("0"))

    @property
    def product_names(self) -> List[str]:
        return [item.product_name or "" for item in self.items]

    def to_dict(self) -> dict:
        """Wire dict plus the computed total"""
        data = super().to_dict()
        data['totalPrice'] = float(self.total_price)
        return data
