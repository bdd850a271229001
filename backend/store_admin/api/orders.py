"""
Orders API Endpoints

Read-only: orders are placed by the storefront checkout.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from store_admin.api.crud import to_http_error
from store_admin.core.database import get_db
from store_admin.repositories.order_repository import OrderRepository

router = APIRouter()


@router.get("")
async def get_orders(
    store_id: str,
    is_paid: Optional[bool] = Query(None, alias="isPaid", description="Filter by payment status"),
    db: Session = Depends(get_db),
):
    """Get all orders of a store, newest first, each with its total price"""
    try:
        orders = OrderRepository(db).find_all(store_id, is_paid=is_paid)
        return {
            "status": "success",
            "count": len(orders),
            "data": [order.to_dict() for order in orders],
        }
    except Exception as e:
        raise to_http_error(e, "fetching", "orders")


@router.get("/{order_id}")
async def get_order(store_id: str, order_id: str, db: Session = Depends(get_db)):
    """Get a single order"""
    try:
        order = OrderRepository(db).find_by_id(store_id, order_id)
        if order is None:
            raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
        return {"status": "success", "data": order.to_dict()}
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_error(e, "fetching", "orders")
