"""
Products API Endpoints
Handles product catalog management for one store
"""
from typing import Optional

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from store_admin.api.crud import build_crud_router, to_http_error
from store_admin.core.database import get_db
from store_admin.domain.product import ProductFormValues
from store_admin.repositories.product_repository import ProductRepository

router = build_crud_router(ProductRepository, ProductFormValues, "products", include_list=False)


@router.get("")
async def get_products(
    store_id: str,
    category_id: Optional[str] = Query(None, alias="categoryId", description="Filter by category"),
    size_id: Optional[str] = Query(None, alias="sizeId", description="Filter by size"),
    color_id: Optional[str] = Query(None, alias="colorId", description="Filter by color"),
    is_featured: Optional[bool] = Query(None, alias="isFeatured", description="Filter by featured flag"),
    is_archived: Optional[bool] = Query(None, alias="isArchived", description="Filter by archived flag"),
    db: Session = Depends(get_db),
):
    """
    Get all products of a store with optional filters

    Each product includes its images and the names of its category and size
    plus the color hex value.
    """
    try:
        repo = ProductRepository(db)
        products = repo.find_all(
            store_id,
            category_id=category_id,
            size_id=size_id,
            color_id=color_id,
            is_featured=is_featured,
            is_archived=is_archived,
        )

        return {
            "status": "success",
            "count": len(products),
            "data": [product.to_dict() for product in products],
        }

    except Exception as e:
        raise to_http_error(e, "fetching", "products")
