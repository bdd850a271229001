"""
Billboards API Endpoints
"""
from store_admin.api.crud import build_crud_router
from store_admin.domain.billboard import BillboardFormValues
from store_admin.repositories.catalog_repository import BillboardRepository

router = build_crud_router(BillboardRepository, BillboardFormValues, "billboards")
