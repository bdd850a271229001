"""
Sizes API Endpoints
"""
from store_admin.api.crud import build_crud_router
from store_admin.domain.catalog import SizeFormValues
from store_admin.repositories.catalog_repository import SizeRepository

router = build_crud_router(SizeRepository, SizeFormValues, "sizes")
