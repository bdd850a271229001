"""
Colors API Endpoints
"""
from store_admin.api.crud import build_crud_router
from store_admin.domain.catalog import ColorFormValues
from store_admin.repositories.catalog_repository import ColorRepository

router = build_crud_router(ColorRepository, ColorFormValues, "colors")
