"""
Categories API Endpoints

A category needs an existing billboard of the same store; a category
used by products cannot be deleted (409).
"""
from store_admin.api.crud import build_crud_router
from store_admin.domain.catalog import CategoryFormValues
from store_admin.repositories.catalog_repository import CategoryRepository

router = build_crud_router(CategoryRepository, CategoryFormValues, "categories")
