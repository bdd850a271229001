"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQLAlchemy details from the routers.
"""
from store_admin.repositories.base import (
    DependentRecordsError,
    EntityNotFoundError,
    RepositoryError,
    StoreScopedRepository,
)
from store_admin.repositories.catalog_repository import (
    BillboardRepository,
    CategoryRepository,
    ColorRepository,
    SizeRepository,
)
from store_admin.repositories.order_repository import OrderRepository
from store_admin.repositories.product_repository import ProductRepository

__all__ = [
    'StoreScopedRepository',
    'RepositoryError',
    'EntityNotFoundError',
    'DependentRecordsError',
    'BillboardRepository',
    'CategoryRepository',
    'SizeRepository',
    'ColorRepository',
    'ProductRepository',
    'OrderRepository',
]
