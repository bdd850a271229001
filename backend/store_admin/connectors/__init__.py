"""
Connectors - outbound HTTP clients
"""
from store_admin.connectors.resource_api import (
    ApiConflictError,
    ApiResponseError,
    ApiTransportError,
    ResourceApiClient,
    StoreApiError,
)

__all__ = [
    'ResourceApiClient',
    'StoreApiError',
    'ApiTransportError',
    'ApiResponseError',
    'ApiConflictError',
]
