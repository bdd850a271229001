"""
Store-scoped CRUD router factory

Builds the five endpoints every editable resource exposes under
/api/{store_id}/{resource}:

    GET    ""           list
    GET    /{id}        detail
    POST   ""           create  (body validated with the form schema)
    PATCH  /{id}        update  (same body shape)
    DELETE /{id}        delete  (409 when dependents exist)
"""
import logging
from typing import Callable, Type

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session

from store_admin.core.database import get_db
from store_admin.domain.base import FormValues
from store_admin.repositories.base import (
    DependentRecordsError,
    EntityNotFoundError,
    StoreScopedRepository,
)

logger = logging.getLogger(__name__)


def to_http_error(error: Exception, action: str, resource: str) -> HTTPException:
    """Translate a repository error into the HTTP error the dashboard expects"""
    if isinstance(error, EntityNotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, DependentRecordsError):
        return HTTPException(status_code=409, detail=str(error))
    logger.error(f"Error {action} {resource}: {error}")
    return HTTPException(status_code=500, detail=f"Error {action} {resource}: {str(error)}")


def build_crud_router(
    repository_class: Type[StoreScopedRepository],
    form_class: Type[FormValues],
    resource: str,
    include_list: bool = True,
) -> APIRouter:
    """
    Create the CRUD router for one resource

    Args:
        repository_class: Repository bound to the resource's table
        form_class: Schema the POST/PATCH body must satisfy
        resource: Plural name used in error messages (e.g. "colors")
        include_list: Set False when the caller registers its own list endpoint
    """
    router = APIRouter()

    def get_repository(db: Session = Depends(get_db)) -> StoreScopedRepository:
        return repository_class(db)

    repository_dependency: Callable = Depends(get_repository)

    if include_list:
        @router.get("")
        async def list_entities(store_id: str, repo: StoreScopedRepository = repository_dependency):
            try:
                items = repo.find_all(store_id)
                return {
                    "status": "success",
                    "count": len(items),
                    "data": [item.to_dict() for item in items],
                }
            except Exception as e:
                raise to_http_error(e, "fetching", resource)

    @router.get("/{entity_id}")
    async def get_entity(store_id: str, entity_id: str, repo: StoreScopedRepository = repository_dependency):
        try:
            item = repo.find_by_id(store_id, entity_id)
            if item is None:
                raise HTTPException(status_code=404, detail=f"{repo.resource} {entity_id} not found")
            return {"status": "success", "data": item.to_dict()}
        except HTTPException:
            raise
        except Exception as e:
            raise to_http_error(e, "fetching", resource)

    @router.post("")
    async def create_entity(
        store_id: str,
        values: form_class = Body(...),
        repo: StoreScopedRepository = repository_dependency,
    ):
        try:
            item = repo.create(store_id, values)
            return {"status": "success", "data": item.to_dict()}
        except Exception as e:
            raise to_http_error(e, "creating", resource)

    @router.patch("/{entity_id}")
    async def update_entity(
        store_id: str,
        entity_id: str,
        values: form_class = Body(...),
        repo: StoreScopedRepository = repository_dependency,
    ):
        try:
            item = repo.update(store_id, entity_id, values)
            return {"status": "success", "data": item.to_dict()}
        except Exception as e:
            raise to_http_error(e, "updating", resource)

    @router.delete("/{entity_id}")
    async def delete_entity(store_id: str, entity_id: str, repo: StoreScopedRepository = repository_dependency):
        try:
            item = repo.delete(store_id, entity_id)
            return {"status": "success", "data": item.to_dict()}
        except Exception as e:
            raise to_http_error(e, "deleting", resource)

    return router
