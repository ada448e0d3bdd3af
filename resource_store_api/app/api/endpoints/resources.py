"""
CRUD endpoints shared by every resource family.

``create_resource_router`` builds the route table for one collection
of the store: list, get, create, replace, partial update and delete.
The users and posts routers are two instances of the same table; only
the collection they are bound to differs.
"""

from typing import Any, Dict, List, Optional, Type

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from ...core.errors import MissingFieldsError, ResourceNotFoundError
from ...schemas.common import ErrorRead
from ...services.collection import ResourceCollection
from ...services.store import ResourceStore
from ..deps import entity_id_param, get_store, json_payload


def create_resource_router(resource_name: str, read_model: Type[BaseModel]) -> APIRouter:
    """Return an ``APIRouter`` serving the collection ``resource_name``.

    Parameters
    ----------
    resource_name : str
        Name of the collection in the store (``"users"``, ``"posts"``).
    read_model : Type[BaseModel]
        Schema used to document the records in the OpenAPI document.
        Responses are not filtered through it, so keys added by a
        partial update are returned as stored.
    """
    router = APIRouter()
    not_found = {status.HTTP_404_NOT_FOUND: {"model": ErrorRead}}
    bad_request = {status.HTTP_400_BAD_REQUEST: {"model": ErrorRead}}

    def get_collection(store: ResourceStore = Depends(get_store)) -> ResourceCollection:
        return store.collection(resource_name)

    @router.get(
        "",
        response_model=None,
        responses={status.HTTP_200_OK: {"model": List[read_model]}},
        name=f"list_{resource_name}",
    )
    async def list_records(
        collection: ResourceCollection = Depends(get_collection),
    ) -> List[Dict[str, Any]]:
        """Return every record in insertion order."""
        return collection.list()

    @router.get(
        "/{entity_id}",
        response_model=None,
        responses={status.HTTP_200_OK: {"model": read_model}, **not_found},
        name=f"get_{resource_name}",
    )
    async def get_record(
        entity_id: Optional[int] = Depends(entity_id_param),
        collection: ResourceCollection = Depends(get_collection),
    ) -> Dict[str, Any]:
        try:
            return collection.get(entity_id)
        except ResourceNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    @router.post(
        "",
        response_model=None,
        status_code=status.HTTP_201_CREATED,
        responses={status.HTTP_201_CREATED: {"model": read_model}, **bad_request},
        name=f"create_{resource_name}",
    )
    async def create_record(
        payload: Dict[str, Any] = Depends(json_payload),
        collection: ResourceCollection = Depends(get_collection),
    ) -> Dict[str, Any]:
        """Create a record with the next free id."""
        try:
            return collection.create(payload)
        except MissingFieldsError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    @router.put(
        "/{entity_id}",
        response_model=None,
        responses={status.HTTP_200_OK: {"model": read_model}, **not_found, **bad_request},
        name=f"replace_{resource_name}",
    )
    async def replace_record(
        entity_id: Optional[int] = Depends(entity_id_param),
        payload: Dict[str, Any] = Depends(json_payload),
        collection: ResourceCollection = Depends(get_collection),
    ) -> Dict[str, Any]:
        """Replace a record; fields outside the canonical set are dropped."""
        try:
            return collection.replace(entity_id, payload)
        except ResourceNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        except MissingFieldsError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    @router.patch(
        "/{entity_id}",
        response_model=None,
        responses={status.HTTP_200_OK: {"model": read_model}, **not_found},
        name=f"update_{resource_name}",
    )
    async def update_record(
        entity_id: Optional[int] = Depends(entity_id_param),
        payload: Dict[str, Any] = Depends(json_payload),
        collection: ResourceCollection = Depends(get_collection),
    ) -> Dict[str, Any]:
        """Merge the supplied fields into a record.  The id cannot change."""
        try:
            return collection.update(entity_id, payload)
        except ResourceNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    @router.delete(
        "/{entity_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        responses=not_found,
        name=f"delete_{resource_name}",
    )
    async def delete_record(
        entity_id: Optional[int] = Depends(entity_id_param),
        collection: ResourceCollection = Depends(get_collection),
    ) -> None:
        try:
            collection.delete(entity_id)
        except ResourceNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        return None

    # Non-strict routing: "/api/users/" and "/api/users/1/" reach the same
    # handlers instead of falling through to the front-end route.
    for route in list(router.routes):
        router.add_api_route(
            route.path + "/",
            route.endpoint,
            methods=list(route.methods),
            status_code=route.status_code,
            response_model=None,
            include_in_schema=False,
            name=route.name,
        )

    return router
