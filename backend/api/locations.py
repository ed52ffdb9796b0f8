"""Location API routes."""
import logging

from fastapi import APIRouter, Depends, Response, status

from db import get_store
from location_core.store import LocationStore
from schemas.locations import LocationCreate, LocationResponse

LOG = logging.getLogger(__name__)

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_model=list[LocationResponse])
def list_locations(store: LocationStore = Depends(get_store)) -> list[LocationResponse]:
    """List all locations in insertion order."""
    return [LocationResponse.from_location(loc) for loc in store.get_all()]


@router.get("/{location_id}", response_model=LocationResponse)
def get_location(location_id: int, store: LocationStore = Depends(get_store)) -> LocationResponse | Response:
    """Get one location. 404 with an empty body if unknown."""
    loc = store.get_by_id(location_id)
    if loc is None:
        LOG.debug("Location %s not found", location_id)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return LocationResponse.from_location(loc)


@router.post("", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
def create_location(
    body: LocationCreate,
    store: LocationStore = Depends(get_store),
) -> LocationResponse:
    """Create a new location; the id is always assigned by the store."""
    loc = store.create(body.to_location())
    return LocationResponse.from_location(loc)


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_location(location_id: int, store: LocationStore = Depends(get_store)) -> Response:
    """Delete a location by id. 404 with an empty body if nothing was deleted."""
    if not store.delete(location_id):
        LOG.debug("Location %s not found for delete", location_id)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
