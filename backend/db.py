"""Store handle for request handlers: the application's in-memory location store."""
from fastapi import Request

from location_core.store import LocationStore


def get_store(request: Request) -> LocationStore:
    """FastAPI dependency: return the store owned by the running application."""
    return request.app.state.location_store
