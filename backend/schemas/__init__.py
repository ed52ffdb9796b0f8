# Schemas package
from .health import HealthResponse
from .locations import LocationCreate, LocationResponse

__all__ = [
    "HealthResponse",
    "LocationCreate",
    "LocationResponse",
]
