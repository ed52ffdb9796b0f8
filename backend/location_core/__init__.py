# Location core: in-memory location store
from location_core.store import SEED_LOCATIONS, LocationStore

__all__ = [
    "LocationStore",
    "SEED_LOCATIONS",
]
