"""In-memory location store: single source of truth for the API."""
import logging
import threading
from dataclasses import replace
from typing import Optional

from models.location import Location

LOG = logging.getLogger(__name__)

# Sample rows appended by seed_default (ids 1-3 on a fresh store).
SEED_LOCATIONS: tuple[Location, ...] = (
    Location(title="Seoul Tower", latitude=37.5512, longitude=126.9882, description="Famous landmark in Seoul"),
    Location(title="Gangnam Station", latitude=37.4979, longitude=127.0276, description="Busy metro station"),
    Location(title="Gyeongbokgung Palace", latitude=37.5788, longitude=126.9770, description="Historic palace"),
)


class LocationStore:
    """Ordered list of locations plus the next id to assign.

    Ids increase monotonically and are never reused, even after delete.
    All access goes through one lock since route handlers run on a thread pool.
    """

    def __init__(self) -> None:
        self._locations: list[Location] = []
        self._next_id = 1
        self._lock = threading.Lock()

    @classmethod
    def with_seed(cls) -> "LocationStore":
        """Build a store holding the sample locations."""
        store = cls()
        store.seed_default()
        return store

    def get_all(self) -> list[Location]:
        """Snapshot of all locations in insertion order."""
        with self._lock:
            return list(self._locations)

    def get_by_id(self, location_id: int) -> Optional[Location]:
        """Get location by id or None."""
        with self._lock:
            for loc in self._locations:
                if loc.id == location_id:
                    return loc
        return None

    def create(self, candidate: Location) -> Location:
        """Store a copy of candidate under the next id and return it. Any id on candidate is ignored."""
        with self._lock:
            loc = replace(candidate, id=self._next_id)
            self._next_id += 1
            self._locations.append(loc)
        LOG.info("Created location id=%s title=%r", loc.id, loc.title)
        return loc

    def delete(self, location_id: int) -> bool:
        """Remove location by id. Returns True if removed."""
        with self._lock:
            for i, loc in enumerate(self._locations):
                if loc.id == location_id:
                    del self._locations[i]
                    break
            else:
                return False
        LOG.info("Deleted location id=%s", location_id)
        return True

    def count(self) -> int:
        """Number of stored locations."""
        with self._lock:
            return len(self._locations)

    def __len__(self) -> int:
        return self.count()

    def seed_default(self) -> None:
        """Append the sample locations."""
        for loc in SEED_LOCATIONS:
            self.create(loc)
