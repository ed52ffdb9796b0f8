"""Location record held by the in-memory store."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Location:
    """A named geographic point: id, title, latitude, longitude, description.

    id is None on a candidate that has not been stored yet; the store assigns it.
    """

    id: Optional[int] = None
    title: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    description: Optional[str] = None
