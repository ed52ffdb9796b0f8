"""Pydantic schemas for location API."""
from typing import Optional

from pydantic import BaseModel, Field

from models.location import Location


class LocationCreate(BaseModel):
    """Payload for creating a location. A client-supplied id is accepted and ignored."""

    id: Optional[int] = None
    title: Optional[str] = None
    latitude: Optional[float] = Field(default=None, allow_inf_nan=False)
    longitude: Optional[float] = Field(default=None, allow_inf_nan=False)
    description: Optional[str] = None

    def to_location(self) -> Location:
        """Candidate record for the store, without an id."""
        return Location(
            title=self.title,
            latitude=self.latitude,
            longitude=self.longitude,
            description=self.description,
        )


class LocationResponse(BaseModel):
    """Location in API responses."""

    id: int
    title: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    description: Optional[str] = None

    @classmethod
    def from_location(cls, loc: Location) -> "LocationResponse":
        """Build response from a stored location."""
        return cls(
            id=loc.id,
            title=loc.title,
            latitude=loc.latitude,
            longitude=loc.longitude,
            description=loc.description,
        )
