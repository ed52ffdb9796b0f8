"""Domain models."""
from models.location import Location

__all__ = ["Location"]
