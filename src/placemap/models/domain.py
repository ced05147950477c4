"""Domain models for place records and the map features built from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union


@dataclass(slots=True)
class Place:
    """A current place record as returned by the place store.

    Coordinates are kept exactly as stored (text); the viewport query parses them.
    """

    id: str
    place_id: Optional[str]
    name: str
    address: Optional[str]
    district: Optional[str]
    latitude: Any
    longitude: Any
    category: Optional[str]
    business_status: Optional[str]
    description: Optional[str]
    is_current: bool = True


@dataclass(frozen=True, slots=True)
class Bounds:
    """Rectangular viewport in decimal degrees."""

    north: float
    south: float
    east: float
    west: float

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]]) -> Optional["Bounds"]:
        """Build bounds only when all four edges are present."""
        if not values:
            return None
        edges = {key: values.get(key) for key in ("north", "south", "east", "west")}
        if any(value is None for value in edges.values()):
            return None
        return cls(**{key: float(value) for key, value in edges.items()})

    def contains(self, latitude: float, longitude: float) -> bool:
        # Literal containment: a viewport with west > east matches nothing.
        return self.south <= latitude <= self.north and self.west <= longitude <= self.east

    def as_dict(self) -> dict[str, float]:
        return {"north": self.north, "south": self.south, "east": self.east, "west": self.west}


@dataclass(frozen=True, slots=True)
class MapPoint:
    """A place projected for map rendering."""

    id: str
    place_id: Optional[str]
    name: str
    address: Optional[str]
    latitude: float
    longitude: float
    category: Optional[str]
    business_status: Optional[str]
    description: Optional[str]


@dataclass(frozen=True, slots=True)
class Cluster:
    """Two or more nearby points rendered as one marker anchored on the seed point."""

    cluster_id: str
    count: int
    categories: tuple[Optional[str], ...]
    primary_category: Optional[str]
    latitude: float
    longitude: float
    members: tuple[MapPoint, ...]


MapFeature = Union[MapPoint, Cluster]
