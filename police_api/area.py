"""
Geographic filters accepted by the street-level endpoints.

The API takes one of three shapes, each under its own query parameter:
  Point       -> lat=..&lng=..
  Polygon     -> poly=lat,lng:lat,lng:...
  LocationId  -> location_id=...
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple, Union

from .errors import InvalidInputError
from .utils import format_coordinate, require_finite, require_id


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "lat", require_finite("lat", self.lat, -90.0, 90.0))
        object.__setattr__(self, "lng", require_finite("lng", self.lng, -180.0, 180.0))

    def as_param(self) -> str:
        return f"{format_coordinate(self.lat)},{format_coordinate(self.lng)}"


@dataclass(frozen=True)
class Point:
    coordinate: Coordinate

    @classmethod
    def of(cls, lat: float, lng: float) -> "Point":
        return cls(Coordinate(lat, lng))


@dataclass(frozen=True)
class Polygon:
    """Custom area. Points are sent in the given order and never auto-closed."""
    points: Tuple[Coordinate, ...]

    def __post_init__(self) -> None:
        points = tuple(self.points)
        if len(points) < 3:
            raise InvalidInputError(f"polygon needs at least 3 points, got {len(points)}")
        if not all(isinstance(p, Coordinate) for p in points):
            raise InvalidInputError("polygon points must be Coordinate values")
        object.__setattr__(self, "points", points)

    @classmethod
    def of(cls, pairs: Iterable[Tuple[float, float]]) -> "Polygon":
        return cls(tuple(Coordinate(lat, lng) for lat, lng in pairs))


@dataclass(frozen=True)
class LocationId:
    id: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", require_id("location_id", self.id))


Area = Union[Point, Polygon, LocationId]


def encode_area(area: Area) -> Dict[str, str]:
    if isinstance(area, Point):
        return {
            "lat": format_coordinate(area.coordinate.lat),
            "lng": format_coordinate(area.coordinate.lng),
        }
    if isinstance(area, Polygon):
        return {"poly": ":".join(p.as_param() for p in area.points)}
    if isinstance(area, LocationId):
        return {"location_id": area.id}
    raise TypeError(f"expected Point, Polygon or LocationId, got {type(area).__name__}")
