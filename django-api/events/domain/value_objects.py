"""Domain primitives that enforce validity at creation time."""

import math
from dataclasses import dataclass
from typing import Self

EARTH_RADIUS_MILES = 3958.8


@dataclass(frozen=True)
class Pagination:
    """1-indexed page window applied by the store."""

    page_size: int
    page_number: int

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError("Page size must be positive")
        if self.page_number < 1:
            raise ValueError("Page number must be positive")

    @classmethod
    def from_strings(cls, page_size: str, page_number: str) -> Self:
        return cls(page_size=int(page_size), page_number=int(page_number))

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    def first_page(self) -> Self:
        """Same page size, page number reset to 1."""
        return type(self)(page_size=self.page_size, page_number=1)


@dataclass(frozen=True)
class GeoRadius:
    """A circle on the earth's surface, radius in miles."""

    latitude: float
    longitude: float
    miles: int

    def __post_init__(self) -> None:
        if self.miles < 0:
            raise ValueError("Distance cannot be negative")

    def distance_to(self, latitude: float, longitude: float) -> float:
        """Great-circle distance in miles (haversine)."""
        lat1, lat2 = math.radians(self.latitude), math.radians(latitude)
        d_lat = lat2 - lat1
        d_lon = math.radians(longitude - self.longitude)
        a = (
            math.sin(d_lat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
        )
        return 2 * EARTH_RADIUS_MILES * math.asin(min(1.0, math.sqrt(a)))

    def contains(self, latitude: float, longitude: float) -> bool:
        return self.distance_to(latitude, longitude) <= self.miles

    def bounding_box(
        self,
    ) -> tuple[tuple[float, float], tuple[tuple[float, float], ...]]:
        """Latitude range and longitude ranges enclosing the circle.

        A box crossing the antimeridian gets two longitude ranges. The
        longitude ranges are empty when every longitude must be searched.
        """
        angle = self.miles / EARTH_RADIUS_MILES
        lat_delta = math.degrees(angle)
        lat_range = (self.latitude - lat_delta, self.latitude + lat_delta)
        if lat_range[0] <= -90 or lat_range[1] >= 90:
            return lat_range, ()
        # Widest longitude span of a spherical cap.
        lon_delta = math.degrees(
            math.asin(min(1.0, math.sin(angle) / math.cos(math.radians(self.latitude))))
        )

        west, east = self.longitude - lon_delta, self.longitude + lon_delta
        if west < -180:
            return lat_range, ((-180.0, east), (west + 360, 180.0))
        if east > 180:
            return lat_range, ((west, 180.0), (-180.0, east - 360))
        return lat_range, ((west, east),)
