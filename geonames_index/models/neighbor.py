"""Result row returned by ``GeoIndex`` distance queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geonames_index.models.geoname import GeoName


@dataclass(frozen=True, slots=True)
class GeoNeighbor:
    """A record found by a search together with its distance to the query.

    Attributes:
        record: The matching GeoNames record.
        squared_distance: Squared chord length on the unit sphere (the
            value the tree ranks by).
        distance_m: Geodesic distance from the query in metres
            (ellipsoidal, explicit unit).
    """

    record: GeoName
    squared_distance: float
    distance_m: float

    def to_dict(self) -> dict[str, object]:
        return {
            "record": self.record.to_dict(),
            "squared_distance": self.squared_distance,
            "distance_m": self.distance_m,
        }
