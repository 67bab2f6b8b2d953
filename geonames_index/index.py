"""Geographic nearest-neighbour index over GeoNames records.

``GeoIndex`` is the entry point callers use: build it once from a
collection of ``GeoName`` records (or straight from GeoNames rows) and
query it by latitude/longitude.  Query coordinates are projected onto
the unit sphere exactly like the stored records, then handed to the
generic KD-tree search.

The index is immutable.  To pick up new records, build a new index and
swap the reference; concurrent readers of the old one are unaffected.

Example usage::

    with open("cities15000.txt", encoding="utf-8") as fh:
        index = GeoIndex.from_lines(fh)
    place = index.nearest(47.3769, 8.5417)
    hits = index.within_radius(47.3769, 8.5417, radius_m=25_000)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from geonames_index.core.config import IndexConfig
from geonames_index.core.exceptions import ValidationError
from geonames_index.geometry.geodesy import geodesic_distance_m, metres_to_squared_chord
from geonames_index.kdtree import KDTree
from geonames_index.models.geoname import GEONAME_ORDERING, GeoName
from geonames_index.models.neighbor import GeoNeighbor
from geonames_index.parsing import parse_records

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from geonames_index.kdtree import Neighbor
    from geonames_index.models.country import CountryInfo

logger = logging.getLogger("geonames_index.index")


class GeoIndex:
    """Read-only spatial index of ``GeoName`` records.

    Attributes:
        config: Configuration the index was built with.
    """

    __slots__ = ("_tree", "config")

    def __init__(self, tree: KDTree[GeoName], *, config: IndexConfig | None = None) -> None:
        self._tree = tree
        self.config = config or IndexConfig()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def build(cls, records: Iterable[GeoName], *, config: IndexConfig | None = None) -> GeoIndex:
        """Build an index from already-parsed records.

        An empty input produces an empty index, not an error.
        """
        started = time.perf_counter()
        tree = KDTree.build(records, GEONAME_ORDERING)
        logger.info(
            "GeoIndex built | records=%d | height=%d | elapsed=%.3f s",
            len(tree),
            tree.height,
            time.perf_counter() - started,
        )
        return cls(tree, config=config)

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        *,
        countries: Mapping[str, CountryInfo] | None = None,
        config: IndexConfig | None = None,
    ) -> GeoIndex:
        """Parse GeoNames rows and build an index in one step.

        Malformed rows are skipped (and logged) unless
        ``config.strict_records`` is set.
        """
        config = config or IndexConfig()
        records = parse_records(lines, strict=config.strict_records, countries=countries)
        return cls.build(records, config=config)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def tree(self) -> KDTree[GeoName]:
        return self._tree

    @property
    def height(self) -> int:
        return self._tree.height

    def __len__(self) -> int:
        return len(self._tree)

    def __iter__(self) -> Iterator[GeoName]:
        return iter(self._tree)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def nearest(self, latitude: float, longitude: float) -> GeoName | None:
        """Return the record closest to ``(latitude, longitude)``.

        Returns ``None`` when the index is empty.

        Raises:
            InvalidCoordinateError: If the query is outside WGS 84 bounds.
        """
        hit = self._tree.nearest(GeoName.at(latitude, longitude))
        return hit.point if hit is not None else None

    def k_nearest(self, latitude: float, longitude: float, k: int | None = None) -> list[GeoName]:
        """Return up to *k* records ordered by distance from the query.

        *k* defaults to ``config.default_k``; ``k <= 0`` returns ``[]``.
        """
        query = GeoName.at(latitude, longitude)
        return [hit.point for hit in self._tree.k_nearest(query, self._resolve_k(k))]

    def neighbors(
        self, latitude: float, longitude: float, k: int | None = None
    ) -> list[GeoNeighbor]:
        """Like ``k_nearest`` but each row carries its distance in metres."""
        query = GeoName.at(latitude, longitude)
        hits = self._tree.k_nearest(query, self._resolve_k(k))
        return self._annotate(query, hits)

    def within_radius(self, latitude: float, longitude: float, radius_m: float) -> list[GeoNeighbor]:
        """Return every record within *radius_m* metres, nearest first.

        The radius is measured along the sphere of radius
        ``config.earth_radius_m``; reported distances are ellipsoidal,
        so rows right at the edge can differ from *radius_m* by a few
        tenths of a percent.

        Raises:
            ValidationError: If *radius_m* is negative.
            InvalidCoordinateError: If the query is outside WGS 84 bounds.
        """
        if radius_m < 0:
            msg = f"Radius {radius_m} m must be >= 0"
            raise ValidationError(msg, stage="query", code="RADIUS_INVALID")

        query = GeoName.at(latitude, longitude)
        bound = metres_to_squared_chord(radius_m, earth_radius_m=self.config.earth_radius_m)
        hits = self._tree.within(query, bound)
        logger.debug(
            "Radius query | lat=%.5f | lon=%.5f | radius=%.0f m | hits=%d",
            latitude,
            longitude,
            radius_m,
            len(hits),
        )
        return self._annotate(query, hits)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve_k(self, k: int | None) -> int:
        return self.config.default_k if k is None else k

    def _annotate(self, query: GeoName, hits: list[Neighbor[GeoName]]) -> list[GeoNeighbor]:
        return [
            GeoNeighbor(
                record=hit.point,
                squared_distance=hit.squared_distance,
                distance_m=geodesic_distance_m(
                    query.latitude,
                    query.longitude,
                    hit.point.latitude,
                    hit.point.longitude,
                    ellipsoid=self.config.ellipsoid,
                ),
            )
            for hit in hits
        ]
