"""Post-filter predicates for search results.

The index answers purely geometric questions.  Anything else ("only
cities", "only in CH", "inside this polygon") is a predicate the
caller applies to the records a search returns, typically after asking
for a generous ``k``::

    hits = index.k_nearest(46.2, 6.1, k=50)
    cities = apply_filters(hits, of_feature_class(FeatureClass.CITY), in_country("CH"))

These helpers never influence the search itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from shapely.geometry.base import BaseGeometry

    from geonames_index.models.geoname import FeatureClass, GeoName

    RecordPredicate = Callable[[GeoName], bool]


def in_country(*codes: str) -> RecordPredicate:
    """Match records whose ISO country code is one of *codes*."""
    wanted = frozenset(code.upper() for code in codes)

    def predicate(record: GeoName) -> bool:
        return record.country_code.upper() in wanted

    return predicate


def of_feature_class(*classes: FeatureClass) -> RecordPredicate:
    """Match records whose feature class is one of *classes*."""
    wanted = frozenset(classes)

    def predicate(record: GeoName) -> bool:
        return record.feature_class in wanted

    return predicate


def min_population(population: int) -> RecordPredicate:
    """Match records with at least *population* inhabitants."""

    def predicate(record: GeoName) -> bool:
        return record.population >= population

    return predicate


def within_region(region: BaseGeometry) -> RecordPredicate:
    """Match records lying inside (or on the boundary of) *region*.

    *region* is a shapely geometry in ``(lon, lat)`` axis order, the
    same order GeoJSON uses.
    """
    from shapely import prepared
    from shapely.geometry import Point

    prepared_region = prepared.prep(region)

    def predicate(record: GeoName) -> bool:
        return bool(prepared_region.covers(Point(record.longitude, record.latitude)))

    return predicate


def apply_filters(records: Iterable[GeoName], *predicates: RecordPredicate) -> list[GeoName]:
    """Keep the records that satisfy every predicate, preserving order."""
    return [record for record in records if all(p(record) for p in predicates)]
