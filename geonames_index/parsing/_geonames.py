"""Parser for GeoNames point rows (``allCountries.txt`` layout).

Each row carries 19 tab-separated fields:

====  ==================  ================================================
 #    field               notes
====  ==================  ================================================
 0    geonameid           integer id
 1    name                UTF-8 name
 2    asciiname           plain ASCII name
 3    alternatenames      comma separated
 4    latitude            decimal degrees (WGS 84)
 5    longitude           decimal degrees (WGS 84)
 6    feature class       single letter, may be empty
 7    feature code
 8    country code        ISO-3166 alpha-2
 9    cc2                 alternate country codes
 10   admin1 code
 11   admin2 code
 12   admin3 code
 13   admin4 code
 14   population
 15   elevation           metres, may be empty
 16   dem                 digital elevation model, metres
 17   timezone            IANA id
 18   modification date   yyyy-MM-dd
====  ==================  ================================================
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geonames_index.core.constants import COMMENT_PREFIX, GEONAMES_FIELD_COUNT
from geonames_index.core.exceptions import RecordParseError
from geonames_index.models.geoname import FeatureClass, GeoName
from geonames_index.parsing._fields import (
    parse_date,
    parse_float,
    parse_int,
    parse_list,
    parse_optional_int,
    split_row,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from geonames_index.models.country import CountryInfo

logger = logging.getLogger("geonames_index.parsing._geonames")

# Column positions
GEONAME_ID = 0
NAME = 1
ASCII_NAME = 2
ALTERNATE_NAMES = 3
LATITUDE = 4
LONGITUDE = 5
FEATURE_CLASS = 6
FEATURE_CODE = 7
COUNTRY_CODE = 8
ADMIN1_CODE = 10
POPULATION = 14
ELEVATION = 15
TIMEZONE = 17
MODIFICATION_DATE = 18


def parse_record(line: str) -> GeoName:
    """Parse one GeoNames row into a ``GeoName``.

    Raises:
        RecordParseError: Wrong field count or an unparseable field.
        InvalidCoordinateError: Latitude/longitude outside WGS 84 bounds.
        InvalidFeatureClassError: Unknown feature class letter.
    """
    fields = split_row(line, GEONAMES_FIELD_COUNT, "GeoName")

    latitude = parse_float(fields[LATITUDE], "latitude")
    longitude = parse_float(fields[LONGITUDE], "longitude")

    class_code = fields[FEATURE_CLASS].strip()
    feature_class = FeatureClass.from_code(class_code) if class_code else None

    return GeoName(
        latitude=latitude,
        longitude=longitude,
        name=fields[NAME],
        geoname_id=parse_int(fields[GEONAME_ID], "geonameid"),
        ascii_name=fields[ASCII_NAME],
        alternate_names=parse_list(fields[ALTERNATE_NAMES]),
        feature_class=feature_class,
        feature_code=fields[FEATURE_CODE].strip(),
        country_code=fields[COUNTRY_CODE].strip().upper(),
        admin1_code=fields[ADMIN1_CODE].strip(),
        population=parse_int(fields[POPULATION], "population"),
        elevation=parse_optional_int(fields[ELEVATION], "elevation"),
        timezone=fields[TIMEZONE].strip(),
        modification_date=parse_date(fields[MODIFICATION_DATE], "modification date"),
    )


def parse_records(
    lines: Iterable[str],
    *,
    strict: bool = False,
    countries: Mapping[str, CountryInfo] | None = None,
) -> Iterator[GeoName]:
    """Parse GeoNames rows lazily.

    Blank lines and ``#`` comments are skipped.  A malformed row is
    logged and skipped so one bad row does not abort a multi-million
    row load, unless *strict* is set.

    Args:
        lines: Rows, e.g. an open text file.
        strict: Re-raise the first ``RecordParseError`` instead of skipping.
        countries: Optional country table (``load_country_table``) joined
            onto each record by ISO code.

    Yields:
        Parsed records in input order.

    Raises:
        RecordParseError: Only when *strict* is set.
    """
    parsed = 0
    skipped = 0
    for line_no, line in enumerate(lines, start=1):
        if not line.strip() or line.startswith(COMMENT_PREFIX):
            continue
        try:
            record = parse_record(line)
        except RecordParseError as exc:
            if strict:
                raise
            skipped += 1
            logger.warning("GeoName record skipped | line=%d | error=%s", line_no, exc)
            continue
        if countries is not None:
            record = record.with_country(countries)
        parsed += 1
        yield record

    logger.info("GeoName records parsed | parsed=%d | skipped=%d", parsed, skipped)
