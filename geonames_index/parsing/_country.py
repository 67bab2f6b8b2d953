"""Parser for the GeoNames country table (``countryInfo.txt``)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geonames_index.core.constants import COMMENT_PREFIX, COUNTRY_INFO_FIELD_COUNT
from geonames_index.core.exceptions import RecordParseError
from geonames_index.models.country import CountryInfo
from geonames_index.parsing._fields import parse_float, parse_int, parse_list, split_row

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger("geonames_index.parsing._country")


def parse_country_info(line: str) -> CountryInfo:
    """Parse one ``countryInfo.txt`` row.

    Raises:
        RecordParseError: Wrong field count, missing ISO code or an
            unparseable numeric field.
    """
    fields = split_row(line, COUNTRY_INFO_FIELD_COUNT, "country info")
    iso = fields[0].strip().upper()
    if len(iso) != 2:
        msg = f"Invalid country info record: ISO code {fields[0]!r} is not two letters"
        raise RecordParseError(msg)

    return CountryInfo(
        iso=iso,
        iso3=fields[1].strip(),
        iso_numeric=fields[2].strip(),
        fips=fields[3].strip(),
        name=fields[4].strip(),
        capital=fields[5].strip(),
        area_km2=parse_float(fields[6], "area", default=0.0),
        population=parse_int(fields[7], "population"),
        continent=fields[8].strip(),
        tld=fields[9].strip(),
        currency_code=fields[10].strip(),
        currency_name=fields[11].strip(),
        phone=fields[12].strip(),
        postal_code_format=fields[13].strip(),
        postal_code_regex=fields[14].strip(),
        languages=parse_list(fields[15]),
        geoname_id=parse_int(fields[16], "geonameid"),
        neighbours=parse_list(fields[17]),
    )


def load_country_table(lines: Iterable[str], *, strict: bool = False) -> dict[str, CountryInfo]:
    """Parse a country table into a dict keyed by ISO alpha-2 code.

    Comment lines (the file's header block starts with ``#``) and blank
    lines are ignored; malformed rows are skipped unless *strict*.
    """
    table: dict[str, CountryInfo] = {}
    for line_no, line in enumerate(lines, start=1):
        if not line.strip() or line.startswith(COMMENT_PREFIX):
            continue
        try:
            info = parse_country_info(line)
        except RecordParseError as exc:
            if strict:
                raise
            logger.warning("Country info row skipped | line=%d | error=%s", line_no, exc)
            continue
        table[info.iso] = info

    logger.info("Country table loaded | countries=%d", len(table))
    return table
