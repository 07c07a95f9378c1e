"""Parser for the quoted comma-separated postal-code format."""

from __future__ import annotations

from zipradius.formats import FORMATS
from zipradius.models import ZipCode
from zipradius.parsers.base import RecordParser

# "zip code","latitude","longitude","city","state","county","type"
_COL_CODE = 0
_COL_LAT = 1
_COL_LON = 2
_COL_CITY = 3
_COL_STATE = 4
_COL_COUNTY = 5
_COL_TYPE = 6


class QuotedCSVParser(RecordParser):
    """Parse one quoted-CSV line → ZipCode.

    Fields are split on every comma (quoted fields may not contain commas) and
    all double quotes are dropped. Blank coordinates are read as 0.0.
    """

    config = FORMATS["csv"]

    def parse_line(self, line: str) -> ZipCode:
        cols = [c.replace('"', "") for c in self.split(line)]

        return ZipCode(
            code=self.parse_code(cols[_COL_CODE]),
            latitude=self.parse_coordinate("latitude", cols[_COL_LAT], required=False),
            longitude=self.parse_coordinate("longitude", cols[_COL_LON], required=False),
            city=cols[_COL_CITY],
            state=cols[_COL_STATE],
            county=cols[_COL_COUNTY],
            type=cols[_COL_TYPE],
        )
