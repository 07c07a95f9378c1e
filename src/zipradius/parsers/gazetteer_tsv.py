"""Parser for the GeoNames tab-separated postal gazetteer."""

from __future__ import annotations

from zipradius.formats import FORMATS
from zipradius.models import ZipCode
from zipradius.parsers.base import RecordParser

# GeoNames columns (tab-delimited):
# country_code|postal_code|place_name|admin1_name|admin1_code|admin2_name|
# admin2_code|admin3_name|admin3_code|latitude|longitude|accuracy
# _COL_COUNTRY = 0
_COL_CODE = 1
_COL_CITY = 2
# _COL_STATE_NAME = 3
_COL_STATE = 4
_COL_COUNTY = 5
# _COL_COUNTY_CODE = 6
# _COL_ADMIN3_NAME = 7
# _COL_ADMIN3_CODE = 8
_COL_LAT = 9
_COL_LON = 10
# _COL_ACCURACY = 11


class GazetteerTSVParser(RecordParser):
    """Parse one GeoNames gazetteer line → ZipCode.

    Latitude and longitude are mandatory in this format. The gazetteer has no
    postal-code type, so ``type`` is left empty.
    """

    config = FORMATS["tsv"]

    def parse_line(self, line: str) -> ZipCode:
        cols = self.split(line)

        return ZipCode(
            code=self.parse_code(cols[_COL_CODE]),
            latitude=self.parse_coordinate("latitude", cols[_COL_LAT], required=True),
            longitude=self.parse_coordinate("longitude", cols[_COL_LON], required=True),
            city=cols[_COL_CITY],
            state=cols[_COL_STATE],
            county=cols[_COL_COUNTY],
        )
