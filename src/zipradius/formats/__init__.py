"""Registry of supported postal-code file formats."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RecordFormat(str, Enum):
    QUOTED_CSV = "csv"
    GAZETTEER_TSV = "tsv"


@dataclass
class FormatConfig:
    """Layout of one line-oriented postal-code format."""

    name: str
    delimiter: str
    field_count: int
    description: str


FORMATS: dict[str, FormatConfig] = {
    RecordFormat.QUOTED_CSV.value: FormatConfig(
        name="csv",
        delimiter=",",
        field_count=7,
        description='"code","lat","lon","city","state","county","type"',
    ),
    RecordFormat.GAZETTEER_TSV.value: FormatConfig(
        name="tsv",
        delimiter="\t",
        field_count=12,
        description="GeoNames postal gazetteer (tab-separated, 12 columns)",
    ),
}
