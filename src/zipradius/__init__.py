"""Postal-code reference data: load, look up, and search by radius."""

from zipradius.dataset import DatasetReadError, load_csv_file, load_dataset, load_tsv_file
from zipradius.formats import RecordFormat
from zipradius.geo import distance, great_circle_miles
from zipradius.models import RadiusMatch, ZipCode
from zipradius.parsers import MalformedField, ParseError, WrongFieldCount, parse_record
from zipradius.query import find, find_in_radius, sort_by_distance

__all__ = [
    "DatasetReadError",
    "MalformedField",
    "ParseError",
    "RadiusMatch",
    "RecordFormat",
    "WrongFieldCount",
    "ZipCode",
    "distance",
    "find",
    "find_in_radius",
    "great_circle_miles",
    "load_csv_file",
    "load_dataset",
    "load_tsv_file",
    "parse_record",
    "sort_by_distance",
]
