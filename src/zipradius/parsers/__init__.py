"""Parsers for converting postal-code file lines to ZipCode."""

from __future__ import annotations

from zipradius.formats import RecordFormat
from zipradius.models import ZipCode
from zipradius.parsers.base import (
    MalformedField,
    ParseError,
    RecordParser,
    UnknownFormat,
    WrongFieldCount,
)
from zipradius.parsers.gazetteer_tsv import GazetteerTSVParser
from zipradius.parsers.quoted_csv import QuotedCSVParser

PARSER_MAP: dict[RecordFormat, type[RecordParser]] = {
    RecordFormat.QUOTED_CSV: QuotedCSVParser,
    RecordFormat.GAZETTEER_TSV: GazetteerTSVParser,
}


def get_parser(fmt: RecordFormat | str, require_numeric_code: bool = False) -> RecordParser:
    """Return a parser for ``fmt`` ("csv" or "tsv")."""
    try:
        parser_cls = PARSER_MAP[RecordFormat(fmt)]
    except ValueError:
        raise UnknownFormat(f"unknown record format {fmt!r}") from None
    return parser_cls(require_numeric_code=require_numeric_code)


def parse_record(line: str, fmt: RecordFormat | str) -> ZipCode:
    return get_parser(fmt).parse_line(line)


__all__ = [
    "PARSER_MAP",
    "GazetteerTSVParser",
    "MalformedField",
    "ParseError",
    "QuotedCSVParser",
    "RecordParser",
    "UnknownFormat",
    "WrongFieldCount",
    "get_parser",
    "parse_record",
]
