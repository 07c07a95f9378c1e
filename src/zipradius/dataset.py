"""Load postal-code files into an ordered in-memory dataset.

A dataset is a plain ``list[ZipCode]`` in file order. Loading is all or
nothing: the first line that fails to parse aborts the load.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from zipradius.formats import RecordFormat
from zipradius.models import ZipCode
from zipradius.parsers import ParseError, get_parser

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


class DatasetReadError(OSError):
    """Raised when a dataset file cannot be read as text in the requested encoding."""


def iter_records(
    path: str | Path,
    fmt: RecordFormat | str,
    *,
    encoding: str = DEFAULT_ENCODING,
    require_numeric_code: bool = False,
) -> Iterator[ZipCode]:
    """Stream records from ``path``, one per line.

    Lines are split on line feed only; a last line without a terminator is
    still yielded. Parse errors are re-raised with their 1-based line number;
    undecodable bytes raise DatasetReadError.
    """
    parser = get_parser(fmt, require_numeric_code=require_numeric_code)

    line_number = 0
    with open(path, "r", encoding=encoding, newline="\n") as f:
        try:
            for line_number, line in enumerate(f, start=1):
                try:
                    yield parser.parse_line(line)
                except ParseError as exc:
                    exc.line_number = line_number
                    logger.error("Failed to parse %s: %s", path, exc)
                    raise
        except UnicodeDecodeError as exc:
            logger.error("Failed to decode %s as %s after line %d: %s", path, encoding, line_number, exc)
            raise DatasetReadError(
                f"not valid {encoding} text after line {line_number}: {exc.reason}"
            ) from exc


def load_dataset(
    path: str | Path,
    fmt: RecordFormat | str,
    *,
    encoding: str = DEFAULT_ENCODING,
    require_numeric_code: bool = False,
) -> list[ZipCode]:
    """Load every record of ``path`` in the given format.

    Raises:
        FileNotFoundError: ``path`` does not exist.
        OSError: the file cannot be read.
        DatasetReadError: the file is not valid text in ``encoding`` (an OSError).
        WrongFieldCount, MalformedField: a line is invalid; nothing is returned.
    """
    zips = list(
        iter_records(path, fmt, encoding=encoding, require_numeric_code=require_numeric_code)
    )
    logger.info("Loaded %d records from %s", len(zips), path)
    return zips


def load_csv_file(path: str | Path) -> list[ZipCode]:
    """Load a quoted-CSV file ("code","lat","lon","city","state","county","type")."""
    return load_dataset(path, RecordFormat.QUOTED_CSV)


def load_tsv_file(path: str | Path) -> list[ZipCode]:
    """Load a GeoNames tab-separated gazetteer file."""
    return load_dataset(path, RecordFormat.GAZETTEER_TSV)
