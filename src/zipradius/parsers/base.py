"""Abstract base parser and parse errors."""

from __future__ import annotations

import abc
import math

from zipradius.formats import FormatConfig
from zipradius.models import ZipCode


class ParseError(ValueError):
    """Raised when a line cannot be turned into a ZipCode."""

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.line_number is not None:
            return f"line {self.line_number}: {message}"
        return message


class WrongFieldCount(ParseError):
    """Raised when a line does not split into the expected number of fields."""

    def __init__(self, expected: int, found: int, line_number: int | None = None):
        self.expected = expected
        self.found = found
        super().__init__(f"found {found} fields, expected {expected}", line_number)


class MalformedField(ParseError):
    """Raised when a required field cannot be parsed as its expected type."""

    def __init__(self, field: str, value: str, line_number: int | None = None):
        self.field = field
        self.value = value
        super().__init__(f"malformed {field}: {value!r}", line_number)


class UnknownFormat(ValueError):
    """Raised for a format name with no registered parser."""


class RecordParser(abc.ABC):
    """Abstract parser that converts one line of text → ZipCode."""

    config: FormatConfig

    def __init__(self, require_numeric_code: bool = False):
        self.require_numeric_code = require_numeric_code

    @abc.abstractmethod
    def parse_line(self, line: str) -> ZipCode:
        """Parse a single line into a ZipCode.

        Args:
            line: One record, with or without its trailing line terminator.

        Raises:
            WrongFieldCount: the line has the wrong number of fields.
            MalformedField: code, latitude or longitude is unusable.
        """

    def split(self, line: str) -> list[str]:
        fields = line.rstrip("\r\n").split(self.config.delimiter)
        if len(fields) != self.config.field_count:
            raise WrongFieldCount(self.config.field_count, len(fields))
        return fields

    def parse_code(self, raw: str) -> str:
        """Return the code exactly as given. Empty or whitespace-padded codes are malformed."""
        if not raw or raw != raw.strip():
            raise MalformedField("code", raw)
        if self.require_numeric_code and not (raw.isascii() and raw.isdigit()):
            raise MalformedField("code", raw)
        return raw

    @staticmethod
    def parse_coordinate(name: str, raw: str, *, required: bool) -> float:
        """Parse a decimal-degree field. Empty optional fields read as 0.0."""
        text = raw.strip()
        if not text and not required:
            return 0.0
        try:
            value = float(text)
        except ValueError:
            raise MalformedField(name, raw) from None
        if not math.isfinite(value):
            raise MalformedField(name, raw)
        return value
