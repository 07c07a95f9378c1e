"""Data models for postal-code records and radius query results."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ZipCode:
    """One postal-code entry with coordinates and administrative metadata.

    Records are immutable. The sine/cosine of the latitude are derived once at
    construction; ``dataclasses.replace(zip, latitude=...)`` builds a new record
    and recomputes them.
    """

    code: str                   # Opaque, leading zeros preserved ("00501")
    latitude: float = 0.0       # Decimal degrees, 0.0 when absent
    longitude: float = 0.0      # Decimal degrees, 0.0 when absent

    city: str = ""
    state: str = ""
    county: str = ""
    type: str = ""              # "STANDARD", "UNIQUE", "PO BOX", ...

    latitude_sin: float = field(init=False, repr=False, compare=False)
    latitude_cos: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        rad = math.radians(self.latitude)
        object.__setattr__(self, "latitude_sin", math.sin(rad))
        object.__setattr__(self, "latitude_cos", math.cos(rad))

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "city": self.city,
            "state": self.state,
            "county": self.county,
            "type": self.type,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, raw: str) -> ZipCode:
        return cls(**json.loads(raw))


@dataclass(frozen=True)
class RadiusMatch:
    """A record found by a radius query, paired with its distance from the centre."""

    zip: ZipCode                # Shared reference into the dataset
    distance: float             # Miles

    @property
    def code(self) -> str:
        return self.zip.code

    @property
    def city(self) -> str:
        return self.zip.city

    @property
    def state(self) -> str:
        return self.zip.state

    def to_dict(self) -> dict:
        d = self.zip.to_dict()
        d["distance"] = self.distance
        return d
