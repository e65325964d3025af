"""Reading of EnergyPlus weather (EPW) data into hourly columns."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import List, Sequence, Union

HOURS_PER_YEAR = 8760
HEADER_LINES = 8

_HEADER_FIELDS = 10
_ROW_FIELDS = 22

_NUMBER_PREFIX = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
)


class Column(IntEnum):
    """Weather columns kept from an EPW file, in storage order."""

    DBT = 0
    """Dry bulb temperature (C)."""
    DPT = 1
    """Dew point temperature (C)."""
    RH = 2
    """Relative humidity (%)."""
    EGH = 3
    """Global horizontal radiation (Wh/m2)."""
    EB = 4
    """Direct normal radiation (Wh/m2)."""
    ED = 5
    """Diffuse horizontal radiation (Wh/m2)."""
    WSPD = 6
    """Wind speed (m/s)."""


# EPW data-row field index for each stored column, in Column order.
_ROW_FIELD_FOR_COLUMN = (6, 7, 8, 13, 14, 15, 21)


def _leading_float(text: str) -> float:
    """Parse the numeric prefix of ``text``; 0.0 when there is none."""
    match = _NUMBER_PREFIX.match(text)
    return float(match.group(0)) if match else 0.0


def _fields(line: str, count: int) -> List[str]:
    """Split ``line`` on commas into exactly ``count`` fields, padding with ''."""
    parts = line.rstrip("\r\n").split(",")
    return (parts + [""] * count)[:count]


def _new_columns() -> List[List[float]]:
    return [[] for _ in Column]


@dataclass
class EpwData:
    """Site information and hourly weather columns from an EPW file."""

    location: str = ""
    station_id: str = ""
    timezone: int = 0
    latitude: float = 0.0
    longitude: float = 0.0
    data: List[List[float]] = field(default_factory=_new_columns)

    def __getitem__(self, column: Column) -> List[float]:
        return self.data[Column(column)]

    def _size_columns(self) -> None:
        for index, values in enumerate(self.data):
            padded = values[:HOURS_PER_YEAR]
            padded.extend([0.0] * (HOURS_PER_YEAR - len(padded)))
            self.data[index] = padded

    def parse_header(self, line: str) -> None:
        """Read location, station, latitude, longitude and timezone from a header line."""
        fields = _fields(line, _HEADER_FIELDS)
        self.location = fields[1]
        self.station_id = fields[5]
        self.latitude = _leading_float(fields[6])
        self.longitude = _leading_float(fields[7])
        self.timezone = int(_leading_float(fields[8]))

    def parse_row(self, line: str, row: int) -> None:
        """Store the kept weather fields of one data line at hour ``row``."""
        if not all(0 <= row < len(values) for values in self.data):
            raise IndexError(f"row {row} outside the loaded weather columns")
        fields = _fields(line, _ROW_FIELDS)
        for values, source in zip(self.data, _ROW_FIELD_FOR_COLUMN):
            values[row] = _leading_float(fields[source])

    def load_array(self, block_size: int, data: Sequence[float]) -> None:
        """Load from a flat array: latitude, longitude, timezone, then one
        block of ``block_size`` values for each column in Column order."""
        if not 0 <= block_size <= HOURS_PER_YEAR:
            raise ValueError(
                f"block size {block_size} outside 0..{HOURS_PER_YEAR}"
            )
        needed = 3 + block_size * len(Column)
        if len(data) < needed:
            raise ValueError(f"expected at least {needed} values, got {len(data)}")
        self.latitude = float(data[0])
        self.longitude = float(data[1])
        self.timezone = int(data[2])
        self._size_columns()
        for column in Column:
            start = 3 + column * block_size
            self.data[column][:block_size] = [
                float(value) for value in data[start:start + block_size]
            ]

    def load_file(self, path: Union[str, Path]) -> None:
        """Load the header and up to a year of hourly rows from an EPW file."""
        self._size_columns()
        row = 0
        with open(path, encoding="utf-8", errors="replace") as stream:
            for number, line in enumerate(stream, start=1):
                if row >= HOURS_PER_YEAR:
                    break
                if number == 1:
                    self.parse_header(line)
                elif number > HEADER_LINES:
                    self.parse_row(line, row)
                    row += 1