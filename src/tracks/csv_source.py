"""
CSV track source.

Reads a track log exported as CSV (header row, one sample per line) and
yields TrackPoints lazily, one row at a time. Files are decoded as UTF-8.

Expected layout (column names are configurable):

    time,x,y
    2019-11-07T08:44:40Z,0.30880,46.58630
"""

from __future__ import annotations

import csv
import logging
from datetime import datetime, tzinfo
from typing import BinaryIO, Iterator, Optional
from zoneinfo import ZoneInfo

from models.config import TrackConfig
from models.track_point import TrackPoint


class TrackFormatError(ValueError):
    """Raised when a track file row cannot be parsed."""


def parse_timestamp(value: str, default_tz: tzinfo) -> datetime:
    """
    Parse an ISO-8601 timestamp; naive values get default_tz.

    A trailing "Z" is accepted as UTC.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    ts = datetime.fromisoformat(text)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=default_tz)
    return ts


class CsvTrackSource:
    """
    Lazy, single-pass reader of TrackPoints from a CSV file.

    Lifecycle:
        1. Create instance with config
        2. Call open() to open the file
        3. Iterate to get TrackPoints
        4. Call close() to release the file handle

    Can also be used as a context manager:
        with CsvTrackSource(config) as source:
            events = find_crossings(x1, y1, x2, y2, source)
    """

    def __init__(self, config: TrackConfig, path: Optional[str] = None):
        self._config = config
        self._path = path or config.path
        self._tz = ZoneInfo(config.default_timezone)
        self._file: Optional[BinaryIO] = None
        self._rows_read = 0

    @property
    def path(self) -> Optional[str]:
        return self._path

    @property
    def is_open(self) -> bool:
        return self._file is not None

    @property
    def rows_read(self) -> int:
        """Number of samples yielded since open."""
        return self._rows_read

    def open(self) -> None:
        """
        Open the track file.

        Raises:
            RuntimeError: If no path is configured.
            OSError: If the file cannot be opened.
        """
        if not self._path:
            raise RuntimeError("No track path configured")
        self._file = open(self._path, "rb")
        self._rows_read = 0
        logging.info(f"Track source opened: {self._path}")

    def close(self) -> None:
        """Close the file. Safe to call multiple times."""
        if self._file is not None:
            self._file.close()
            self._file = None
            logging.debug(f"Track source closed: {self._path} ({self._rows_read} samples)")

    def __enter__(self) -> "CsvTrackSource":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _parse_row(self, row: dict, line_no: int) -> TrackPoint:
        cfg = self._config
        try:
            return TrackPoint(
                time=parse_timestamp(row[cfg.time_column], self._tz),
                x=float(row[cfg.x_column]),
                y=float(row[cfg.y_column]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise TrackFormatError(f"{self._path}:{line_no}: invalid track row ({e})") from e

    def _decoded_lines(self) -> Iterator[str]:
        for line_no, raw in enumerate(self._file, start=1):
            try:
                yield raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise TrackFormatError(f"{self._path}:{line_no}: not valid UTF-8 ({e})") from e

    def __iter__(self) -> Iterator[TrackPoint]:
        """
        Iterate over samples in file order.

        The source must be open before iterating.
        """
        if self._file is None:
            raise RuntimeError("Source must be open before iterating")

        reader = csv.DictReader(self._decoded_lines())
        for row in reader:
            point = self._parse_row(row, reader.line_num)
            self._rows_read += 1
            yield point
