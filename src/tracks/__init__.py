"""
Track sources producing TrackPoint streams.
"""

from .csv_source import CsvTrackSource, TrackFormatError, parse_timestamp

__all__ = [
    "CsvTrackSource",
    "TrackFormatError",
    "parse_timestamp",
]
