"""
Pytest configuration and shared fixtures.
"""

import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from models.track_point import TrackPoint  # noqa: E402


# LFBI ALPHA threshold, [longitude, latitude]
RUNWAY_P1 = (0.308861, 46.586296)
RUNWAY_P2 = (0.309045, 46.586480)


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def runway_track():
    """
    Synthetic longitude/latitude track crossing the runway threshold once.

    Sample k is at (0.30880 + 0.00005k, 46.58630 + 0.00001k), 2 s apart
    starting at 08:44:40Z. The threshold satisfies lat - lon = 46.277435,
    which the track reaches at k = 1.625, i.e. 08:44:43.250Z.
    """
    t0 = utc(2019, 11, 7, 8, 44, 40)
    return [
        TrackPoint(
            time=t0 + timedelta(seconds=2 * k),
            x=0.30880 + 0.00005 * k,
            y=46.58630 + 0.00001 * k,
        )
        for k in range(12)
    ]


@pytest.fixture
def temp_config_dir(tmp_path):
    """Create a temporary config directory with default.yaml."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    default_yaml = config_dir / "default.yaml"
    default_yaml.write_text("""
reference_line:
  name: "LFBI ALPHA"
  p1: [0.308861, 46.586296]
  p2: [0.309045, 46.586480]

track:
  time_column: "time"
  x_column: "x"
  y_column: "y"

output:
  format: "json"

log_path: "logs/test.log"
log_level: "INFO"
""")

    return config_dir


@pytest.fixture
def valid_config():
    """Return a valid configuration dictionary."""
    return {
        "reference_line": {
            "name": "gate",
            "p1": [0.5, -0.2],
            "p2": [0.5, 0.4],
        },
        "track": {
            "path": "data/track.csv",
            "time_column": "time",
            "x_column": "x",
            "y_column": "y",
            "default_timezone": "UTC",
        },
        "output": {"format": "json"},
        "log_path": "logs/test.log",
        "log_level": "INFO",
    }


@pytest.fixture
def restore_logging():
    """Undo root logger changes made by setup_logging()."""
    import logging

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
