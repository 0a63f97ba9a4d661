"""
Typed configuration models matching the YAML config structure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass
class ReferenceLineConfig:
    """Reference line (gate) defined by two points in track coordinates."""
    p1: Tuple[float, float]
    p2: Tuple[float, float]
    name: str = "reference"

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ReferenceLineConfig":
        """Adapter: Create from config dictionary."""
        p1 = d["p1"]
        p2 = d["p2"]
        return cls(
            p1=(float(p1[0]), float(p1[1])),
            p2=(float(p2[0]), float(p2[1])),
            name=d.get("name", "reference"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "p1": list(self.p1),
            "p2": list(self.p2),
        }

    def as_coordinates(self) -> Tuple[float, float, float, float]:
        """(x1, y1, x2, y2) of the two defining points."""
        return (self.p1[0], self.p1[1], self.p2[0], self.p2[1])


@dataclass
class TrackConfig:
    """CSV track source configuration."""
    path: Optional[str] = None
    time_column: str = "time"
    x_column: str = "x"
    y_column: str = "y"
    default_timezone: str = "UTC"

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "TrackConfig":
        return cls(
            path=d.get("path"),
            time_column=d.get("time_column", "time"),
            x_column=d.get("x_column", "x"),
            y_column=d.get("y_column", "y"),
            default_timezone=d.get("default_timezone", "UTC"),
        )

    def to_dict(self) -> Dict[str, Any]:
        d = {
            "time_column": self.time_column,
            "x_column": self.x_column,
            "y_column": self.y_column,
            "default_timezone": self.default_timezone,
        }
        if self.path is not None:
            d["path"] = self.path
        return d


OUTPUT_FORMATS: List[str] = ["json", "text"]


@dataclass
class OutputConfig:
    """How crossing events are printed."""
    format: str = "json"

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "OutputConfig":
        return cls(format=d.get("format", "json"))

    def to_dict(self) -> Dict[str, Any]:
        return {"format": self.format}


@dataclass
class Config:
    """
    Complete application configuration.

    This is a typed representation of the YAML config structure.
    """
    reference_line: ReferenceLineConfig
    track: TrackConfig = field(default_factory=TrackConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_path: str = "logs/track_crossing.log"
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Config":
        """Adapter: Create Config from raw dictionary (e.g., from load_config)."""
        return cls(
            reference_line=ReferenceLineConfig.from_dict(d["reference_line"]),
            track=TrackConfig.from_dict(d.get("track") or {}),
            output=OutputConfig.from_dict(d.get("output") or {}),
            log_path=d.get("log_path", "logs/track_crossing.log"),
            log_level=d.get("log_level", "INFO"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to dictionary (for saving or passing to existing code)."""
        return {
            "reference_line": self.reference_line.to_dict(),
            "track": self.track.to_dict(),
            "output": self.output.to_dict(),
            "log_path": self.log_path,
            "log_level": self.log_level,
        }
