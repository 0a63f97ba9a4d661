"""
Command-line entry point: find where a recorded track crosses a reference line.

Usage:
    python src/main.py --config config/config.yaml --track data/track.csv

Arguments:
    --config: Path to configuration file
    --track: Track CSV path (overrides track.path from config)
    --format: Output format, json or text (overrides output.format)
"""

import os
import sys
import argparse
import json
import logging
import yaml
from typing import Any, Dict, List, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from crossing.scanner import TrackScanner
from geometry.errors import DegenerateLineError
from models.config import Config, OUTPUT_FORMATS
from models.crossing_event import CrossingEvent
from ops.logging import setup_logging
from tracks.csv_source import CsvTrackSource, TrackFormatError


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return a new mapping with override layered over base; inputs are left untouched."""
    merged = dict(base)
    for key, value in (override or {}).items():
        current = merged.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _read_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be a mapping")
    return data


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load the layered configuration next to config_path.

    Layers, later ones winning:
    - `default.yaml` (checked in)
    - `config.yaml` (local overrides)
    - config_path itself, when it is neither of the above

    Missing layers are skipped. A layer that cannot be read or parsed
    is logged and exits with status 1.
    """
    config_dir = os.path.dirname(config_path)
    layers = [
        os.path.join(config_dir, "default.yaml"),
        os.path.join(config_dir, "config.yaml"),
    ]
    if os.path.abspath(config_path) not in {os.path.abspath(p) for p in layers}:
        layers.append(config_path)

    config: Dict[str, Any] = {}
    for path in layers:
        if not os.path.exists(path):
            continue
        try:
            config = _deep_merge(config, _read_yaml(path))
        except (OSError, ValueError, yaml.YAMLError) as e:
            logging.error(f"Failed to load configuration: {e}")
            sys.exit(1)
    return config


def _is_point(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) == 2
        and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value)
    )


def validate_config(config: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """
    Validate configuration file structure and values.

    Args:
        config: Configuration dictionary

    Returns:
        Tuple of (is_valid, error_message)
    """
    required_sections = ['reference_line', 'log_path', 'log_level']
    for section in required_sections:
        if section not in config:
            return False, f"Missing required configuration section: {section}"

    line = config.get('reference_line') or {}
    if not isinstance(line, dict):
        return False, "reference_line must be a mapping with p1 and p2"
    for key in ('p1', 'p2'):
        if key not in line:
            return False, f"Missing reference_line.{key}"
        if not _is_point(line[key]):
            return False, f"reference_line.{key} must be a list of two numbers [x, y]"
    if list(line['p1']) == list(line['p2']):
        return False, "reference_line.p1 and reference_line.p2 must be distinct points"

    track = config.get('track', {}) or {}
    for key in ('path', 'time_column', 'x_column', 'y_column', 'default_timezone'):
        if key in track and not isinstance(track[key], str):
            return False, f"track.{key} must be a string"
    if 'default_timezone' in track:
        try:
            ZoneInfo(track['default_timezone'])
        except (ZoneInfoNotFoundError, ValueError, OSError):
            return False, f"track.default_timezone is not a known time zone: {track['default_timezone']}"

    output = config.get('output', {}) or {}
    fmt = output.get('format', 'json')
    if fmt not in OUTPUT_FORMATS:
        return False, f"output.format must be one of: {', '.join(OUTPUT_FORMATS)}"

    if not isinstance(config['log_path'], str):
        return False, "log_path must be a string"
    valid_log_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
    if config['log_level'] not in valid_log_levels:
        return False, f"log_level must be one of: {', '.join(valid_log_levels)}"

    return True, None


def format_event(event: CrossingEvent, fmt: str) -> str:
    """Render one crossing event for stdout."""
    if fmt == "text":
        return (
            f"{event.time.isoformat(timespec='milliseconds')} "
            f"start=({event.x}, {event.y}) "
            f"crossing=({event.crossing_x}, {event.crossing_y})"
        )
    return json.dumps(event.to_dict())


def run(cfg: Config) -> List[CrossingEvent]:
    """Scan the configured track against the configured reference line."""
    scanner = TrackScanner.from_points(*cfg.reference_line.as_coordinates())
    with CsvTrackSource(cfg.track) as source:
        events = scanner.scan(source)
        logging.info(
            f"Scanned {source.rows_read} samples against '{cfg.reference_line.name}': "
            f"{len(events)} crossing(s)"
        )
    return events


def main():
    """Main application function."""
    parser = argparse.ArgumentParser(description='Track / reference line crossing finder')
    parser.add_argument('--config', type=str, default='config/config.yaml',
                        help='Path to configuration file')
    parser.add_argument('--track', type=str, default=None,
                        help='Track CSV file (overrides track.path)')
    parser.add_argument('--format', type=str, choices=OUTPUT_FORMATS, default=None,
                        help='Output format (overrides output.format)')
    args = parser.parse_args()

    config = load_config(args.config)
    if args.track:
        config.setdefault('track', {})['path'] = args.track
    if args.format:
        config.setdefault('output', {})['format'] = args.format

    is_valid, error_msg = validate_config(config)
    if not is_valid:
        logging.error(f"Configuration validation failed: {error_msg}")
        sys.exit(1)

    setup_logging(config['log_path'], config['log_level'])
    cfg = Config.from_dict(config)

    if not cfg.track.path:
        logging.error("No track file given (use --track or track.path)")
        sys.exit(1)

    try:
        events = run(cfg)
    except (DegenerateLineError, TrackFormatError, OSError) as e:
        logging.error(f"Scan failed: {e}")
        sys.exit(1)

    for event in events:
        print(format_event(event, cfg.output.format))


if __name__ == "__main__":
    main()
