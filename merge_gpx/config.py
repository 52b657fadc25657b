import os
from dataclasses import dataclass
from datetime import datetime, timezone


DEFAULT_OUTPUT = "merged.gpx"
DEFAULT_THRESHOLD_M = 10.0


@dataclass(frozen=True)
class MergeConfig:
    begin_path: str
    end_path: str
    output_path: str = DEFAULT_OUTPUT
    threshold_m: float = DEFAULT_THRESHOLD_M
    overwrite: bool = False


@dataclass(frozen=True)
class FixTimeConfig:
    input_path: str
    arrival: datetime
    output_path: str
    distance_model: str = "haversine"
    overwrite: bool = False


def default_fixed_output(input_path):
    base, _ = os.path.splitext(input_path)
    return f"{base}_fixed.gpx"


def parse_arrival(text):
    """Parse an ISO 8601 instant such as 2021-12-18T20:14:37Z. Naive values are taken as UTC."""
    value = text.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    arrival = datetime.fromisoformat(value)
    if arrival.tzinfo is None:
        arrival = arrival.replace(tzinfo=timezone.utc)
    return arrival
