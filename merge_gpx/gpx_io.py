import os

import gpxpy
import gpxpy.gpx


class TrackError(ValueError):
    """A GPX file or output path that cannot be used."""


def load_gpx(path):
    """Parse a GPX file."""
    with open(path, "r", encoding="utf-8") as f:
        return gpxpy.parse(f)


def first_segment(gpx_data, name="input"):
    """The first segment of the first track. Only single-segment tracks are supported."""
    if not gpx_data.tracks:
        raise TrackError(f"no tracks found in {name}")
    track = gpx_data.tracks[0]
    if not track.segments:
        raise TrackError(f"no track segments found in {name}")
    return track.segments[0]


def first_segment_points(gpx_data, name="input"):
    """Points of the first segment; raises TrackError if there are none."""
    points = first_segment(gpx_data, name).points
    if not points:
        raise TrackError(f"no track points found in {name}")
    return points


def check_writable(path, overwrite=False):
    if os.path.exists(path) and not overwrite:
        raise TrackError(f"{path} already exists. Use --overwrite to replace it.")


def write_gpx(gpx_data, path):
    xml = gpx_data.to_xml()
    with open(path, "w", encoding="utf-8") as f:
        f.write(xml)
