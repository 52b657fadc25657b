"""Builders shared by the test modules."""

from datetime import datetime, timedelta, timezone

import gpxpy.gpx


T0 = datetime(2021, 12, 18, 20, 14, 37, tzinfo=timezone.utc)


def make_points(coords, start=None, elevation=1600.0):
    """Track points at the given (lat, lon) pairs, one second apart from `start` if given."""
    points = []
    for i, (lat, lon) in enumerate(coords):
        time = start + timedelta(seconds=i) if start is not None else None
        points.append(gpxpy.gpx.GPXTrackPoint(lat, lon, elevation=elevation + i, time=time))
    return points


def make_gpx(points, name="ride"):
    gpx = gpxpy.gpx.GPX()
    track = gpxpy.gpx.GPXTrack(name=name)
    segment = gpxpy.gpx.GPXTrackSegment()
    segment.points.extend(points)
    track.segments.append(segment)
    gpx.tracks.append(track)
    return gpx


def write_gpx_file(path, points, name="ride"):
    path.write_text(make_gpx(points, name).to_xml(), encoding="utf-8")
    return str(path)


class ScriptedConfirmer:
    """Answers confirmation requests from a fixed script and records every candidate."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.seen = []

    def confirm(self, candidate):
        self.seen.append(candidate)
        return self.answers.pop(0) if self.answers else False
