import copy

from merge_gpx.gpx_io import TrackError, first_segment
from merge_gpx.retime import retime


def splice(prefix, end_points):
    """Join the accepted begin prefix onto the end track.

    The prefix points are copied and retimed at one-second cadence so that
    the last of them sits one second before the end track's first point.
    The end points are returned as they are.
    """
    if not end_points:
        raise TrackError("end track has no points")
    arrival = end_points[0].time
    if arrival is None:
        raise TrackError("first point of the end track has no time")

    merged = retime([copy.deepcopy(pt) for pt in prefix], arrival)
    return merged + list(end_points)


def build_merged_gpx(end_gpx, points):
    """Copy of the end GPX document with its first segment holding `points`."""
    merged = copy.deepcopy(end_gpx)
    first_segment(merged, "end track").points = points
    return merged
