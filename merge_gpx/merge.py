import logging

from merge_gpx.confirm import describe_point
from merge_gpx.geo import DISTANCE_MODELS, GeoPoint, speed_mph
from merge_gpx.gpx_io import (
    TrackError,
    check_writable,
    first_segment,
    first_segment_points,
    load_gpx,
    write_gpx,
)
from merge_gpx.retime import retime
from merge_gpx.search import find_merge_point
from merge_gpx.splice import build_merged_gpx, splice


logger = logging.getLogger(__name__)


def merge_files(config, confirmer):
    """Find a confirmed merge point between the two files and write the merged track.

    Returns True if the output file was written, False if no merge point was
    accepted (nothing is written in that case).
    """
    check_writable(config.output_path, config.overwrite)

    begin_gpx = load_gpx(config.begin_path)
    end_gpx = load_gpx(config.end_path)
    begin_points = first_segment(begin_gpx, config.begin_path).points
    end_points = first_segment_points(end_gpx, config.end_path)

    target = end_points[0]
    if target.time is None:
        raise TrackError(f"first point of the end track in {config.end_path} has no time")
    logger.info("Point to merge with:\n%s", describe_point(target))

    result = find_merge_point(begin_points, target, config.threshold_m, confirmer)
    if not result.confirmed:
        logger.info("No merge point found, try increasing the merge threshold.")
        return False

    logger.info("merging GPX data to %s...", config.output_path)
    merged_points = splice(result.prefix, end_points)
    write_gpx(build_merged_gpx(end_gpx, merged_points), config.output_path)
    logger.info("merged output written to %s", config.output_path)
    return True


def step_speeds(points, distance=DISTANCE_MODELS["haversine"]):
    """Speed in mi/h between each pair of consecutive points sampled one second apart."""
    speeds = []
    for pt, nxt in zip(points, points[1:]):
        dist = distance(GeoPoint.of(pt), GeoPoint.of(nxt))
        speed = speed_mph(dist)
        logger.debug("%s distance (m): %s speed (mi/h): %s", pt.time.isoformat(), dist, speed)
        speeds.append(speed)
    return speeds


def fix_file(config):
    """Retime a single GPX file so it ends one second before config.arrival.

    Returns the per-step speeds in mi/h.
    """
    check_writable(config.output_path, config.overwrite)

    gpx_data = load_gpx(config.input_path)
    points = first_segment_points(gpx_data, config.input_path)
    retime(points, config.arrival)
    speeds = step_speeds(points, DISTANCE_MODELS[config.distance_model])

    logger.info(
        "retimed %d points from %s to %s, max speed %.1f mi/h",
        len(points),
        points[0].time.isoformat(),
        points[-1].time.isoformat(),
        max(speeds, default=0.0),
    )
    write_gpx(gpx_data, config.output_path)
    logger.info("Output written to %s", config.output_path)
    return speeds
