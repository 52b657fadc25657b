"""Interactive search for the point where the end track picks up the begin track.

The begin track is scanned in order. Every point within the merge threshold
of the end track's first point becomes a candidate and is handed to a
confirmer, which blocks until the operator decides. The first accepted
candidate ends the search; if none is accepted the search is exhausted.
"""

import enum
import logging
import math
from dataclasses import dataclass
from typing import Optional

from merge_gpx.geo import GeoPoint, haversine


logger = logging.getLogger(__name__)


class SearchState(enum.Enum):
    """Terminal outcome of find_merge_point()."""

    CONFIRMED = "confirmed"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class MergeCandidate:
    """A begin-track point close enough to the end track's first point."""

    index: int
    point: object
    next_point: object
    target: object
    distance: float
    min_distance: float
    is_minimum: bool
    is_between: bool


@dataclass(frozen=True)
class SearchResult:
    state: SearchState
    candidate: Optional[MergeCandidate] = None
    prefix: tuple = ()

    @property
    def confirmed(self):
        return self.state is SearchState.CONFIRMED


def iter_candidates(begin_points, target, threshold_m):
    """Yield a MergeCandidate for every begin point within threshold_m of target.

    `target` is the end track's first point. The running minimum uses `<=`,
    so of two equally close points the later one is flagged as the minimum.
    """
    target_geo = GeoPoint.of(target)
    min_distance = math.inf

    for index, point in enumerate(begin_points):
        geo = GeoPoint.of(point)
        dist = haversine(geo, target_geo)
        if dist > threshold_m:
            continue

        is_minimum = False
        if dist <= min_distance:
            min_distance = dist
            is_minimum = True

        next_point = begin_points[index + 1] if index + 1 < len(begin_points) else None
        is_between = target_geo.is_between(geo, GeoPoint.of(next_point or point))

        yield MergeCandidate(
            index=index,
            point=point,
            next_point=next_point,
            target=target,
            distance=dist,
            min_distance=min_distance,
            is_minimum=is_minimum,
            is_between=is_between,
        )


def find_merge_point(begin_points, target, threshold_m, confirmer):
    """Offer each candidate to `confirmer.confirm()` until one is accepted.

    Returns a SearchResult. When confirmed, `prefix` holds the begin points
    up to and including the accepted one.
    """
    for candidate in iter_candidates(begin_points, target, threshold_m):
        logger.debug("candidate at index %d, %.2fm from merge point", candidate.index, candidate.distance)
        if confirmer.confirm(candidate):
            return SearchResult(
                state=SearchState.CONFIRMED,
                candidate=candidate,
                prefix=tuple(begin_points[: candidate.index + 1]),
            )

    logger.debug("scanned %d points without a confirmed merge point", len(begin_points))
    return SearchResult(state=SearchState.EXHAUSTED)
