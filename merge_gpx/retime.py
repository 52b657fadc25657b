from datetime import timedelta


ONE_SECOND = timedelta(seconds=1)


def one_second_times(count, arrival):
    """Timestamps for `count` points sampled once a second, the last one second before `arrival`."""
    start = arrival - count * ONE_SECOND
    return [start + i * ONE_SECOND for i in range(count)]


def retime(points, arrival):
    """Overwrite the time of every point in place so the sequence ends just before `arrival`.

    Any timestamps already on the points are discarded. Returns the points.
    """
    for point, time in zip(points, one_second_times(len(points), arrival)):
        point.time = time
    return points
