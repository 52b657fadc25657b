import sys


PROMPT = "\nMerge at this point [y|n]? "
YES_ANSWERS = ("y", "yes")


def describe_point(pt, with_time=True):
    """Indented multi-line summary of a track point."""
    lines = []
    if with_time:
        lines.append(f"  time: {pt.time.isoformat() if pt.time else None}")
    lines.append(f"  ele: {pt.elevation}")
    lines.append(f"  lat: {pt.latitude}")
    lines.append(f"  lng: {pt.longitude}")
    return "\n".join(lines)


def describe_candidate(candidate):
    """Text shown to the operator for one merge candidate."""
    target = candidate.target
    lines = [
        "",
        "This point looks promising:",
        describe_point(candidate.point, with_time=False),
    ]
    if candidate.next_point is not None:
        lines.append("Next track point:")
        lines.append(describe_point(candidate.next_point, with_time=False))
    lines.append(f"Distance from merge point: {candidate.distance}m (minimum so far: {candidate.min_distance}m)")
    lines.append(
        f"The merge point {target.latitude}, {target.longitude}, elevation {target.elevation} "
        f"{'_is_' if candidate.is_between else '_is not_'} between this point and the next."
    )
    lines.append(
        f"This point {'_is_' if candidate.is_minimum else '_is not_'} "
        "the minimum distance from the merge point so far."
    )
    return "\n".join(lines)


class TerminalConfirmer:
    """Ask the operator on the terminal whether to merge at a candidate.

    Blocks until an answer is typed. End of input counts as "no".
    """

    def __init__(self, input_func=input, out=None):
        self.input_func = input_func
        self.out = out if out is not None else sys.stdout

    def confirm(self, candidate):
        print(describe_candidate(candidate), file=self.out)
        try:
            answer = self.input_func(PROMPT)
        except EOFError:
            return False
        return answer.strip().lower() in YES_ANSWERS
