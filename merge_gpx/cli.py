import argparse
import logging
import sys

import gpxpy.gpx

from merge_gpx.config import (
    DEFAULT_OUTPUT,
    DEFAULT_THRESHOLD_M,
    FixTimeConfig,
    MergeConfig,
    default_fixed_output,
    parse_arrival,
)
from merge_gpx.confirm import TerminalConfirmer
from merge_gpx.geo import DISTANCE_MODELS
from merge_gpx.gpx_io import TrackError
from merge_gpx.merge import fix_file, merge_files


def arrival_type(text):
    try:
        return parse_arrival(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ISO 8601 time: {text!r}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="merge-gpx",
        description="Merge two GPX recordings of one route and rebuild their timestamps.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-point details")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_merge = sub.add_parser("merge", help="Splice the beginning of one track onto another")
    p_merge.add_argument("-b", "--begin-gpx", required=True,
                         help="The GPX file containing the beginning of the recorded data")
    p_merge.add_argument("-e", "--end-gpx", required=True,
                         help="The GPX file containing the end of the recorded data")
    p_merge.add_argument("-t", "--merge-threshold-meters", type=float, default=DEFAULT_THRESHOLD_M,
                         help="Maximum distance in meters between two points for them "
                              "to be considered for a merge (default: 10)")
    p_merge.add_argument("-o", "--output-gpx", default=DEFAULT_OUTPUT,
                         help=f"Output file (default: {DEFAULT_OUTPUT})")
    p_merge.add_argument("--overwrite", action="store_true",
                         help="Overwrite output file if it exists")

    p_fix = sub.add_parser("fixtime", help="Rebuild the timestamps of one track from its arrival time")
    p_fix.add_argument("-i", "--input-gpx", required=True, help="Input GPX file")
    p_fix.add_argument("-a", "--arrival", required=True, type=arrival_type,
                       help="Time the track should reach its end, e.g. 2021-12-18T20:14:37Z")
    p_fix.add_argument("-o", "--output-gpx", default=None,
                       help="Output file (default: <infile>_fixed.gpx)")
    p_fix.add_argument("--distance-model", choices=sorted(DISTANCE_MODELS), default="haversine",
                       help="Distance model for the speed report (default: haversine)")
    p_fix.add_argument("--overwrite", action="store_true",
                       help="Overwrite output file if it exists")
    return parser


def configure_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.cmd == "merge":
            config = MergeConfig(
                begin_path=args.begin_gpx,
                end_path=args.end_gpx,
                output_path=args.output_gpx,
                threshold_m=args.merge_threshold_meters,
                overwrite=args.overwrite,
            )
            merge_files(config, TerminalConfirmer())
        else:
            config = FixTimeConfig(
                input_path=args.input_gpx,
                arrival=args.arrival,
                output_path=args.output_gpx or default_fixed_output(args.input_gpx),
                distance_model=args.distance_model,
                overwrite=args.overwrite,
            )
            fix_file(config)
    except (TrackError, gpxpy.gpx.GPXException, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
