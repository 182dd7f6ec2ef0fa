"""
Main CLI entry point for show.
"""

import argparse
import sys

from showcli.config import LIST_ALL_TOKEN, PROGRAM_NAME, VERSION_BANNER
from showcli.errors import ShowError
from showcli.registry import dispatch
from showcli.utils.output import error, failure, information


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="show - command line tool.",
        epilog=f"Use '{PROGRAM_NAME} {LIST_ALL_TOKEN}' to list all commands."
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help="Print version"
    )

    parser.add_argument(
        '-V', '--verbose',
        action='store_true',
        help="Verbose print"
    )

    parser.add_argument(
        'cmd',
        metavar='CMD',
        nargs='?',
        default='',
        help=f"Command, use '{LIST_ALL_TOKEN}' show all"
    )

    return parser


def report_error(exc):
    """
    Print a ShowError and map it to an exit code.

    Returns:
        int: 1 for fatal errors, 0 for errors that are only reported
    """
    if exc.fatal:
        error(str(exc))
        return 1
    failure(str(exc))
    return 0


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.version:
        print(VERSION_BANNER, end="")
        return 0

    if not args.cmd:
        failure(f"Use {PROGRAM_NAME} --help print usage.")
        return 0

    if args.verbose:
        information(f"Command: {args.cmd}")

    try:
        return dispatch(args.cmd, args.verbose)
    except ShowError as e:
        return report_error(e)
    except KeyboardInterrupt:
        error("Interrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
