"""Argument parsing functionality for goenv-installed."""

import argparse
from constants import Constants

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="goenv-installed",
        description=(
            "Display an installed Go version, searching for shortcuts if necessary. "
            "Accepts 'latest', 'system', a major or minor number (e.g. 1, 23, 1.23), "
            "a release candidate (1.23rc1) or a full version (1.23.4)."
        ),
        add_help=True,
    )

    parser.add_argument("version",
                        nargs="?",
                        help="Version specifier (default: latest)",
                        action="store", type=str,
                        default=Constants.DEFAULT_SPECIFIER)
    parser.add_argument("--complete",
                        dest="COMPLETE",
                        help="Print completion candidates and exit.",
                        action="store_true")

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML)",
                        action="store",
                        type=str)
    parser.add_argument("--supported-major",
                        dest="SUPPORTED_MAJORS",
                        help="Major version shorthand specifiers are qualified with (repeatable, in priority order)",
                        action="append",
                        type=str,
                        default=[])

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
