"""Argument parsing functionality for Palawija."""

import argparse
from constants import Constants

_EPILOG = """examples:
  palawija available 8.3     # list PHP 8.3.x releases
  palawija install 8.3.0     # download and extract PHP 8.3.0
  palawija use 8.3.0         # make the compiled 8.3.0 the system PHP
  palawija list              # show installed versions
"""


def build_parser():
    """Build the top-level parser with one subparser per command."""
    parser = argparse.ArgumentParser(
        prog=Constants.PROG,
        description="Palawija - install, manage and switch between PHP versions",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=True,
    )
    parser.add_argument("--version",
                        action="version",
                        version=f"%(prog)s {Constants.VERSION}")
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    subparsers = parser.add_subparsers(dest="action", metavar="<command>")
    subparsers.required = True

    install = subparsers.add_parser(
        "install",
        help="Download and extract PHP source code for compilation",
    )
    install.add_argument("version",
                         help="PHP version in format major.minor.patch (e.g., 8.3.0)")

    use = subparsers.add_parser(
        "use",
        help="Set the global PHP version",
    )
    use.add_argument("version",
                     help="Previously installed and compiled PHP version to switch to")

    subparsers.add_parser(
        "list",
        help="Show installed versions and highlight the active one",
    )
    subparsers.add_parser(
        "which",
        help="Show the full path to the current PHP executable",
    )

    available = subparsers.add_parser(
        "available",
        help="Fetch available PHP versions with their support status",
    )
    available.add_argument("prefix",
                           nargs="?",
                           default=None,
                           help="Version prefix to filter results (e.g., '8' for PHP 8.x, '8.2' for 8.2.x)")
    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
