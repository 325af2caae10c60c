##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
Main CLI parser setup for the Tabledisplay command-line interface.

This module defines the primary argument parser for the `tabledisplay` CLI tool,
including custom error handling and integration of all available subcommands.
"""

import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from tabledisplay import VERSION
from tabledisplay.ascii_art import banner_small
from tabledisplay.cli.commands import ALL_COMMANDS


DEFAULT_LOG_LEVEL = "INFO"

EPILOG = """commands:
  show    print the first records of a JSON, YAML, or CSV file as a table
  info    print the display settings in use and the installed package versions

examples:
  tabledisplay show events.json -n 10
  tabledisplay show events.csv --split ";" --columns id hits
  tabledisplay info --config ./tabledisplay.yaml

See tabledisplay <command> --help for more info"""


class HelpParser(ArgumentParser):
    """
    This class overrides the error message of the argument parser to
    print the help message when an error happens.

    Methods:
        error: Override the error message of the `ArgumentParser` class.
    """

    def error(self, message: str):
        """
        Override the error message of the `ArgumentParser` class.

        Args:
            message: The error message to log.
        """
        sys.stderr.write(f"error: {message}\n")
        self.print_help()
        sys.exit(2)


def build_main_parser() -> ArgumentParser:
    """
    Build the `tabledisplay` parser.

    The top level only holds the options shared by every command (`--version` and
    the log level). Each entry of `ALL_COMMANDS` registers its own subparser, so
    `show` and `info` own their arguments and set `func` to their `process_command`.

    Returns:
        An `ArgumentParser` whose parsed `args.func(args)` runs the chosen command.
    """
    parser = HelpParser(
        prog="tabledisplay",
        description=banner_small,
        formatter_class=RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument("-v", "--version", action="version", version=VERSION)
    parser.add_argument(
        "-lvl",
        "--level",
        type=str,
        default=DEFAULT_LOG_LEVEL,
        help="Set log level: DEBUG, INFO, WARNING, ERROR [Default: %(default)s]",
    )
    subparsers = parser.add_subparsers(dest="subparsers", required=True)

    for command in ALL_COMMANDS:
        command.add_parser(subparsers)

    return parser
