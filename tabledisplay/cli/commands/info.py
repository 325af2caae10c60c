##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
CLI module for displaying configuration and environment information.

This module defines the `InfoCommand` class, which handles the `info` subcommand
of the Tabledisplay CLI. It shows the display settings in effect, the config file
they came from, and the installed versions of the packages Tabledisplay relies on.
"""

from argparse import ArgumentParser, Namespace

from tabledisplay import display
from tabledisplay.cli.commands.command_entry_point import CommandEntryPoint


class InfoCommand(CommandEntryPoint):
    """
    Handles `info` CLI command for viewing configuration and environment information.

    Methods:
        add_parser: Adds the `info` command to the CLI parser.
        process_command: Processes the CLI input and dispatches the appropriate action.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `info` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `info` command parser will be added.
        """
        info: ArgumentParser = subparsers.add_parser(
            "info",
            help="display info about the tabledisplay configuration and the python configuration. "
            "Useful for debugging.",
        )
        info.set_defaults(func=self.process_command)
        info.add_argument(
            "--config",
            type=str,
            default=None,
            help="Path to a tabledisplay YAML config file. If not given the default locations are searched.",
        )

    def process_command(self, args: Namespace):
        """
        CLI command to print tabledisplay configuration info.

        Args:
            args: Parsed CLI arguments.
        """
        display.print_info(args)
