##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
Tabledisplay CLI Commands Package.

Each module holds the argument parsing and logic for one `tabledisplay` command,
built around the `CommandEntryPoint` interface.

Modules:
    command_entry_point: Defines the abstract base class `CommandEntryPoint` for all CLI commands.
    info: Implements the `info` command for displaying configuration and environment diagnostics.
    show: Implements the `show` command for printing a dataset file as a table.
"""

from tabledisplay.cli.commands.info import InfoCommand
from tabledisplay.cli.commands.show import ShowCommand


# Keep these in alphabetical order
ALL_COMMANDS = [
    InfoCommand(),
    ShowCommand(),
]
