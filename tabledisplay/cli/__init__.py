##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
The `cli` package contains the command line interface of Tabledisplay.

Modules:
    argparse_main: Builds the main `tabledisplay` argument parser.
    commands: The implementation of every `tabledisplay` subcommand.
"""
