##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
CLI module for printing a dataset file as a table.

This module defines the `ShowCommand` class, which implements the `show`
subcommand. It reads records from a JSON, YAML, or CSV file and prints the first
few of them as a width-aligned table, shortening collections and dropping the
columns that don't fit in the configured width.
"""

import logging
from argparse import ArgumentParser, Namespace

from tabledisplay.cli.commands.command_entry_point import CommandEntryPoint
from tabledisplay.config import DisplayConfig
from tabledisplay.config.configfile import get_display_config
from tabledisplay.loader import SUPPORTED_FORMATS, build_table, load_dataset


LOG = logging.getLogger("tabledisplay")


class ShowCommand(CommandEntryPoint):
    """
    Handles `show` CLI command for displaying the records of a dataset file.

    Methods:
        add_parser: Adds the `show` command to the CLI parser.
        process_command: Processes the CLI input and prints the table.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `show` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `show` command parser will be added.
        """
        show: ArgumentParser = subparsers.add_parser("show", help="Display the records of a dataset file as a table.")
        show.set_defaults(func=self.process_command)
        show.add_argument("dataset", type=str, help="Path to a JSON, YAML, or CSV file of records.")
        show.add_argument(
            "-n",
            "--rows",
            type=int,
            default=None,
            help="Number of records to display. Default: the 'rows' setting of the config file (5 if unset).",
        )
        show.add_argument(
            "-f",
            "--format",
            choices=SUPPORTED_FORMATS,
            default=None,
            help="Format of the dataset file. Inferred from the file extension if not given.",
        )
        show.add_argument(
            "--split",
            type=str,
            default=None,
            help="For CSV files, a delimiter that splits a cell into a collection.",
        )
        show.add_argument(
            "--columns",
            type=str,
            nargs="+",
            default=None,
            help="Only display these columns, in this order.",
        )
        show.add_argument(
            "--max-width",
            type=int,
            default=None,
            help="Override the width budget used to decide which trailing columns are dropped.",
        )
        show.add_argument(
            "--config",
            type=str,
            default=None,
            help="Path to a tabledisplay YAML config file. If not given the default locations are searched.",
        )
        show.add_argument(
            "--full",
            action="store_true",
            default=False,
            help="Print every cell without shortening collections or dropping columns.",
        )

    def process_command(self, args: Namespace):
        """
        CLI command to print a dataset file as a table.

        Args:
            args: Parsed command-line arguments, which may include:\n
                - `dataset`: Path to the dataset file.
                - `rows`: Number of records to display.
                - `format`: Format of the dataset file.
                - `split`: Delimiter that turns CSV cells into collections.
                - `columns`: Columns to display.
                - `max_width`: Width budget override.
                - `config`: Path to a config file.
                - `full`: Print the whole, unshortened table.
        """
        config = get_display_config(args.config)
        if args.max_width is not None:
            settings = dict(config.items())
            settings["max_width"] = args.max_width
            config = DisplayConfig(**settings)

        dataset = load_dataset(args.dataset, fmt=args.format, split=args.split)
        if args.columns:
            dataset = dataset.select(args.columns)

        rows = args.rows if args.rows is not None else config.rows
        LOG.debug(f"Displaying {min(rows, len(dataset))} of {len(dataset)} record(s) from {args.dataset}")
        table = build_table(dataset, rows=rows, config=config)

        if args.full:
            print(table.serialize(), end="")
        else:
            table.render()
