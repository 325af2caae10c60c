##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
Manages formatting for displaying diagnostic information to the console.
"""
import logging
import os
from argparse import Namespace

from tabulate import tabulate

from tabledisplay.ascii_art import banner_small
from tabledisplay.config import DisplayConfig
from tabledisplay.config.configfile import find_config_file, get_display_config
from tabledisplay.utils import get_package_versions


LOG = logging.getLogger("tabledisplay")


def display_config_info(config: DisplayConfig, config_file: str = None):
    """
    Prints the display settings in effect and where they came from.

    Args:
        config: The display settings to print.
        config_file: The configuration file the settings were read from, if any.
    """
    print("Tabledisplay Configuration")
    print("-" * 25)
    print("")

    # repr() so that whitespace settings like the fill character are visible
    conf = [(key, repr(val) if isinstance(val, str) else val) for key, val in config.items()]
    conf.append(("config file", config_file if config_file else "None (using defaults)"))
    print(tabulate(conf, tablefmt="presto"))


def print_info(args: Namespace):
    """
    Provide the display configuration along with version and location information
    about python and packages to facilitate user troubleshooting.

    Args:
        args: parsed CLI arguments. `args.config` may hold an explicit config file path.
    """
    config_path = getattr(args, "config", None)
    config_file = config_path if config_path else find_config_file()
    LOG.debug(f"Displaying info for config file: {config_file}")
    config = get_display_config(config_path)

    print(banner_small)
    display_config_info(config, config_file)

    print("")
    print("Python Configuration")
    print("-" * 25)
    print("")
    package_list = ["pip", "tabledisplay", "coloredlogs", "PyYAML", "tabulate"]
    package_versions = get_package_versions(package_list)
    print(package_versions)
    pythonpath = os.environ.get("PYTHONPATH")
    print(f"$PYTHONPATH: {pythonpath}")
