##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
This module provides functionality for locating and loading the Tabledisplay
configuration file (`tabledisplay.yaml`) and turning its `display` section into a
`DisplayConfig`.
"""
import logging
import os
from typing import Dict, Optional

from tabledisplay.config import DisplayConfig
from tabledisplay.config.config_filepaths import CONFIG_FILENAME, CONFIG_PATH_FILE, TABLEDISPLAY_HOME
from tabledisplay.exceptions import InvalidDisplayConfigError
from tabledisplay.utils import load_yaml, verify_filepath


LOG: logging.Logger = logging.getLogger(__name__)


def load_config(filepath: str) -> Optional[Dict]:
    """
    Reads a Tabledisplay YAML configuration file and returns its contents as a dictionary.

    Args:
        filepath (str): The path to the YAML configuration file.

    Returns:
        A dictionary containing the contents of the YAML file or None if file doesn't exist.
    """
    if not os.path.isfile(filepath):
        LOG.info(f"No config file at {filepath}")
        return None
    LOG.info(f"Reading display config from file {filepath}")
    return load_yaml(filepath) or {}


def find_config_file(path: str = None) -> Optional[str]:
    """
    Locate the Tabledisplay configuration file (`tabledisplay.yaml`).

    If no directory is provided, this uses a fallback sequence:
      1. Check for `tabledisplay.yaml` in the current working directory.
      2. Check if `CONFIG_PATH_FILE` exists and points to a valid config file.
      3. Check for `tabledisplay.yaml` in the `TABLEDISPLAY_HOME` directory.

    If a `path` is explicitly provided, only that directory is checked.

    Args:
        path (str, optional): A specific directory to look for `tabledisplay.yaml`.

    Returns:
        The full path to the config file if found, otherwise `None`.
    """
    if path is None:
        local_config = os.path.join(os.getcwd(), CONFIG_FILENAME)
        if os.path.isfile(local_config):
            return local_config

        if os.path.isfile(CONFIG_PATH_FILE):
            with open(CONFIG_PATH_FILE, "r") as f:
                config_path = f.read().strip()
            if os.path.isfile(config_path):
                return config_path

        home_config = os.path.join(TABLEDISPLAY_HOME, CONFIG_FILENAME)
        if os.path.isfile(home_config):
            return home_config

        return None

    config_path = os.path.join(path, CONFIG_FILENAME)
    if os.path.exists(config_path):
        return config_path

    return None


def get_display_config(filepath: str = None) -> DisplayConfig:
    """
    Build the `DisplayConfig` to use for this run.

    An explicit `filepath` must exist. Otherwise the file is searched for with
    `find_config_file` and the defaults are used if none is found.

    Args:
        filepath: Path to a configuration file to load.

    Returns:
        The `DisplayConfig` built from the `display` section of the file.

    Raises:
        ValueError: If `filepath` was given but isn't a file.
        InvalidDisplayConfigError: If the file's `display` section isn't a mapping
            or contains bad values.
    """
    if filepath is not None:
        filepath = verify_filepath(filepath)
    else:
        filepath = find_config_file()
        if filepath is None:
            LOG.debug("No config file found, using the default display settings.")
            return DisplayConfig()

    contents = load_config(filepath)
    if not isinstance(contents, dict):
        raise InvalidDisplayConfigError(f"The config file at {filepath} must contain a mapping")

    display_settings = contents.get("display", {})
    if display_settings is not None and not isinstance(display_settings, dict):
        raise InvalidDisplayConfigError(f"The 'display' section of {filepath} must be a mapping")
    return DisplayConfig.from_dict(display_settings)
