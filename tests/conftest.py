##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
This module contains pytest fixtures to be used throughout the entire test suite.
"""
import json
import os

import pytest
import yaml

from tabledisplay.config import DisplayConfig
from tabledisplay.table import TableDisplay
from tests.fixture_types import FixtureCallable, FixtureDisplayConfig, FixtureTable


# pylint: disable=redefined-outer-name


@pytest.fixture
def write_file(tmp_path) -> FixtureCallable:
    """
    Fixture to write a file into the temporary directory of a test.

    Returns:
        A function that writes the file and returns its path.
    """

    def _write_file(filename: str, contents) -> str:
        """
        Helper function to write `contents` to `filename`. Strings are written as-is,
        anything else is dumped as JSON or YAML depending on the file extension.

        Args:
            filename: The name of the file to create in the temporary directory.
            contents: What to put in the file.

        Returns:
            The path to the written file.
        """
        filepath = os.path.join(tmp_path, filename)
        with open(filepath, "w") as _file:
            if isinstance(contents, str):
                _file.write(contents)
            elif filename.endswith(".json"):
                json.dump(contents, _file)
            else:
                yaml.safe_dump(contents, _file)
        return filepath

    return _write_file


@pytest.fixture
def narrow_config() -> FixtureDisplayConfig:
    """
    A display config with a small width budget so that column elision is easy to trigger.

    Returns:
        A `DisplayConfig` with a width budget of 20 characters.
    """
    return DisplayConfig(max_width=20)


@pytest.fixture
def collection_table() -> FixtureTable:
    """
    A two column table holding one record: a plain value and a five element collection.

    Returns:
        The populated `TableDisplay`.
    """
    table = TableDisplay(["id", "hits"], ["int", "list<str>"], entries=1)
    table.add_cell("7")
    table.add_collection_cell(["a", "b", "c", "d", "e"])
    return table
