##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
Tests for the `configfile.py` file of the `config/` folder.
"""

import os

import pytest
from pytest_mock import MockerFixture

from tabledisplay.config import DisplayConfig
from tabledisplay.config.configfile import find_config_file, get_display_config, load_config
from tabledisplay.exceptions import InvalidDisplayConfigError
from tests.fixture_types import FixtureCallable, FixtureStr


# pylint: disable=redefined-outer-name


@pytest.fixture
def isolated_config_locations(mocker: MockerFixture, tmp_path) -> FixtureStr:
    """
    Point every default config location into an empty temporary directory.

    Args:
        mocker: PyTest mocker fixture.
        tmp_path: PyTest tmp_path fixture.

    Returns:
        The path to the temporary home directory.
    """
    home = os.path.join(tmp_path, "home")
    os.makedirs(home)
    work = os.path.join(tmp_path, "work")
    os.makedirs(work)
    mocker.patch("tabledisplay.config.configfile.TABLEDISPLAY_HOME", home)
    mocker.patch("tabledisplay.config.configfile.CONFIG_PATH_FILE", os.path.join(home, "config_path.txt"))
    mocker.patch("os.getcwd", return_value=work)
    return home


def test_load_config(write_file: FixtureCallable):
    """
    Test that `load_config` returns the contents of a YAML file.

    Args:
        write_file: A fixture to write files into a temporary directory.
    """
    filepath = write_file("tabledisplay.yaml", {"display": {"rows": 3}})
    assert load_config(filepath) == {"display": {"rows": 3}}


def test_load_config_invalid_file():
    """
    Test the `load_config` function with an invalid filepath.
    """
    assert load_config("invalid/filepath") is None


def test_load_config_empty_file(write_file: FixtureCallable):
    """
    Test that an empty config file loads as an empty mapping.

    Args:
        write_file: A fixture to write files into a temporary directory.
    """
    assert load_config(write_file("tabledisplay.yaml", "")) == {}


def test_find_config_file_nothing_found(isolated_config_locations: FixtureStr):
    """
    Test that `find_config_file` returns None when no config file exists anywhere.

    Args:
        isolated_config_locations: The temporary home directory.
    """
    assert find_config_file() is None


def test_find_config_file_local(isolated_config_locations: FixtureStr):
    """
    Test that a config file in the current working directory is found first.

    Args:
        isolated_config_locations: The temporary home directory.
    """
    local = os.path.join(os.getcwd(), "tabledisplay.yaml")
    with open(local, "w") as _file:
        _file.write("display: {}\n")
    with open(os.path.join(isolated_config_locations, "tabledisplay.yaml"), "w") as _file:
        _file.write("display: {}\n")
    assert find_config_file() == local


def test_find_config_file_config_path_file(isolated_config_locations: FixtureStr, write_file: FixtureCallable):
    """
    Test that the path stored in `CONFIG_PATH_FILE` is used when it points to a file.

    Args:
        isolated_config_locations: The temporary home directory.
        write_file: A fixture to write files into a temporary directory.
    """
    target = write_file("elsewhere.yaml", {"display": {"rows": 1}})
    with open(os.path.join(isolated_config_locations, "config_path.txt"), "w") as _file:
        _file.write(f"{target}\n")
    assert find_config_file() == target


def test_find_config_file_config_path_file_invalid(isolated_config_locations: FixtureStr):
    """
    Test that a `CONFIG_PATH_FILE` pointing nowhere is skipped.

    Args:
        isolated_config_locations: The temporary home directory.
    """
    with open(os.path.join(isolated_config_locations, "config_path.txt"), "w") as _file:
        _file.write("does/not/exist.yaml")
    assert find_config_file() is None


def test_find_config_file_home(isolated_config_locations: FixtureStr):
    """
    Test that the config file in `TABLEDISPLAY_HOME` is used as the last resort.

    Args:
        isolated_config_locations: The temporary home directory.
    """
    home_config = os.path.join(isolated_config_locations, "tabledisplay.yaml")
    with open(home_config, "w") as _file:
        _file.write("display: {}\n")
    assert find_config_file() == home_config


def test_find_config_file_explicit_dir(tmp_path):
    """
    Test that an explicit directory is the only place searched.

    Args:
        tmp_path: PyTest tmp_path fixture.
    """
    assert find_config_file(str(tmp_path)) is None
    config_file = os.path.join(tmp_path, "tabledisplay.yaml")
    with open(config_file, "w") as _file:
        _file.write("display: {}\n")
    assert find_config_file(str(tmp_path)) == config_file


def test_get_display_config_defaults(isolated_config_locations: FixtureStr):
    """
    Test that the defaults are used when no config file exists.

    Args:
        isolated_config_locations: The temporary home directory.
    """
    assert get_display_config() == DisplayConfig()


def test_get_display_config_from_file(write_file: FixtureCallable):
    """
    Test that the `display` section of an explicit file is loaded.

    Args:
        write_file: A fixture to write files into a temporary directory.
    """
    filepath = write_file("custom.yaml", {"display": {"max_width": 30, "ellipsis": "~"}})
    config = get_display_config(filepath)
    assert config.max_width == 30
    assert config.ellipsis == "~"


def test_get_display_config_missing_explicit_file():
    """
    Test that an explicit config path must exist.
    """
    with pytest.raises(ValueError, match="is not a valid filepath"):
        get_display_config("does/not/exist.yaml")


@pytest.mark.parametrize("contents", ["- a\n- b\n", "display: 3\n", "display:\n  fill_char: '--'\n"])
def test_get_display_config_invalid_contents(write_file: FixtureCallable, contents: str):
    """
    Test that malformed config files are rejected.

    Args:
        write_file: A fixture to write files into a temporary directory.
        contents: The contents of the config file.
    """
    filepath = write_file("bad.yaml", contents)
    with pytest.raises(InvalidDisplayConfigError):
        get_display_config(filepath)
