##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
It's hard to type hint pytest fixtures in a way that makes it clear
that the variable being used is a fixture. This module will created
aliases for these fixtures in order to make it easier to track what's
happening.

The types here will be defined as such:
- `FixtureCallable`: A fixture that returns a function
- `FixtureDict`: A fixture that returns a dictionary
- `FixtureDisplayConfig`: A fixture that returns a `DisplayConfig`
- `FixtureList`: A fixture that returns a list
- `FixtureStr`: A fixture that returns a string
- `FixtureTable`: A fixture that returns a `TableDisplay`
"""

from collections.abc import Callable
from typing import Annotated, Dict, List, TypeVar

import pytest

from tabledisplay.config import DisplayConfig
from tabledisplay.table import TableDisplay


K = TypeVar("K")
V = TypeVar("V")

FixtureCallable = Annotated[Callable, pytest.fixture]
FixtureDict = Annotated[Dict[K, V], pytest.fixture]
FixtureDisplayConfig = Annotated[DisplayConfig, pytest.fixture]
FixtureList = Annotated[List[K], pytest.fixture]
FixtureStr = Annotated[str, pytest.fixture]
FixtureTable = Annotated[TableDisplay, pytest.fixture]
