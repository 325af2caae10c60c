##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
The `table` package contains the core of Tabledisplay: the grid of cells and the logic
that lays it out, shortens collections, and drops columns that don't fit.

Modules:
    elements: The `PrintingAction` enum and the `DisplayElement` cell.
    table_display: The `TableDisplay` class.
"""

from tabledisplay.table.elements import DisplayElement, PrintingAction
from tabledisplay.table.table_display import TableDisplay


__all__ = ["DisplayElement", "PrintingAction", "TableDisplay"]
