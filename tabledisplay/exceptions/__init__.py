##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
Module of all Tabledisplay-specific exception types.
"""

__all__ = (
    "InvalidTableStructureError",
    "CellPositionError",
    "InvalidCellValueError",
    "MissingPrintableElementError",
    "InvalidDisplayConfigError",
    "UnsupportedInputFormatError",
)


class InvalidTableStructureError(ValueError):
    """
    Exception to signal that the columns of a table don't line up, e.g. the
    number of column names and column types differ or there are no columns.
    """


class CellPositionError(IndexError):
    """
    Exception to signal that a row or column index is outside of the table.
    """

    def __init__(self, row: int, column: int, row_count: int, column_count: int):
        super().__init__(
            f"Cell ({row}, {column}) is outside of a table with {row_count} row(s) and {column_count} column(s)"
        )
        self.row = row
        self.column = column


class InvalidCellValueError(TypeError):
    """
    Exception to signal that a cell value was not given as a string
    (or a collection value was not given as a sequence of strings).
    """


class MissingPrintableElementError(RuntimeError):
    """
    Exception to signal that an ignored run in a column isn't followed by a
    printable element. Collections always end in a printable element, so this
    means the table was corrupted.
    """


class InvalidDisplayConfigError(ValueError):
    """
    Exception to signal that a display configuration value is invalid.
    """


class UnsupportedInputFormatError(ValueError):
    """
    Exception to signal that a dataset file is in a format we can't read.
    """
