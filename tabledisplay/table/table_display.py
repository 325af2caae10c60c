##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
This module houses the `TableDisplay` class, which accumulates already-stringified
cell values row by row and prints them as a width-aligned text table.

Values are appended in column-then-row order. A collection value is expanded down
successive rows of its column and shortened to its first element, an ellipsis
marker, and its last element. When printed, trailing columns that don't fit in the
configured width budget are dropped.
"""
import logging
import sys
from typing import IO, Iterable, List, Optional, Sequence, Tuple

from tabledisplay.config import DisplayConfig
from tabledisplay.exceptions import (
    CellPositionError,
    InvalidCellValueError,
    InvalidTableStructureError,
    MissingPrintableElementError,
)
from tabledisplay.table.elements import DisplayElement


LOG = logging.getLogger(__name__)


class TableDisplay:
    """
    A growable grid of `DisplayElement` cells with a per-column width and a write cursor.

    Row 0 always holds the column names. Every row has exactly one cell per column;
    cells that were never written are blank printable cells.

    Attributes:
        column_names (List[str]): The names of the columns, in order.
        column_types (List[str]): Type labels for the columns. Stored for the caller, never
            used for formatting.
        entries (int): The number of records the caller intends to add. Informational only.
        config (DisplayConfig): The fill character, separator, width budget and ellipsis
            marker used when printing.

    Methods:
        add_cell: Write a single value at the cursor and advance it.
        add_collection_cell: Write a collection down the current column and advance the cursor.
        get_cell: Return the cell at a given position.
        get_columns_to_elide: Count the trailing columns that don't fit in the width budget.
        format_render: Build the shortened, elided lines of the table.
        render: Print the shortened, elided table.
        serialize: Return every cell of the table, unshortened, as a single string.
    """

    def __init__(
        self,
        column_names: Sequence[str],
        column_types: Sequence[str],
        entries: int = 0,
        config: Optional[DisplayConfig] = None,
    ):
        """
        Create the table and write the column names as its first row.

        Args:
            column_names: The names of the columns.
            column_types: A type label for each column.
            entries: How many records the caller plans to add.
            config: Display settings. Defaults are used if not provided.

        Raises:
            InvalidTableStructureError: If there are no columns or the number of
                names and types don't match.
        """
        if not column_names:
            raise InvalidTableStructureError("A table needs at least one column")
        if len(column_names) != len(column_types):
            raise InvalidTableStructureError(
                f"Got {len(column_names)} column name(s) but {len(column_types)} column type(s)"
            )

        self.column_names: List[str] = list(column_names)
        self.column_types: List[str] = list(column_types)
        self.entries = entries
        self.config = config if config is not None else DisplayConfig()

        self._widths: List[int] = [0] * len(self.column_names)
        self._table: List[List[DisplayElement]] = []
        self._current_row = 0
        self._current_column = 0
        self._next_free_row = 1

        # The header row goes through the regular append path so names count towards the widths
        self._ensure_rows(1)
        for name in self.column_names:
            self.add_cell(name)

        LOG.debug(f"Created a table with columns {self.column_names} for {self.entries} entries.")

    def __str__(self) -> str:
        return self.serialize()

    @property
    def column_count(self) -> int:
        return len(self.column_names)

    @property
    def row_count(self) -> int:
        return len(self._table)

    @property
    def column_widths(self) -> List[int]:
        return list(self._widths)

    @property
    def cursor(self) -> Tuple[int, int, int]:
        """The `(current_row, current_column, next_free_row)` write position."""
        return self._current_row, self._current_column, self._next_free_row

    def get_cell(self, row: int, column: int) -> DisplayElement:
        """
        Return the cell at `(row, column)`.

        Raises:
            CellPositionError: If the position is outside of the table.
        """
        if not (0 <= row < self.row_count and 0 <= column < self.column_count):
            raise CellPositionError(row, column, self.row_count, self.column_count)
        return self._table[row][column]

    def _ensure_rows(self, count: int):
        """Append blank rows until the table has at least `count` rows."""
        while len(self._table) < count:
            self._table.append([DisplayElement() for _ in range(self.column_count)])

    def _update_width(self, column: int, width: int):
        if self._widths[column] < width:
            self._widths[column] = width

    def _set_cell(self, row: int, element: DisplayElement):
        if not element.is_ignore():
            self._update_width(self._current_column, len(element.representation))
        self._table[row][self._current_column] = element

    def _move_position(self):
        """Go to the next column, wrapping to the first column below everything written so far."""
        self._current_column += 1
        if self._current_column == self.column_count:
            self._current_row = self._next_free_row
            self._current_column = 0
            self._next_free_row = self._current_row + 1
            self._ensure_rows(self._current_row + 1)

    def add_cell(self, value: str):
        """
        Write `value` as a printable cell at the cursor and move to the next column.

        Args:
            value: The string representation to display.

        Raises:
            InvalidCellValueError: If `value` isn't a string.
        """
        if not isinstance(value, str):
            raise InvalidCellValueError(f"Cell values must be strings, got {type(value).__name__}")
        self._set_cell(self._current_row, DisplayElement(value))
        self._move_position()

    def add_collection_cell(self, values: Iterable[str]):
        """
        Write a collection down the current column, one element per row, starting at
        the current row.

        The first and last elements are printed. If there are at least three elements,
        the second one is shown as the ellipsis marker and everything between it and
        the last element is hidden. Columns written afterwards for the same record
        start below the deepest collection placed so far.

        Args:
            values: The string representations of the collection's elements.

        Raises:
            InvalidCellValueError: If `values` is a plain string or contains a non-string.
        """
        if isinstance(values, (str, bytes)):
            raise InvalidCellValueError("A collection cell needs a sequence of strings, not a single string")
        values = list(values)
        for value in values:
            if not isinstance(value, str):
                raise InvalidCellValueError(f"Collection elements must be strings, got {type(value).__name__}")

        row = self._current_row
        collection_size = len(values)
        for index, value in enumerate(values):
            self._ensure_rows(row + index + 1)
            if index in (0, collection_size - 1):
                element = DisplayElement(value)
            elif index == 1:
                element = DisplayElement.dotted(value)
                self._update_width(self._current_column, len(self.config.ellipsis))
            else:
                element = DisplayElement.ignored(value)
            self._set_cell(row + index, element)

        self._next_free_row = max(self._next_free_row, row + collection_size)
        self._move_position()

    def get_columns_to_elide(self) -> int:
        """
        Count the trailing columns that would push the printed width over the budget.

        Each column costs its width plus the separator. The first column at which the
        running total exceeds `config.max_width` is dropped along with every column
        after it.

        Returns:
            The number of columns to drop from the right, 0 if the whole table fits.
        """
        total_width = 0
        separator_width = len(self.config.separator)
        for index, width in enumerate(self._widths):
            total_width += width + separator_width
            if total_width > self.config.max_width:
                return self.column_count - index
        return 0

    def _find_next_printable(self, row_index: int, column_index: int) -> DisplayElement:
        """
        Find the first printable cell below `row_index` in a column. Inside an ignored
        run this is the last element of the collection.

        Raises:
            MissingPrintableElementError: If the column has no printable cell below the row.
        """
        for row in self._table[row_index + 1 :]:
            if row[column_index].is_print():
                return row[column_index]
        raise MissingPrintableElementError(
            f"Column '{self.column_names[column_index]}' has an ignored cell at row {row_index} "
            "with no printable cell after it"
        )

    def _format_line(self, fields: Sequence[str]) -> str:
        fill = self.config.fill_char
        separator = self.config.separator
        line = "".join(field.ljust(self._widths[i], fill) + separator for i, field in enumerate(fields))
        # Drop the whitespace after the last separator
        if separator and line.endswith(separator):
            line = line[: -len(separator)] + separator.rstrip()
        return line

    def format_render(self) -> List[str]:
        """
        Build the lines printed by `render`.

        Trailing columns that don't fit in the width budget are dropped, collections
        are shortened to `first`, ellipsis, `last`, and rows left with nothing to show
        are skipped.

        Returns:
            The non-empty lines of the shortened table, without line terminators.
        """
        columns_to_elide = self.get_columns_to_elide()
        if columns_to_elide:
            LOG.debug(f"Eliding {columns_to_elide} trailing column(s) to fit in {self.config.max_width} characters.")
        columns_to_print = self.column_count - columns_to_elide

        # Per column: the last element of a shortened collection was already printed
        # and everything up to (and including) it is skipped
        has_printed_next = [False] * self.column_count

        lines = []
        for row_index, row in enumerate(self._table):
            fields = []
            is_row_empty = True
            for column_index in range(columns_to_print):
                element = row[column_index]
                printed_element = ""
                if element.is_dot():
                    printed_element = self.config.ellipsis
                elif element.is_print():
                    if not has_printed_next[column_index]:
                        printed_element = element.representation
                    has_printed_next[column_index] = False
                elif not has_printed_next[column_index]:
                    printed_element = self._find_next_printable(row_index, column_index).representation
                    has_printed_next[column_index] = True

                if printed_element:
                    is_row_empty = False
                fields.append(printed_element)

            # Padding rows created for collections of different sizes end up empty
            if not is_row_empty:
                lines.append(self._format_line(fields))
        return lines

    def render(self, stream: IO[str] = None):
        """
        Print the shortened, elided table, one line per non-empty row.

        Args:
            stream: Where to write the table. Defaults to `sys.stdout`.
        """
        stream = stream if stream is not None else sys.stdout
        for line in self.format_render():
            print(line, file=stream)

    def serialize(self) -> str:
        """
        Return the whole table with every cell's representation, ignoring the width
        budget and without shortening collections or skipping empty rows.

        Returns:
            One line per row, each terminated by a newline.
        """
        return "".join(f"{self._format_line([cell.representation for cell in row])}\n" for row in self._table)
