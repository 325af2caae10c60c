##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
This module reads records from JSON, YAML, or CSV files into a `Dataset` and feeds
them into a `TableDisplay`.

Every value is turned into its string representation here: scalars with `str`,
lists and tuples into lists of strings that are displayed as collection cells.
"""
import csv
import json
import logging
import os
from typing import Any, Dict, List, Optional, Sequence, Union

import yaml

from tabledisplay.config import DisplayConfig
from tabledisplay.exceptions import (
    InvalidDisplayConfigError,
    InvalidTableStructureError,
    UnsupportedInputFormatError,
)
from tabledisplay.table import TableDisplay
from tabledisplay.utils import verify_filepath


LOG = logging.getLogger(__name__)

# A cell is either a single representation or the representations of a collection
CellValue = Union[str, List[str]]

EXTENSION_FORMATS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".csv": "csv",
}
SUPPORTED_FORMATS = sorted(set(EXTENSION_FORMATS.values()))


def stringify(value: Any) -> CellValue:
    """
    Convert a value read from a dataset file into what a cell displays.

    Args:
        value: The value to convert.

    Returns:
        A list of strings for lists and tuples, `""` for None, and `str(value)` otherwise.
    """
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ["" if ele is None else str(ele) for ele in value]
    return str(value)


def infer_type(values: Sequence[Any]) -> str:
    """
    Infer a type label for a column from its first non-null value.

    Args:
        values: The raw values of the column.

    Returns:
        The type name of the first non-null value (`list<elem>` for collections),
            or `str` if every value is null.
    """
    for value in values:
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            return f"list<{infer_type(value)}>"
        return type(value).__name__
    return "str"


class Dataset:
    """
    Column names, type labels, and stringified records ready to be displayed.

    Attributes:
        columns (List[str]): The column names, in display order.
        types (List[str]): One type label per column.
        records (List[List[CellValue]]): One list of cell values per record, aligned with `columns`.

    Methods:
        select: Return a new `Dataset` restricted to (and ordered by) the given columns.
    """

    def __init__(self, columns: List[str], types: List[str], records: List[List[CellValue]]):
        if len(columns) != len(types):
            raise InvalidTableStructureError(f"Got {len(columns)} column(s) but {len(types)} type(s)")
        for i, record in enumerate(records):
            if len(record) != len(columns):
                raise InvalidTableStructureError(
                    f"Record {i} has {len(record)} value(s) but there are {len(columns)} column(s)"
                )
        self.columns = columns
        self.types = types
        self.records = records

    def __len__(self) -> int:
        return len(self.records)

    def select(self, columns: Sequence[str]) -> "Dataset":
        """
        Restrict the dataset to `columns`, in that order.

        Raises:
            InvalidTableStructureError: If a requested column doesn't exist.
        """
        unknown = [col for col in columns if col not in self.columns]
        if unknown:
            raise InvalidTableStructureError(f"Unknown column(s) {unknown}. Available columns: {self.columns}")
        indices = [self.columns.index(col) for col in columns]
        return Dataset(
            [self.columns[i] for i in indices],
            [self.types[i] for i in indices],
            [[record[i] for i in indices] for record in self.records],
        )


def _from_mappings(rows: List[Dict[str, Any]], columns: List[str] = None, types: List[str] = None) -> Dataset:
    """Build a `Dataset` from a list of mappings; missing keys become blank cells."""
    if columns is None:
        columns = []
        for row in rows:
            if not isinstance(row, dict):
                raise InvalidTableStructureError(f"Expected every record to be a mapping, got {row!r}")
            for key in row:
                if key not in columns:
                    columns.append(key)
    raw = [[row.get(col) for col in columns] for row in rows]
    return _from_lists(raw, [str(col) for col in columns], types)


def _from_lists(rows: List[List[Any]], columns: List[str], types: List[str] = None) -> Dataset:
    """Build a `Dataset` from a list of value lists."""
    if types is None:
        types = [infer_type([row[i] for row in rows if i < len(row)]) for i in range(len(columns))]
    records = [[stringify(val) for val in row] for row in rows]
    return Dataset(columns, [str(t) for t in types], records)


def _from_document(document: Any) -> Dataset:
    """
    Build a `Dataset` from a parsed JSON/YAML document. The document is either a list
    of mappings or a mapping with `columns`, optional `types`, and `rows`.
    """
    if document is None:
        raise InvalidTableStructureError("The dataset file is empty")
    if isinstance(document, list):
        return _from_mappings(document)
    if not isinstance(document, dict) or "rows" not in document:
        raise InvalidTableStructureError("Expected a list of records or a mapping with a 'rows' entry")

    rows = document["rows"]
    if rows is None:
        rows = []
    if not isinstance(rows, list):
        raise InvalidTableStructureError(f"The 'rows' entry must be a list, got {type(rows).__name__}")
    columns = document.get("columns")
    types = document.get("types")
    if rows and all(isinstance(row, dict) for row in rows):
        return _from_mappings(rows, columns=columns, types=types)
    if not all(isinstance(row, (list, tuple)) for row in rows):
        raise InvalidTableStructureError("Every row must be a mapping, or every row must be a list of values")
    if columns is None:
        raise InvalidTableStructureError("Rows given as lists need a 'columns' entry")
    return _from_lists(rows, [str(col) for col in columns], types)


def _read_csv(filepath: str, split: Optional[str]) -> Dataset:
    with open(filepath, "r", newline="") as csv_file:
        reader = csv.reader(csv_file)
        try:
            columns = next(reader)
        except StopIteration as exc:
            raise InvalidTableStructureError(f"The CSV file {filepath} has no header row") from exc
        rows = []
        for row in reader:
            if not row:
                continue
            if split:
                row = [val.split(split) if split in val else val for val in row]
            rows.append(row)
    return _from_lists(rows, columns)


def load_dataset(filepath: str, fmt: str = None, split: str = None) -> Dataset:
    """
    Read a dataset file.

    Args:
        filepath: Path to the JSON, YAML, or CSV file.
        fmt: The format of the file. Inferred from the extension if not given.
        split: For CSV files, a delimiter that turns a cell into a collection.

    Returns:
        The `Dataset` held in the file.

    Raises:
        ValueError: If `filepath` isn't a file.
        UnsupportedInputFormatError: If the format can't be read.
        InvalidTableStructureError: If the file doesn't hold a table.
    """
    filepath = verify_filepath(filepath)
    if fmt is None:
        ext = os.path.splitext(filepath)[1].lower()
        fmt = EXTENSION_FORMATS.get(ext)
        if fmt is None:
            raise UnsupportedInputFormatError(
                f"Can't infer the format of {filepath}. Supported formats: {SUPPORTED_FORMATS}"
            )
    if fmt not in SUPPORTED_FORMATS:
        raise UnsupportedInputFormatError(f"Unsupported format '{fmt}'. Supported formats: {SUPPORTED_FORMATS}")

    LOG.debug(f"Reading {fmt} dataset from {filepath}")
    if fmt == "csv":
        dataset = _read_csv(filepath, split)
    else:
        with open(filepath, "r") as data_file:
            document = json.load(data_file) if fmt == "json" else yaml.safe_load(data_file)
        dataset = _from_document(document)

    LOG.debug(f"Loaded {len(dataset)} record(s) with columns {dataset.columns}")
    return dataset


def build_table(dataset: Dataset, rows: Optional[int] = None, config: DisplayConfig = None) -> TableDisplay:
    """
    Create a `TableDisplay` holding the first `rows` records of `dataset`.

    Args:
        dataset: The records to display.
        rows: How many records to add. All of them if None.
        config: Display settings for the table.

    Returns:
        The populated `TableDisplay`.

    Raises:
        InvalidDisplayConfigError: If `rows` is negative.
    """
    if rows is not None and rows < 0:
        raise InvalidDisplayConfigError(f"The number of rows to display must be non-negative, got {rows}")
    records = dataset.records if rows is None else dataset.records[:rows]

    table = TableDisplay(dataset.columns, dataset.types, entries=len(records), config=config)
    for record in records:
        for value in record:
            if isinstance(value, list):
                table.add_collection_cell(value)
            else:
                table.add_cell(value)
    return table
