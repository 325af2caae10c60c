##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""This module provides the cell type stored in a `TableDisplay` grid."""
from dataclasses import dataclass
from enum import Enum


__all__ = ("PrintingAction", "DisplayElement")


class PrintingAction(Enum):
    """
    Enum for what a cell does when a table is rendered.

    Attributes:
        PRINT: Emit the cell's representation.
        DOT: Emit the ellipsis marker in place of the representation.
        IGNORE: Emit nothing; the cell is hidden inside a shortened collection.
    """

    PRINT = "print"
    DOT = "dot"
    IGNORE = "ignore"


@dataclass(frozen=True)
class DisplayElement:
    """
    A single grid entry holding a string representation and what to do with it
    when rendering. The printing action is decided once, when the cell is added
    to the table, and never changes afterwards.

    Attributes:
        representation: The already-stringified value of this cell.
        action: The `PrintingAction` applied to this cell at render time.
    """

    representation: str = ""
    action: PrintingAction = PrintingAction.PRINT

    @classmethod
    def dotted(cls, representation: str) -> "DisplayElement":
        """Create a cell that renders as the ellipsis marker."""
        return cls(representation, PrintingAction.DOT)

    @classmethod
    def ignored(cls, representation: str) -> "DisplayElement":
        """Create a cell that is hidden when rendered."""
        return cls(representation, PrintingAction.IGNORE)

    def is_print(self) -> bool:
        return self.action is PrintingAction.PRINT

    def is_dot(self) -> bool:
        return self.action is PrintingAction.DOT

    def is_ignore(self) -> bool:
        return self.action is PrintingAction.IGNORE

    def is_empty(self) -> bool:
        return not self.representation
