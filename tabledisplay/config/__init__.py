##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
Used to store the display configuration.

The `config` package holds the named values that control how a table is laid out
(fill character, column separator, maximum printed width, ellipsis marker, and the
default number of rows to show), along with the logic to load them from a YAML file.

Modules:
    config_filepaths.py: Default locations of the Tabledisplay configuration file.
    configfile.py: Locates and loads the configuration file into a `DisplayConfig`.
"""
import logging
from typing import Any, Dict, List, Tuple

from tabledisplay.exceptions import InvalidDisplayConfigError


LOG = logging.getLogger(__name__)

DEFAULT_MAX_WIDTH = 100
DEFAULT_FILL_CHAR = " "
DEFAULT_SEPARATOR = " | "
DEFAULT_ELLIPSIS = "..."
DEFAULT_ROWS = 5


class DisplayConfig:
    """
    The DisplayConfig class, meant to store all display settings in one place so that
    tables never reach for process-wide constants.

    Attributes:
        max_width (int): Width budget used to decide how many trailing columns are elided.
        fill_char (str): Single character used to pad each field to its column width.
        separator (str): Delimiter written after every field.
        ellipsis (str): Marker written in place of the interior of a shortened collection.
        rows (int): Default number of records shown by the command line interface.

    Methods:
        from_dict: Build a `DisplayConfig` from a mapping, ignoring unknown keys.
        items: Return the settings as `(name, value)` pairs.
        validate: Check every setting, raising on the first bad one.
    """

    FIELDS = ("max_width", "fill_char", "separator", "ellipsis", "rows")

    def __init__(
        self,
        max_width: int = DEFAULT_MAX_WIDTH,
        fill_char: str = DEFAULT_FILL_CHAR,
        separator: str = DEFAULT_SEPARATOR,
        ellipsis: str = DEFAULT_ELLIPSIS,
        rows: int = DEFAULT_ROWS,
    ):
        self.max_width = max_width
        self.fill_char = fill_char
        self.separator = separator
        self.ellipsis = ellipsis
        self.rows = rows
        self.validate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DisplayConfig):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        settings = ", ".join(f"{key}={val!r}" for key, val in self.items())
        return f"DisplayConfig({settings})"

    @classmethod
    def from_dict(cls, settings: Dict[str, Any]) -> "DisplayConfig":
        """
        Build a `DisplayConfig` from a mapping such as the `display` section of a
        configuration file. Keys that aren't display settings are logged and skipped.

        Args:
            settings: The mapping of setting names to values. May be None.

        Returns:
            A validated `DisplayConfig`.
        """
        settings = settings or {}
        known = {}
        for key, val in settings.items():
            if key in cls.FIELDS:
                known[key] = val
            else:
                LOG.warning(f"Ignoring unknown display setting '{key}'.")
        return cls(**known)

    def items(self) -> List[Tuple[str, Any]]:
        return [(field, getattr(self, field)) for field in self.FIELDS]

    def validate(self):
        """
        Check every setting.

        Raises:
            InvalidDisplayConfigError: If any setting has the wrong type or value.
        """
        for field in ("max_width", "rows"):
            val = getattr(self, field)
            if isinstance(val, bool) or not isinstance(val, int) or val < 0:
                raise InvalidDisplayConfigError(f"'{field}' must be a non-negative integer, got {val!r}")
        if not isinstance(self.fill_char, str) or len(self.fill_char) != 1:
            raise InvalidDisplayConfigError(f"'fill_char' must be a single character, got {self.fill_char!r}")
        if not isinstance(self.separator, str):
            raise InvalidDisplayConfigError(f"'separator' must be a string, got {self.separator!r}")
        if not isinstance(self.ellipsis, str) or not self.ellipsis:
            raise InvalidDisplayConfigError(f"'ellipsis' must be a non-empty string, got {self.ellipsis!r}")
