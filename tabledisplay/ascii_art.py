##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
Holds ascii art strings.
"""

# fmt: off
tabledisplay_name_small = r"""
  _        _     _          _ _           _
 | |_ __ _| |__ | | ___  __| (_)___ _ __ | | __ _ _   _
 | __/ _` | '_ \| |/ _ \/ _` | / __| '_ \| |/ _` | | | |
 | || (_| | |_) | |  __/ (_| | \__ \ |_) | | (_| | |_| |
  \__\__,_|_.__/|_|\___|\__,_|_|___/ .__/|_|\__,_|\__, |
                                   |_|            |___/
 Console tables for event data
"""

tabledisplay_grid_small = """

 +---+-----+
 | x | y   |
 +---+-----+
 | 1 | a   |
 |   | ... |
 |   | e   |
 +---+-----+

"""
# fmt: on


def _make_banner():

    name_lines = tabledisplay_name_small.split("\n")
    grid_lines = tabledisplay_grid_small.split("\n")
    grid_width = max(len(line) for line in grid_lines) + 2

    banner = ""
    for grid_line, name_line in zip(grid_lines, name_lines):
        banner = banner + grid_line.ljust(grid_width) + name_line + "\n"

    return banner


banner_small = _make_banner()
