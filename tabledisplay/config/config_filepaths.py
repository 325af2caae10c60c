##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
Locations used when searching for the display settings file.

`configfile.find_config_file` checks, in order, `CONFIG_FILENAME` in the working
directory, the path written in `CONFIG_PATH_FILE`, and `CONFIG_FILENAME` in
`TABLEDISPLAY_HOME`.
"""

import os


CONFIG_FILENAME: str = "tabledisplay.yaml"
USER_HOME: str = os.path.expanduser("~")
TABLEDISPLAY_HOME: str = os.path.join(USER_HOME, ".tabledisplay")
# Holds the path of a settings file kept outside of the search directories
CONFIG_PATH_FILE: str = os.path.join(TABLEDISPLAY_HOME, "config_path.txt")
