##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Tabledisplay
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Tabledisplay.
##############################################################################

"""
Tabledisplay: width-aligned console tables for row/column event data.

This module contains the source code for Tabledisplay.
"""

import os


__version__ = "1.0.0"
VERSION = __version__
PATH_TO_PROJ = os.path.join(os.path.dirname(__file__), "")
