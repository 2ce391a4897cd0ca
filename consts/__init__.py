"""Constants and metadata for the SCL scale file reader/writer.

This module centralizes the markers and limits used across the note and
scale packages, so that the text grammar is described in a single place.

Program Metadata:
- Version information and authorship details
- Release dates and licensing information

Format Markers:
- Comment marker for lines ignored during structural parsing
- Cents marker distinguishing cents values from ratios
- Ratio separator and line break used on output

Integer Limits:
- Width of ratio components (unsigned 32 bit)
- Upper bound applied both when parsing and when constructing ratios
"""

import re

# Metadata
__program_name__ = "SCLIO"
__version__ = "0.1.0"
__author__ = "SCLIO contributors"
__date__ = "2026-10-18"  # The date distinguishes releases
__license__ = "MIT"  # See LICENSE file

# Format markers
COMMENT_MARKER = "!"
CENTS_MARKER = "."
RATIO_SEPARATOR = "/"
LINE_BREAK = "\n"
CARRIAGE_RETURN = "\r"

# Ratio components are unsigned 32 bit integers
RATIO_COMPONENT_BITS = 32
RATIO_COMPONENT_MAX = 2 ** RATIO_COMPONENT_BITS - 1

# Token patterns (ASCII digits only; int()/float() accept more than the format does)
UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")
CENTS_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
