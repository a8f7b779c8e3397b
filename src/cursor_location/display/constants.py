"""Token patterns and fixed strings used when rendering the status line."""

from __future__ import annotations

import re
import sys
from types import MappingProxyType

# ``ct`` sandwiched between the two position tokens.
MIDDLE_PATTERN = re.compile(r"^.*(ln|ch).*?ct.*?(ln|ch).*", re.IGNORECASE)
# ``ct`` ahead of both position tokens; group 1 is the tail to keep.
BEGIN_PATTERN = re.compile(r"^.*ct.*((ln|ch).*?(ln|ch).*)", re.IGNORECASE)
# ``ct`` after both position tokens; group 1 is the head to keep.
END_PATTERN = re.compile(r"(.*(ln|ch).*?(ln|ch)).*?ct.*$", re.IGNORECASE)
TOTAL_PATTERN = re.compile(r"ct", re.IGNORECASE)
FRONTMATTER_PATTERN = re.compile(r"^\s*?---\n+?[\s\S]*?\n---")

MULTI_CURSORS = "{count} cursors"
SELECTED_TEXT = "{count} selected"
SELECTED_LINES = "{count} lines"
SELECTED_BOTH = " ({text} / {lines})"
SELECTED_SINGLE = " ({value})"

# Keeps .5 boundaries rounding up the same way everywhere.
ROUNDING_EPSILON = sys.float_info.epsilon

# top, near top, middle, near bottom, bottom
VERY_WORDY_BANDS = MappingProxyType(
    {
        0: "top",
        20: "near top",
        40: "middle",
        60: "near bottom",
        80: "bottom",
        100: "bottom",
    }
)

# top, middle, bottom
LITTLE_WORDY_BANDS = MappingProxyType(
    {
        0: "top",
        33: "middle",
        66: "bottom",
        99: "bottom",
    }
)

LOW_FUZZY_PERCENT = 10
HIGH_FUZZY_PERCENT = 20

TOP_WORD = "top"
BOTTOM_WORD = "bottom"
