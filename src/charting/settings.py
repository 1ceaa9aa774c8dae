"""Defaults for label and tooltip generation."""

from __future__ import annotations

import os
from typing import Final

DEFAULT_XY_TOOL_TIP_FORMAT: Final = "{0}: ({1}, {2})"
DEFAULT_XYZ_TOOL_TIP_FORMAT: Final = "{0}: ({1}, {2}, {3})"
DEFAULT_NULL_STRING: Final = "null"

# Number instance defaults (grouped, up to three fraction digits)
DEFAULT_MIN_FRACTION_DIGITS: Final = 0
DEFAULT_MAX_FRACTION_DIGITS: Final = 3

DEFAULT_DATE_PATTERN: Final = os.environ.get("CHARTING_DATE_PATTERN", "%Y-%m-%d %H:%M")
DEFAULT_TIMEZONE: Final = os.environ.get("CHARTING_TIMEZONE", "UTC")
