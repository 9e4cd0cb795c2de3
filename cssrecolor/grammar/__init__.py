# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""
Grammar library and format detection.

The grammars are process-wide constants built at import time.
"""

from cssrecolor.grammar.detect import detect_format, get_format_example, get_format_label
from cssrecolor.grammar.patterns import (
    COLOR_GRAMMARS,
    COLOR_PATTERNS,
    COMBINED_GRAMMAR,
    COMBINED_PATTERN,
    HEX_PATTERN,
    HSL_PATTERN,
    HWB_PATTERN,
    LAB_PATTERN,
    LCH_PATTERN,
    OKLAB_PATTERN,
    OKLCH_PATTERN,
    RGB_PATTERN,
    CombinedGrammar,
    FormatGrammar,
)

__all__ = [
    "FormatGrammar",
    "CombinedGrammar",
    "COLOR_GRAMMARS",
    "COLOR_PATTERNS",
    "COMBINED_GRAMMAR",
    "COMBINED_PATTERN",
    "HEX_PATTERN",
    "RGB_PATTERN",
    "HSL_PATTERN",
    "HWB_PATTERN",
    "LAB_PATTERN",
    "LCH_PATTERN",
    "OKLAB_PATTERN",
    "OKLCH_PATTERN",
    "detect_format",
    "get_format_label",
    "get_format_example",
]
