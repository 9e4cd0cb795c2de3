# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""
Cssrecolor -- CSS color literal conversion.

Finds color literals in text and rewrites them into one target
notation (hex, rgb, hsl, hwb, lab, lch, oklab, oklch), leaving every
other character untouched.

Quick start::

    from cssrecolor import convert_color, scan_and_convert

    convert_color("#ff5733", "rgb").value     # 'rgb(255, 87, 51)'
    result = scan_and_convert(css_text, "oklch")
    result.converted                          # rewritten document
    result.stats                              # total / converted / failed
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from cssrecolor.convert import convert_color, parse_color
from cssrecolor.document import detect_colors, scan_and_convert
from cssrecolor.grammar import detect_format, get_format_example, get_format_label
from cssrecolor.render import convert_to_format, get_all_formats
from cssrecolor.schema import (
    COLOR_FORMATS,
    AlphaFormat,
    ColorMatch,
    ConversionOptions,
    ConversionResult,
    FormatId,
    ParsedColor,
    ProcessingResult,
    ProcessingStats,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "detect_format",
    "convert_color",
    "scan_and_convert",
    # Supporting operations
    "parse_color",
    "detect_colors",
    "convert_to_format",
    "get_all_formats",
    "get_format_label",
    "get_format_example",
    # Types (commonly needed)
    "FormatId",
    "AlphaFormat",
    "ConversionOptions",
    "ParsedColor",
    "ConversionResult",
    "ColorMatch",
    "ProcessingStats",
    "ProcessingResult",
    "COLOR_FORMATS",
    # Version
    "__version__",
]
