# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""
Schema definitions for color conversion.

All types in this module are immutable (frozen dataclasses).
"""

from cssrecolor.schema.conversion import (
    COLOR_FORMATS,
    CONVERTIBLE_FORMATS,
    AlphaFormat,
    ColorMatch,
    ConversionOptions,
    ConversionResult,
    FormatDefinition,
    FormatId,
    ParsedColor,
    ProcessingResult,
    ProcessingStats,
)

__all__ = [
    # Format identifiers
    "FormatId",
    "CONVERTIBLE_FORMATS",
    "FormatDefinition",
    "COLOR_FORMATS",
    # Options
    "AlphaFormat",
    "ConversionOptions",
    # Single literal
    "ParsedColor",
    "ConversionResult",
    # Documents
    "ColorMatch",
    "ProcessingStats",
    "ProcessingResult",
]
