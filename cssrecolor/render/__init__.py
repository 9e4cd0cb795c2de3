# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""
Rendering of normalized colors into CSS notations.

Rendering never modifies the color; the same color and options always
produce the same text.
"""

from cssrecolor.render.formatter import (
    convert_to_format,
    format_alpha,
    format_number,
    get_all_formats,
    round_channel,
)

__all__ = [
    "convert_to_format",
    "get_all_formats",
    "format_number",
    "format_alpha",
    "round_channel",
]
