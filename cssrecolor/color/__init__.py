# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""
Canonical color access.

Parses literal text into a NormalizedColor and projects it into any
supported space. Only this package does color math; grammar, renderer
and scanner treat colors as opaque values.
"""

from cssrecolor.color.model import CHANNEL_NAMES, SPACES, ChannelRecord, NormalizedColor
from cssrecolor.color.parse import parse_css_color

__all__ = [
    "NormalizedColor",
    "ChannelRecord",
    "SPACES",
    "CHANNEL_NAMES",
    "parse_css_color",
]
