# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""
Single-literal API.

Invalid input is reported through is_valid, never raised.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from cssrecolor.color import parse_css_color
from cssrecolor.grammar import detect_format
from cssrecolor.render import convert_to_format
from cssrecolor.schema import ConversionOptions, ConversionResult, FormatId, ParsedColor

logger = logging.getLogger(__name__)


def parse_color(text: str) -> ParsedColor:
    """
    Detect and parse one literal.

    Args:
        text: Literal such as "#ff5733" or "oklch(0.68 0.17 40)"

    Returns:
        ParsedColor. format is None for named colors and unknown text;
        is_valid is False for blank or unparseable text.
    """
    trimmed = text.strip() if isinstance(text, str) else ""
    if not trimmed:
        return ParsedColor(color=None, format=None, is_valid=False, original=text)

    color = parse_css_color(trimmed)
    return ParsedColor(
        color=color,
        format=detect_format(trimmed),
        is_valid=color is not None,
        original=text,
    )


def convert_color(
    text: str,
    target_format: Union[FormatId, str],
    options: Optional[ConversionOptions] = None,
) -> ConversionResult:
    """
    Convert one literal into the target notation.

    Args:
        text: Source literal
        target_format: FormatId or its string value
        options: Formatting options (defaults if None)

    Returns:
        ConversionResult; value is "" and is_valid False when the
        literal cannot be parsed.

    Example:
        >>> convert_color("#ff5733", "rgb").value
        'rgb(255, 87, 51)'
    """
    fmt = FormatId.lookup(target_format) or target_format
    parsed = parse_color(text)
    if not parsed.is_valid:
        logger.debug("Rejected color literal %r", text)
        return ConversionResult(value="", format=fmt, is_valid=False)

    return ConversionResult(
        value=convert_to_format(parsed.color, fmt, options),
        format=fmt,
        is_valid=True,
    )
