# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""
Format detection by prefix sniffing.

Purely syntactic: a literal is classified by how it starts, whether or
not its numbers are valid.
"""

from __future__ import annotations

from typing import Optional, Union

from cssrecolor.schema import COLOR_FORMATS, FormatId


# Checked in order; the `(` on lab/lch keeps them from claiming other names
_PREFIXES: tuple[tuple[str, FormatId], ...] = (
    ("#", FormatId.HEX),
    ("rgba", FormatId.RGB),
    ("rgb", FormatId.RGB),
    ("hsla", FormatId.HSL),
    ("hsl", FormatId.HSL),
    ("hwb", FormatId.HWB),
    ("lab(", FormatId.LAB),
    ("lch(", FormatId.LCH),
    ("oklab", FormatId.OKLAB),
    ("oklch", FormatId.OKLCH),
)


def detect_format(text: str) -> Optional[FormatId]:
    """
    Classify a single literal.

    Args:
        text: Literal text; surrounding whitespace and case are ignored

    Returns:
        The FormatId, or None for empty, blank or unrecognized input

    Example:
        >>> detect_format("  #FF5733  ")
        <FormatId.HEX: 'hex'>
    """
    if not isinstance(text, str):
        return None
    trimmed = text.strip().lower()
    if not trimmed:
        return None
    for prefix, fmt in _PREFIXES:
        if trimmed.startswith(prefix):
            return fmt
    return None


def get_format_label(fmt: Union[FormatId, str]) -> str:
    """Display label, e.g. "OKLCH"; unknown formats are upper-cased."""
    resolved = FormatId.lookup(fmt)
    for definition in COLOR_FORMATS:
        if definition.id is resolved:
            return definition.label
    return (fmt.value if isinstance(fmt, FormatId) else str(fmt)).upper()


def get_format_example(fmt: Union[FormatId, str]) -> str:
    """Example literal for a format, "" when there is none."""
    resolved = FormatId.lookup(fmt)
    for definition in COLOR_FORMATS:
        if definition.id is resolved:
            return definition.example
    return ""
