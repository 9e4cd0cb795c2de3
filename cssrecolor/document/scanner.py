# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""
Document scanning and rewriting.

A document passes through two phases:

1. Scan: the combined grammar finds every literal, left to right,
   without overlap. Offsets, lines and columns are recorded against
   the original text.
2. Rewrite: each literal is parsed and rendered in the target format.
   Rejected literals stay verbatim and count as failed; literals whose
   rendering equals their source stay verbatim and are not counted.

Both phases are pure functions of their input. Nothing is shared
between calls except the compiled grammars, which hold no cursor.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from cssrecolor.color import parse_css_color
from cssrecolor.grammar import COMBINED_GRAMMAR
from cssrecolor.render import convert_to_format
from cssrecolor.schema import (
    ColorMatch,
    ConversionOptions,
    FormatId,
    ProcessingResult,
    ProcessingStats,
)

logger = logging.getLogger(__name__)


def detect_colors(document: str) -> list[ColorMatch]:
    """
    Locate every color literal in a document.

    Args:
        document: Arbitrary text (CSS, HTML, SCSS, ...)

    Returns:
        Matches ascending by offset, with 1-indexed line and column

    Example:
        >>> [m.original for m in detect_colors("a{color:#fff} b{color:rgb(0 0 0)}")]
        ['#fff', 'rgb(0 0 0)']
    """
    matches = []
    line = 1
    line_start = 0
    counted_to = 0

    for fmt, m in COMBINED_GRAMMAR.scan(document):
        start = m.start()
        # Matches ascend, so newlines are counted once each
        newlines = document.count("\n", counted_to, start)
        if newlines:
            line += newlines
            line_start = document.rfind("\n", counted_to, start) + 1
        counted_to = start

        matches.append(ColorMatch(
            original=m.group(0),
            start=start,
            length=m.end() - start,
            line=line,
            column=start - line_start + 1,
            format=fmt,
        ))

    return matches


def scan_and_convert(
    document: str,
    target_format: Union[FormatId, str],
    options: Optional[ConversionOptions] = None,
) -> ProcessingResult:
    """
    Rewrite every color literal in a document into the target format.

    All non-color text is preserved byte for byte.

    Args:
        document: Text to process
        target_format: FormatId or its string value
        options: Formatting options (defaults if None)

    Returns:
        ProcessingResult with the rewritten text, the ordered changes
        and total/converted/failed counters. total is the number of
        literals found by the scan.

    Example:
        >>> result = scan_and_convert(".a{color:#ff5733}", "rgb")
        >>> result.converted
        '.a{color:rgb(255, 87, 51)}'
    """
    opts = options or ConversionOptions()
    matches = detect_colors(document)

    pieces = []
    changes = []
    cursor = 0
    delta = 0  # len(converted) - len(original), accumulated so far
    converted_count = 0
    failed_count = 0

    for match in matches:
        color = parse_css_color(match.original)
        if color is None:
            failed_count += 1
            logger.debug(
                "Unparseable color %r at line %d, column %d",
                match.original, match.line, match.column,
            )
            continue

        rendered = convert_to_format(color, target_format, opts)
        if not rendered or rendered == match.original:
            continue

        pieces.append(document[cursor:match.start])
        pieces.append(rendered)
        cursor = match.end

        changes.append(match.with_conversion(rendered, match.start + delta))
        delta += len(rendered) - match.length
        converted_count += 1

    pieces.append(document[cursor:])

    stats = ProcessingStats(
        total=len(matches),
        converted=converted_count,
        failed=failed_count,
    )
    logger.debug(
        "Processed document: %d colors, %d converted, %d failed",
        stats.total, stats.converted, stats.failed,
    )
    return ProcessingResult(
        original=document,
        converted="".join(pieces),
        changes=tuple(changes),
        stats=stats,
    )
