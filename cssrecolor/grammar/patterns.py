# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""
Lexical grammars for CSS color literals.

One pattern per format plus a combined alternation for single-pass
document scanning. Patterns locate literal spans only; they do not
validate numbers (`1.2.3` is lexically a number here) and never
extract channel values.

Everything is compiled once at import time and exposed read-only.
Matching uses re.Pattern.finditer / fullmatch, which keep no cursor
between calls, so the compiled grammars are safe to share across
threads.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from cssrecolor.schema import CONVERTIBLE_FORMATS, FormatId


# =============================================================================
# Building Blocks
# =============================================================================

# 255, 0.5, 100.25
NUMERIC = r"[0-9.]+"

# Lab/OKLab a and b may be negative
SIGNED_NUMERIC = r"[0-9.\-]+"

# 50, 50%
NUMERIC_PERCENT = rf"{NUMERIC}%?"

OPTIONAL_WS = r"[ \t\n\r]*"
REQUIRED_WS = r"[ \t\n\r]+"

# After hue-like channels
ANGLE_UNIT = r"(?:deg|rad|grad|turn)?"

# Legacy (comma) or modern (whitespace) channel separator
SEPARATOR = r"[, \t\n\r]"

# Alpha introduced by comma or slash (rgb, hsl)
OPTIONAL_ALPHA = rf"(?:[,/]{OPTIONAL_WS}{NUMERIC_PERCENT})?"

# Alpha introduced by slash only (hwb, lab, lch, oklab, oklch)
OPTIONAL_SLASH_ALPHA = rf"(?:/{OPTIONAL_WS}{NUMERIC_PERCENT})?"

_HEX_DIGIT = "[0-9a-fA-F]"

_FLAGS = re.IGNORECASE | re.ASCII


# =============================================================================
# Per-Format Sources
# =============================================================================


def _legacy_function(name: str, first_channel: str) -> str:
    """rgb/hsl: optional `a` suffix, comma-or-space separators, comma-or-slash alpha."""
    return (
        rf"{name}a?\({OPTIONAL_WS}{first_channel}"
        rf"{OPTIONAL_WS}{SEPARATOR}{OPTIONAL_WS}{NUMERIC_PERCENT}"
        rf"{OPTIONAL_WS}{SEPARATOR}{OPTIONAL_WS}{NUMERIC_PERCENT}"
        rf"{OPTIONAL_WS}{OPTIONAL_ALPHA}{OPTIONAL_WS}\)"
    )


def _modern_function(name: str, first: str, second: str, third: str) -> str:
    """Space-separated channels with slash-only alpha."""
    return (
        rf"{name}\({OPTIONAL_WS}{first}"
        rf"{REQUIRED_WS}{second}"
        rf"{REQUIRED_WS}{third}"
        rf"{OPTIONAL_WS}{OPTIONAL_SLASH_ALPHA}{OPTIONAL_WS}\)"
    )


# Longest hex run first; the word boundary keeps #fff out of #ffffffg
HEX_SOURCE = rf"#(?:{_HEX_DIGIT}{{8}}|{_HEX_DIGIT}{{6}}|{_HEX_DIGIT}{{4}}|{_HEX_DIGIT}{{3}})\b"

RGB_SOURCE = _legacy_function("rgb", NUMERIC_PERCENT)

HSL_SOURCE = _legacy_function("hsl", NUMERIC + ANGLE_UNIT)

HWB_SOURCE = _modern_function("hwb", NUMERIC + ANGLE_UNIT, NUMERIC + "%", NUMERIC + "%")

LAB_SOURCE = _modern_function("lab", NUMERIC_PERCENT, SIGNED_NUMERIC, SIGNED_NUMERIC)

LCH_SOURCE = _modern_function("lch", NUMERIC_PERCENT, NUMERIC, NUMERIC + ANGLE_UNIT)

OKLAB_SOURCE = _modern_function("oklab", NUMERIC_PERCENT, SIGNED_NUMERIC, SIGNED_NUMERIC)

OKLCH_SOURCE = _modern_function("oklch", NUMERIC_PERCENT, NUMERIC, NUMERIC + ANGLE_UNIT)

GRAMMAR_SOURCES: Mapping[FormatId, str] = MappingProxyType({
    FormatId.HEX: HEX_SOURCE,
    FormatId.RGB: RGB_SOURCE,
    FormatId.HSL: HSL_SOURCE,
    FormatId.HWB: HWB_SOURCE,
    FormatId.LAB: LAB_SOURCE,
    FormatId.LCH: LCH_SOURCE,
    FormatId.OKLAB: OKLAB_SOURCE,
    FormatId.OKLCH: OKLCH_SOURCE,
})


# =============================================================================
# Compiled Grammars
# =============================================================================


@dataclass(frozen=True, slots=True)
class FormatGrammar:
    """
    A compiled lexical pattern bound to one format.

    Attributes:
        format: The format this grammar recognizes
        pattern: Compiled, case-insensitive pattern
    """
    format: FormatId
    pattern: re.Pattern

    def matches(self, text: str) -> bool:
        """True when the whole (trimmed) text is one literal of this format."""
        return self.pattern.fullmatch(text.strip()) is not None

    def find_all(self, text: str) -> list[re.Match]:
        """All non-overlapping literals of this format, left to right."""
        return list(self.pattern.finditer(text))


@dataclass(frozen=True, slots=True)
class CombinedGrammar:
    """
    Ordered alternation of every FormatGrammar.

    Each alternative is a named group (its format value), so a match
    reports which grammar produced it. The `#` prefix and the distinct
    function names keep alternatives mutually exclusive at any start
    position.
    """
    order: tuple[FormatId, ...]
    pattern: re.Pattern

    def scan(self, text: str) -> Iterator[tuple[FormatId, re.Match]]:
        """Yield (format, match) for every literal, ascending by offset."""
        for m in self.pattern.finditer(text):
            yield FormatId(m.lastgroup), m

    def search(self, text: str, pos: int = 0) -> Optional[re.Match]:
        """First literal at or after pos."""
        return self.pattern.search(text, pos)


def _build_combined(order: tuple[FormatId, ...]) -> CombinedGrammar:
    source = "|".join(f"(?P<{fmt.value}>{GRAMMAR_SOURCES[fmt]})" for fmt in order)
    return CombinedGrammar(order=order, pattern=re.compile(source, _FLAGS))


COLOR_GRAMMARS: Mapping[FormatId, FormatGrammar] = MappingProxyType({
    fmt: FormatGrammar(format=fmt, pattern=re.compile(GRAMMAR_SOURCES[fmt], _FLAGS))
    for fmt in CONVERTIBLE_FORMATS
})

# Plain compiled patterns, keyed by format value ("hex", "rgb", ...)
COLOR_PATTERNS: Mapping[str, re.Pattern] = MappingProxyType({
    fmt.value: grammar.pattern for fmt, grammar in COLOR_GRAMMARS.items()
})

HEX_PATTERN = COLOR_GRAMMARS[FormatId.HEX].pattern
RGB_PATTERN = COLOR_GRAMMARS[FormatId.RGB].pattern
HSL_PATTERN = COLOR_GRAMMARS[FormatId.HSL].pattern
HWB_PATTERN = COLOR_GRAMMARS[FormatId.HWB].pattern
LAB_PATTERN = COLOR_GRAMMARS[FormatId.LAB].pattern
LCH_PATTERN = COLOR_GRAMMARS[FormatId.LCH].pattern
OKLAB_PATTERN = COLOR_GRAMMARS[FormatId.OKLAB].pattern
OKLCH_PATTERN = COLOR_GRAMMARS[FormatId.OKLCH].pattern

COMBINED_GRAMMAR = _build_combined(CONVERTIBLE_FORMATS)
COMBINED_PATTERN = COMBINED_GRAMMAR.pattern
