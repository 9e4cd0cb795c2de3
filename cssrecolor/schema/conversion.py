# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""
Conversion schema: value objects shared by every layer.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same input → same result
- Failure is data: invalid colors are reported, never raised
- Serializable: JSON-ready via to_dict()/to_json()

Offsets, lines and columns always refer to the ORIGINAL document,
never the rewritten one. Lines and columns are 1-indexed, offsets are
0-indexed.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from cssrecolor.color.model import NormalizedColor


# =============================================================================
# Format Identifiers
# =============================================================================


class FormatId(Enum):
    """
    Textual color notations known to the library.

    NAMED is a detection outcome only; it has no renderer, so asking
    for it falls back to the generic serialization.
    """
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    HWB = "hwb"
    LAB = "lab"
    LCH = "lch"
    OKLAB = "oklab"
    OKLCH = "oklch"
    NAMED = "named"

    @classmethod
    def lookup(cls, value: Union[FormatId, str, None]) -> Optional[FormatId]:
        """Resolve a member or its string value; None when unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


# Convertible formats, in display order
CONVERTIBLE_FORMATS: tuple[FormatId, ...] = (
    FormatId.HEX,
    FormatId.RGB,
    FormatId.HSL,
    FormatId.HWB,
    FormatId.LAB,
    FormatId.LCH,
    FormatId.OKLAB,
    FormatId.OKLCH,
)


class AlphaFormat(Enum):
    """How a translucent alpha channel is written."""
    DECIMAL = "decimal"        # / 0.5
    PERCENTAGE = "percentage"  # / 50%
    PRESERVE = "preserve"      # same output as DECIMAL


@dataclass(frozen=True, slots=True)
class FormatDefinition:
    """Human-facing description of a convertible format."""
    id: FormatId
    label: str
    example: str
    description: str

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "id": self.id.value,
            "label": self.label,
            "example": self.example,
            "description": self.description,
        }


COLOR_FORMATS: tuple[FormatDefinition, ...] = (
    FormatDefinition(FormatId.HEX, "HEX", "#ff5733", "Hexadecimal color notation"),
    FormatDefinition(FormatId.RGB, "RGB", "rgb(255, 87, 51)", "Red, Green, Blue values"),
    FormatDefinition(FormatId.HSL, "HSL", "hsl(11, 100%, 60%)", "Hue, Saturation, Lightness"),
    FormatDefinition(FormatId.HWB, "HWB", "hwb(11 20% 0%)", "Hue, Whiteness, Blackness"),
    FormatDefinition(FormatId.LAB, "LAB", "lab(62 58 49)", "CIE LAB color space"),
    FormatDefinition(FormatId.LCH, "LCH", "lch(62 76 40)", "Lightness, Chroma, Hue"),
    FormatDefinition(FormatId.OKLAB, "OKLAB", "oklab(0.68 0.13 0.11)", "OK perceptual LAB"),
    FormatDefinition(FormatId.OKLCH, "OKLCH", "oklch(0.68 0.17 40)", "OK perceptual LCH"),
)


# =============================================================================
# Options
# =============================================================================


@dataclass(frozen=True, slots=True)
class ConversionOptions:
    """
    Formatting options for rendered colors.

    Attributes:
        precision: Decimal digits for Lab/LCh/OKLab/OKLCh channels (>= 0).
            HSL/HWB percentages always use 1 digit, RGB is always integral.
        alpha_format: Alpha rendering for translucent colors. Accepts an
            AlphaFormat member or its string value.
    """
    precision: int = 2
    alpha_format: AlphaFormat = AlphaFormat.DECIMAL

    def __post_init__(self) -> None:
        """Normalize alpha_format and validate precision."""
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError(f"Precision must be an integer, got {self.precision!r}")
        if self.precision < 0:
            raise ValueError(f"Precision must be >= 0, got {self.precision}")
        if not isinstance(self.alpha_format, AlphaFormat):
            try:
                object.__setattr__(self, "alpha_format", AlphaFormat(self.alpha_format))
            except ValueError:
                raise ValueError(
                    f"Alpha format must be one of "
                    f"{[f.value for f in AlphaFormat]}, got {self.alpha_format!r}"
                ) from None

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"precision": self.precision, "alpha_format": self.alpha_format.value}

    @classmethod
    def from_dict(cls, data: dict) -> ConversionOptions:
        """Deserialize from dictionary; missing keys take their defaults."""
        return cls(
            precision=data.get("precision", 2),
            alpha_format=data.get("alpha_format", AlphaFormat.DECIMAL),
        )


# =============================================================================
# Single-Literal Results
# =============================================================================


@dataclass(frozen=True, slots=True)
class ParsedColor:
    """
    A single literal after detection and parsing.

    Attributes:
        color: Normalized color, None when the literal was rejected
        format: Detected notation (None for blank/unrecognized/named input)
        is_valid: True when color is present
        original: The input exactly as given
    """
    color: Optional[NormalizedColor]
    format: Optional[FormatId]
    is_valid: bool
    original: str


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """
    Outcome of converting one literal.

    value is "" whenever is_valid is False. format echoes the requested
    target (a FormatId, or the raw string when the target is unknown).
    """
    value: str
    format: Union[FormatId, str]
    is_valid: bool

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        fmt = self.format.value if isinstance(self.format, FormatId) else self.format
        return {"value": self.value, "format": fmt, "is_valid": self.is_valid}


# =============================================================================
# Document Results
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorMatch:
    """
    One color literal located in a document.

    Attributes:
        original: Matched text, verbatim
        start: 0-indexed offset in the original document
        length: Length of the matched text
        line: 1-indexed line of start
        column: 1-indexed column of start
        format: Grammar that matched the text
        converted: Replacement text ("" until the match is rewritten)
        converted_start: Offset of the replacement in the rewritten
            document (None until the match is rewritten)
    """
    original: str
    start: int
    length: int
    line: int
    column: int
    format: Optional[FormatId] = None
    converted: str = ""
    converted_start: Optional[int] = None

    @property
    def end(self) -> int:
        """Offset just past the match in the original document."""
        return self.start + self.length

    def with_conversion(self, converted: str, converted_start: int) -> ColorMatch:
        """Return a copy carrying its replacement text and new offset."""
        return replace(self, converted=converted, converted_start=converted_start)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "original": self.original,
            "converted": self.converted,
            "start": self.start,
            "length": self.length,
            "line": self.line,
            "column": self.column,
            "format": self.format.value if self.format is not None else None,
            "converted_start": self.converted_start,
        }


@dataclass(frozen=True, slots=True)
class ProcessingStats:
    """
    Counters for one document pass.

    A match that parses but renders identically to its source text is
    counted in neither converted nor failed, so converted + failed can
    be less than total.
    """
    total: int = 0
    converted: int = 0
    failed: int = 0

    def __post_init__(self) -> None:
        """Validate counter consistency."""
        if min(self.total, self.converted, self.failed) < 0:
            raise ValueError("Counters cannot be negative")
        if self.converted + self.failed > self.total:
            raise ValueError(
                f"converted + failed ({self.converted + self.failed}) "
                f"exceeds total ({self.total})"
            )

    @property
    def unchanged(self) -> int:
        """Matches that parsed but needed no rewrite."""
        return self.total - self.converted - self.failed

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"total": self.total, "converted": self.converted, "failed": self.failed}


@dataclass(frozen=True, slots=True)
class ProcessingResult:
    """
    Result of scanning and rewriting one document.

    Attributes:
        original: Input document, untouched
        converted: Rewritten document
        changes: Rewritten matches, ascending by original offset
        stats: Match counters
    """
    original: str
    converted: str
    changes: tuple[ColorMatch, ...] = field(default_factory=tuple)
    stats: ProcessingStats = field(default_factory=ProcessingStats)

    @property
    def changed(self) -> bool:
        """True when at least one literal was rewritten."""
        return bool(self.changes)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "original": self.original,
            "converted": self.converted,
            "changes": [c.to_dict() for c in self.changes],
            "stats": self.stats.to_dict(),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)
