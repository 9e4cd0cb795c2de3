# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""
CSS color literal parsing.

Turns one literal into a NormalizedColor, or None when the text is not
a color. Supported: named colors, transparent, hex 3/4/6/8, rgb/rgba and
hsl/hsla (legacy commas or modern spaces, alpha after comma or slash),
hwb, lab, lch, oklab, oklch (slash alpha), the `none` keyword and the
deg/grad/rad/turn angle units. Excludes currentColor and color().

Percentages follow the CSS Color 4 reference ranges:
- rgb channels: 100% = 255
- lab/lch L: 100% = 100, lab a/b: 100% = 125, lch C: 100% = 150
- oklab/oklch L: 100% = 1, oklab a/b and oklch C: 100% = 0.4
"""

from __future__ import annotations

import math
import re
from typing import NamedTuple, Optional

from cssrecolor.color.model import NormalizedColor
from cssrecolor.color.named import NAMED_COLORS


# Regular expression building blocks
_NUM = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?"
_TOKEN_RE = re.compile(rf"^(?:({_NUM})(%|deg|grad|rad|turn)?|(none))$", re.IGNORECASE)

_HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_FUNCTION_RE = re.compile(
    r"^(rgba?|hsla?|hwb|lab|lch|oklab|oklch)\(\s*(.*?)\s*\)$",
    re.IGNORECASE | re.DOTALL,
)
_LEGACY_SPLIT_RE = re.compile(r"\s*,\s*|\s+")
_MODERN_SPLIT_RE = re.compile(r"\s+")

# Functions that accept comma-separated channels and a comma before alpha
_LEGACY_CAPABLE = frozenset({"rgb", "hsl"})

_ANGLE_TO_DEG = {
    "deg": 1.0,
    "grad": 0.9,
    "rad": 180.0 / math.pi,
    "turn": 360.0,
}


class _Token(NamedTuple):
    """One channel token: a number with an optional unit, or `none`."""

    value: float
    unit: str

    @property
    def is_none(self) -> bool:
        return self.unit == "none"

    @property
    def is_percent(self) -> bool:
        return self.unit == "%"


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


def _tokenize(text: str) -> Optional[_Token]:
    m = _TOKEN_RE.match(text)
    if not m:
        return None
    if m.group(3):
        return _Token(0.0, "none")
    value = float(m.group(1))
    if not math.isfinite(value):
        return None
    return _Token(value, (m.group(2) or "").lower())


# =============================================================================
# Channel interpretation
# =============================================================================


def _scalar(token: _Token, percent_scale: float) -> Optional[float]:
    """Plain number or percentage (100% = percent_scale); no angle units."""
    if token.is_none:
        return 0.0
    if token.is_percent:
        return token.value / 100.0 * percent_scale
    if token.unit:
        return None
    return token.value


def _hue(token: _Token) -> Optional[float]:
    """Angle in degrees normalized to [0, 360); percentages are invalid."""
    if token.is_none:
        return 0.0
    if token.is_percent:
        return None
    return (token.value * _ANGLE_TO_DEG.get(token.unit, 1.0)) % 360.0


def _alpha(token: _Token) -> Optional[float]:
    value = _scalar(token, 1.0)
    return None if value is None else clamp(value, 0.0, 1.0)


def _rgb(tokens: list[_Token]) -> Optional[tuple[float, float, float]]:
    values = []
    for token in tokens:
        if token.is_percent:
            v = token.value / 100.0
        else:
            scalar = _scalar(token, 255.0)
            if scalar is None:
                return None
            v = scalar / 255.0
        values.append(clamp(v, 0.0, 1.0))
    return tuple(values)


def _cylindrical_percentages(tokens: list[_Token]) -> Optional[tuple[float, float, float]]:
    """hsl and hwb: hue, then two channels written as percentages."""
    h = _hue(tokens[0])
    s = _scalar(tokens[1], 100.0)
    l = _scalar(tokens[2], 100.0)
    if h is None or s is None or l is None:
        return None
    return h, clamp(s / 100.0, 0.0, 1.0), clamp(l / 100.0, 0.0, 1.0)


def _lab_like(tokens: list[_Token], l_max: float, ab_scale: float) -> Optional[tuple[float, float, float]]:
    L = _scalar(tokens[0], l_max)
    a = _scalar(tokens[1], ab_scale)
    b = _scalar(tokens[2], ab_scale)
    if L is None or a is None or b is None:
        return None
    return clamp(L, 0.0, l_max), a, b


def _lch_like(tokens: list[_Token], l_max: float, c_scale: float) -> Optional[tuple[float, float, float]]:
    L = _scalar(tokens[0], l_max)
    C = _scalar(tokens[1], c_scale)
    h = _hue(tokens[2])
    if L is None or C is None or h is None:
        return None
    return clamp(L, 0.0, l_max), max(C, 0.0), h


_CHANNEL_READERS = {
    "rgb": _rgb,
    "hsl": _cylindrical_percentages,
    "hwb": _cylindrical_percentages,
    "lab": lambda t: _lab_like(t, 100.0, 125.0),
    "lch": lambda t: _lch_like(t, 100.0, 150.0),
    "oklab": lambda t: _lab_like(t, 1.0, 0.4),
    "oklch": lambda t: _lch_like(t, 1.0, 0.4),
}


# =============================================================================
# Literal forms
# =============================================================================


def parse_hex(s: str) -> Optional[NormalizedColor]:
    """Parse a #rgb, #rgba, #rrggbb or #rrggbbaa literal."""
    m = _HEX_RE.match(s)
    if not m:
        return None
    h = m.group(1)
    if len(h) in (3, 4):
        h = "".join(ch * 2 for ch in h)
    r, g, b = (int(h[i:i + 2], 16) / 255.0 for i in (0, 2, 4))
    alpha = int(h[6:8], 16) / 255.0 if len(h) == 8 else None
    return NormalizedColor("rgb", (r, g, b), alpha)


def parse_named(s: str) -> Optional[NormalizedColor]:
    """Parse a CSS named color or `transparent`."""
    name = s.lower()
    if name == "transparent":
        return NormalizedColor("rgb", (0.0, 0.0, 0.0), 0.0)
    hex_value = NAMED_COLORS.get(name)
    if hex_value is None:
        return None
    return parse_hex(hex_value)


def parse_function(s: str) -> Optional[NormalizedColor]:
    """Parse a functional notation such as rgb(), hsla() or oklch()."""
    m = _FUNCTION_RE.match(s)
    if not m:
        return None
    name = m.group(1).lower()
    mode = name.rstrip("a") if name in ("rgba", "hsla") else name
    body = m.group(2)

    alpha_text = None
    if "/" in body:
        body, _, alpha_text = body.partition("/")
        if "/" in alpha_text:
            return None
        body = body.strip()
        alpha_text = alpha_text.strip()

    splitter = _LEGACY_SPLIT_RE if mode in _LEGACY_CAPABLE else _MODERN_SPLIT_RE
    parts = splitter.split(body) if body else []
    if alpha_text is None and mode in _LEGACY_CAPABLE and len(parts) == 4 and "," in body:
        alpha_text = parts.pop()
    if len(parts) != 3:
        return None

    tokens = [_tokenize(part) for part in parts]
    if any(token is None for token in tokens):
        return None
    channels = _CHANNEL_READERS[mode](tokens)
    if channels is None:
        return None

    alpha = None
    if alpha_text is not None:
        alpha_token = _tokenize(alpha_text)
        if alpha_token is None:
            return None
        alpha = _alpha(alpha_token)
        if alpha is None:
            return None
    return NormalizedColor(mode, channels, alpha)


# =============================================================================
# Top-level parse
# =============================================================================


def parse_css_color(text: str) -> Optional[NormalizedColor]:
    """
    Parse any supported CSS color literal.

    Args:
        text: The literal; surrounding whitespace is ignored

    Returns:
        NormalizedColor, or None for blank or unrecognized text.
        Never raises for malformed input.
    """
    if not isinstance(text, str):
        return None
    s = text.strip()
    if not s:
        return None

    # Fast path: hex
    if s.startswith("#"):
        return parse_hex(s)

    if "(" in s:
        return parse_function(s)

    return parse_named(s)
