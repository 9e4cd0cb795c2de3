# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""
Textual rendering of normalized colors.

Numeric rule: round to the requested digits (half away from zero, on
the exact binary value), then drop trailing zeros and a trailing point.
HSL/HWB hue and percentages always use 1 digit, RGB channels are
integers 0-255, Lab/LCh/OKLab/OKLCh channels use options.precision.

Alpha rule: opaque colors (alpha missing or >= 1) get no alpha clause
in any format.

Templates:
    hex     #rrggbb / #rrggbbaa
    rgb     rgb(R, G, B)      rgba(R, G, B / A)
    hsl     hsl(H, S%, L%)    hsla(H, S%, L% / A)
    hwb     hwb(H W% B%)      hwb(H W% B% / A)
    lab     lab(L A B)        lab(L A B / A)
    lch, oklab, oklch follow lab
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Callable, Optional, Union

from cssrecolor.color import NormalizedColor
from cssrecolor.schema import (
    CONVERTIBLE_FORMATS,
    AlphaFormat,
    ConversionOptions,
    FormatId,
)


# =============================================================================
# Number Formatting
# =============================================================================

def format_number(value: Optional[float], precision: int) -> str:
    """
    Round to `precision` digits and strip trailing zeros.

    Examples:
        >>> format_number(60.0, 1)
        '60'
        >>> format_number(11.50, 2)
        '11.5'

    Missing or non-finite values render as "0", and so does negative zero.
    """
    if value is None or not math.isfinite(value):
        return "0"
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-precision)
    # Room for every integer digit plus the requested fraction digits
    context = Context(prec=max(28, exact.adjusted() + precision + 2))
    text = format(exact.quantize(quantum, rounding=ROUND_HALF_UP, context=context), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def round_channel(value: Optional[float]) -> int:
    """Scale a [0, 1] channel to 0-255, rounding half up and clamping."""
    if value is None or not math.isfinite(value):
        return 0
    return max(0, min(255, math.floor(value * 255 + 0.5)))


def format_alpha(alpha: Optional[float], alpha_format: AlphaFormat = AlphaFormat.DECIMAL) -> str:
    """
    Alpha clause including its leading " / ", or "" for opaque colors.

    PERCENTAGE renders alpha x 100 with 1 digit and a `%`; DECIMAL and
    PRESERVE render alpha with 2 digits.
    """
    if alpha is None or alpha >= 1:
        return ""
    if alpha_format is AlphaFormat.PERCENTAGE:
        return f" / {format_number(alpha * 100, 1)}%"
    return f" / {format_number(alpha, 2)}"


# =============================================================================
# Per-Format Renderers
# =============================================================================


def _render_hex(color: NormalizedColor, options: ConversionOptions) -> str:
    rgb = color.to("rgb")
    digits = "".join(f"{round_channel(v):02x}" for v in rgb.values)
    if not color.is_opaque:
        digits += f"{round_channel(color.alpha):02x}"
    return f"#{digits}"


def _render_rgb(color: NormalizedColor, options: ConversionOptions) -> str:
    rgb = color.to("rgb")
    r, g, b = (round_channel(v) for v in rgb.values)
    alpha = format_alpha(rgb.alpha, options.alpha_format)
    if alpha:
        return f"rgba({r}, {g}, {b}{alpha})"
    return f"rgb({r}, {g}, {b})"


def _render_hsl(color: NormalizedColor, options: ConversionOptions) -> str:
    hsl = color.to("hsl")
    h = format_number(hsl["h"], 1)
    s = format_number(hsl["s"] * 100, 1)
    l = format_number(hsl["l"] * 100, 1)
    alpha = format_alpha(hsl.alpha, options.alpha_format)
    if alpha:
        return f"hsla({h}, {s}%, {l}%{alpha})"
    return f"hsl({h}, {s}%, {l}%)"


def _render_hwb(color: NormalizedColor, options: ConversionOptions) -> str:
    hwb = color.to("hwb")
    h = format_number(hwb["h"], 1)
    w = format_number(hwb["w"] * 100, 1)
    b = format_number(hwb["b"] * 100, 1)
    alpha = format_alpha(hwb.alpha, options.alpha_format)
    return f"hwb({h} {w}% {b}%{alpha})"


def _space_separated(space: str) -> Callable[[NormalizedColor, ConversionOptions], str]:
    """Renderer for lab/lch/oklab/oklch: three channels at options.precision."""

    def render(color: NormalizedColor, options: ConversionOptions) -> str:
        record = color.to(space)
        channels = " ".join(format_number(v, options.precision) for v in record.values)
        alpha = format_alpha(record.alpha, options.alpha_format)
        return f"{space}({channels}{alpha})"

    render.__name__ = f"_render_{space}"
    return render


_RENDERERS: dict[FormatId, Callable[[NormalizedColor, ConversionOptions], str]] = {
    FormatId.HEX: _render_hex,
    FormatId.RGB: _render_rgb,
    FormatId.HSL: _render_hsl,
    FormatId.HWB: _render_hwb,
    FormatId.LAB: _space_separated("lab"),
    FormatId.LCH: _space_separated("lch"),
    FormatId.OKLAB: _space_separated("oklab"),
    FormatId.OKLCH: _space_separated("oklch"),
}


# =============================================================================
# Public API
# =============================================================================


def convert_to_format(
    color: NormalizedColor,
    target_format: Union[FormatId, str],
    options: Optional[ConversionOptions] = None,
) -> str:
    """
    Render a color in the target notation.

    Args:
        color: Parsed color
        target_format: FormatId or its string value. Unknown targets
            (including "named") fall back to color.to_css().
        options: Formatting options (defaults if None)

    Returns:
        Canonical text for the target format

    Example:
        >>> from cssrecolor.color import parse_css_color
        >>> convert_to_format(parse_css_color("#ff5733"), "rgb")
        'rgb(255, 87, 51)'
    """
    opts = options or ConversionOptions()
    renderer = _RENDERERS.get(FormatId.lookup(target_format))
    if renderer is None:
        return color.to_css()
    return renderer(color, opts)


def get_all_formats(
    color: NormalizedColor,
    options: Optional[ConversionOptions] = None,
) -> dict[FormatId, str]:
    """Render one color in every convertible format, in display order."""
    opts = options or ConversionOptions()
    return {fmt: _RENDERERS[fmt](color, opts) for fmt in CONVERTIBLE_FORMATS}
