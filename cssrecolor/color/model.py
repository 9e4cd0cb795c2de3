# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""
Normalized color value and per-space channel views.

A NormalizedColor is tagged by the space it was written in and keeps
that space's channels verbatim. Views into other spaces are computed on
demand through the colorspace module.

Channel units per space:
- rgb:   r, g, b in [0, 1]
- hsl:   h in degrees, s and l in [0, 1]
- hwb:   h in degrees, w and b in [0, 1]
- lab:   CIE Lab D50, L in [0, 100]
- lch:   CIE LCh D50, L in [0, 100], h in degrees
- oklab: L in [0, 1]
- oklch: L in [0, 1], h in degrees
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np
from numpy.typing import NDArray

from cssrecolor.color import colorspace


SPACES: tuple[str, ...] = ("rgb", "hsl", "hwb", "lab", "lch", "oklab", "oklch")

CHANNEL_NAMES: dict[str, tuple[str, str, str]] = {
    "rgb": ("r", "g", "b"),
    "hsl": ("h", "s", "l"),
    "hwb": ("h", "w", "b"),
    "lab": ("l", "a", "b"),
    "lch": ("l", "c", "h"),
    "oklab": ("l", "a", "b"),
    "oklch": ("l", "c", "h"),
}

# Below these values a hue is meaningless: chroma for the polar spaces,
# saturation (hsl) or 1 - whiteness - blackness (hwb) for the others
_ACHROMATIC_THRESHOLD = {"hsl": 1e-7, "hwb": 1e-7, "lch": 1e-3, "oklch": 4e-6}


def _lch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    return colorspace.lab_to_srgb(colorspace.polar_to_lab(lch))


def _oklch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    return colorspace.oklab_to_srgb(colorspace.polar_to_lab(lch))


def _srgb_to_lch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    return colorspace.lab_to_polar(colorspace.srgb_to_lab(srgb))


def _srgb_to_oklch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    return colorspace.lab_to_polar(colorspace.srgb_to_oklab(srgb))


_TO_SRGB: dict[str, Callable[[NDArray[np.float64]], NDArray[np.float64]]] = {
    "rgb": lambda values: values,
    "hsl": colorspace.hsl_to_srgb,
    "hwb": colorspace.hwb_to_srgb,
    "lab": colorspace.lab_to_srgb,
    "lch": _lch_to_srgb,
    "oklab": colorspace.oklab_to_srgb,
    "oklch": _oklch_to_srgb,
}

_FROM_SRGB: dict[str, Callable[[NDArray[np.float64]], NDArray[np.float64]]] = {
    "rgb": lambda values: values,
    "hsl": colorspace.srgb_to_hsl,
    "hwb": colorspace.srgb_to_hwb,
    "lab": colorspace.srgb_to_lab,
    "lch": _srgb_to_lch,
    "oklab": colorspace.srgb_to_oklab,
    "oklch": _srgb_to_oklch,
}

# Pairs converted without leaving their family
_DIRECT = {
    ("lab", "lch"): colorspace.lab_to_polar,
    ("lch", "lab"): colorspace.polar_to_lab,
    ("oklab", "oklch"): colorspace.lab_to_polar,
    ("oklch", "oklab"): colorspace.polar_to_lab,
}


@dataclass(frozen=True, slots=True)
class ChannelRecord:
    """
    Channel values of a color projected into one space.

    Attributes:
        space: Space name (see SPACES)
        values: Three channels in CHANNEL_NAMES order. A hue is None
            when the color is achromatic in this space.
        alpha: Alpha in [0, 1], None when the source gave none
    """
    space: str
    values: tuple[Optional[float], float, float]
    alpha: Optional[float] = None

    @property
    def names(self) -> tuple[str, str, str]:
        """Channel names for this space."""
        return CHANNEL_NAMES[self.space]

    def __getitem__(self, name: str) -> Optional[float]:
        """Look up a channel by name, e.g. record["h"]."""
        try:
            return self.values[self.names.index(name)]
        except ValueError:
            raise KeyError(f"No channel '{name}' in {self.space}") from None

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = dict(zip(self.names, self.values))
        d["alpha"] = self.alpha
        return d


@dataclass(frozen=True, slots=True)
class NormalizedColor:
    """
    A parsed color, tagged by its originating space.

    Attributes:
        mode: Originating space (see SPACES)
        channels: Channel values in that space's native units
        alpha: Alpha in [0, 1]; None when the literal carried no alpha
    """
    mode: str
    channels: tuple[float, float, float]
    alpha: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate mode, arity and alpha range."""
        if self.mode not in SPACES:
            raise ValueError(f"Unknown color space '{self.mode}'")
        if len(self.channels) != 3:
            raise ValueError(f"Expected 3 channels, got {len(self.channels)}")
        if self.alpha is not None and not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Alpha must be 0-1, got {self.alpha}")

    @property
    def is_opaque(self) -> bool:
        """True when no alpha is given or alpha >= 1."""
        return self.alpha is None or self.alpha >= 1.0

    def to(self, space: str) -> ChannelRecord:
        """
        Project this color into another space.

        Same-space requests return the stored channels untouched.
        Lab ↔ LCh and OKLab ↔ OKLCH convert directly; everything else
        goes through extended sRGB.

        Raises:
            ValueError: If space is not one of SPACES
        """
        if space not in SPACES:
            raise ValueError(f"Unknown color space '{space}'")
        if space == self.mode:
            return ChannelRecord(space, tuple(self.channels), self.alpha)

        source = np.array(self.channels, dtype=np.float64)
        direct = _DIRECT.get((self.mode, space))
        if direct is not None:
            converted = direct(source)
        else:
            converted = _FROM_SRGB[space](_TO_SRGB[self.mode](source))

        values = [float(v) for v in converted]
        if not _has_hue(space, values):
            hue_index = CHANNEL_NAMES[space].index("h")
            values[hue_index] = None
        return ChannelRecord(space, tuple(values), self.alpha)

    def to_css(self) -> str:
        """
        Generic modern CSS serialization in the color's own space.

        rgb colors are written as color(srgb r g b).
        """
        c0, c1, c2 = (_css_number(v) for v in self.channels)
        if self.mode == "rgb":
            body = f"color(srgb {c0} {c1} {c2}"
        elif self.mode in ("hsl", "hwb"):
            c1 = _css_number(self.channels[1] * 100)
            c2 = _css_number(self.channels[2] * 100)
            body = f"{self.mode}({c0} {c1}% {c2}%"
        else:
            body = f"{self.mode}({c0} {c1} {c2}"
        if not self.is_opaque:
            body += f" / {_css_number(self.alpha)}"
        return body + ")"


def _has_hue(space: str, values: list) -> bool:
    """False when the projected color has no meaningful hue."""
    threshold = _ACHROMATIC_THRESHOLD.get(space)
    if threshold is None:
        return True
    if space == "hwb":
        return 1.0 - values[1] - values[2] >= threshold
    return abs(values[1]) >= threshold


def _css_number(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text
