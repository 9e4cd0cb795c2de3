# Copyright (c) 2026 Cssrecolor
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion hub: gamma-encoded sRGB (extended, not clamped).

    HSL / HWB  ←→  sRGB  ←→  Linear RGB  ←→  OKLab  ←→  OKLCH
                                  ↕
                              XYZ (D65)  ←→  XYZ (D50)  ←→  Lab  ←→  LCh

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- CSS Color 4 sample code: https://www.w3.org/TR/css-color-4/#color-conversion-code

All functions accept arrays of shape (..., 3) and are pure NumPy.
Out-of-gamut values pass through untouched; clamping is the caller's
decision (hex and rgb output clamp, everything else does not).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert gamma-encoded sRGB to linear RGB.

    The transfer curve is mirrored for negative values so that
    out-of-gamut colors survive a round trip:
    - |value| <= 0.04045: value / 12.92
    - |value| > 0.04045: sign * ((|value| + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    magnitude = np.abs(srgb)
    linear = np.where(
        magnitude <= 0.04045,
        srgb / 12.92,
        np.sign(srgb) * np.power((magnitude + 0.055) / 1.055, 2.4)
    )
    return linear


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to gamma-encoded sRGB.

    Inverse of srgb_to_linear. Not clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    magnitude = np.abs(linear)
    srgb = np.where(
        magnitude <= 0.0031308,
        linear * 12.92,
        np.sign(linear) * (1.055 * np.power(magnitude, 1.0 / 2.4) - 0.055)
    )
    return srgb


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Inverse matrices
_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    # RGB to LMS
    lms = np.einsum('...j,ij->...i', rgb, _M1)

    # Cube root (handle negative values for out-of-gamut colors)
    lms_cbrt = np.cbrt(lms)

    # LMS to OKLab
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values
    """
    lab = np.asarray(lab, dtype=np.float64)

    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    lms = lms_cbrt ** 3
    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# Linear RGB ↔ XYZ ↔ CIE Lab (D50)
# =============================================================================

# Linear sRGB to XYZ, D65 white
_SRGB_TO_XYZ = np.array([
    [0.41239079926595934, 0.357584339383878, 0.1804807884018343],
    [0.21263900587151027, 0.715168678767756, 0.07219231536073371],
    [0.01933081871559182, 0.11919477979462598, 0.9505321522496607],
], dtype=np.float64)

# Bradford chromatic adaptation, D65 to D50
_D65_TO_D50 = np.array([
    [1.0479297925449969, 0.022946870601609652, -0.05019226628920524],
    [0.02962780877005599, 0.9904344267538799, -0.017073799063418826],
    [-0.009243040646204504, 0.015055191490298152, 0.7518742814281371],
], dtype=np.float64)

_XYZ_TO_SRGB = np.linalg.inv(_SRGB_TO_XYZ)
_D50_TO_D65 = np.linalg.inv(_D65_TO_D50)

# D50 reference white
D50_WHITE = np.array([
    0.3457 / 0.3585,
    1.0,
    (1.0 - 0.3457 - 0.3585) / 0.3585,
], dtype=np.float64)

_LAB_EPSILON = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


def linear_rgb_to_xyz_d50(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert linear sRGB to CIE XYZ adapted to the D50 white point."""
    rgb = np.asarray(rgb, dtype=np.float64)
    xyz_d65 = np.einsum('...j,ij->...i', rgb, _SRGB_TO_XYZ)
    return np.einsum('...j,ij->...i', xyz_d65, _D65_TO_D50)


def xyz_d50_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert D50 CIE XYZ to linear sRGB."""
    xyz = np.asarray(xyz, dtype=np.float64)
    xyz_d65 = np.einsum('...j,ij->...i', xyz, _D50_TO_D65)
    return np.einsum('...j,ij->...i', xyz_d65, _XYZ_TO_SRGB)


def xyz_d50_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert D50 CIE XYZ to CIE Lab.

    Returns:
        Array of shape (..., 3) with L in [0, 100] for in-gamut input
    """
    scaled = np.asarray(xyz, dtype=np.float64) / D50_WHITE
    f = np.where(
        scaled > _LAB_EPSILON,
        np.cbrt(scaled),
        (_LAB_KAPPA * scaled + 16.0) / 116.0
    )
    L = 116.0 * f[..., 1] - 16.0
    a = 500.0 * (f[..., 0] - f[..., 1])
    b = 200.0 * (f[..., 1] - f[..., 2])
    return np.stack([L, a, b], axis=-1)


def lab_to_xyz_d50(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIE Lab to D50 CIE XYZ."""
    lab = np.asarray(lab, dtype=np.float64)
    L = lab[..., 0]
    fy = (L + 16.0) / 116.0
    fx = lab[..., 1] / 500.0 + fy
    fz = fy - lab[..., 2] / 200.0

    x = np.where(fx ** 3 > _LAB_EPSILON, fx ** 3, (116.0 * fx - 16.0) / _LAB_KAPPA)
    y = np.where(L > _LAB_KAPPA * _LAB_EPSILON, fy ** 3, L / _LAB_KAPPA)
    z = np.where(fz ** 3 > _LAB_EPSILON, fz ** 3, (116.0 * fz - 16.0) / _LAB_KAPPA)
    return np.stack([x, y, z], axis=-1) * D50_WHITE


# =============================================================================
# Cartesian ↔ Polar (Lab ↔ LCh, OKLab ↔ OKLCH)
# =============================================================================


def lab_to_polar(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert a Lab-like triple to its cylindrical form (L, C, H).

    Works for both CIE Lab → LCh and OKLab → OKLCH.
    H is in degrees [0, 360).
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0

    return np.stack([L, C, H], axis=-1)


def polar_to_lab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert a cylindrical (L, C, H) triple back to Lab form.

    H is in degrees.
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# sRGB ↔ HSL / HWB
# =============================================================================


def _hue_from_srgb(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Hue angle in degrees [0, 360) shared by HSL, HSV and HWB."""
    r, g, b = srgb[..., 0], srgb[..., 1], srgb[..., 2]
    high = np.max(srgb, axis=-1)
    delta = high - np.min(srgb, axis=-1)
    safe = np.where(delta == 0, 1.0, delta)

    hue = np.where(
        high == r,
        ((g - b) / safe) % 6.0,
        np.where(high == g, (b - r) / safe + 2.0, (r - g) / safe + 4.0)
    )
    return np.where(delta == 0, 0.0, hue * 60.0 % 360.0)


def srgb_to_hsl(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB to HSL.

    Returns:
        Array of shape (..., 3): H in degrees, S and L in [0, 1].
        Achromatic input yields H = 0.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    high = np.max(srgb, axis=-1)
    low = np.min(srgb, axis=-1)
    delta = high - low

    L = (high + low) / 2.0
    denominator = 1.0 - np.abs(high + low - 1.0)
    S = np.where(
        (delta == 0) | (denominator == 0),
        0.0,
        delta / np.where(denominator == 0, 1.0, denominator)
    )
    return np.stack([_hue_from_srgb(srgb), S, L], axis=-1)


def hsl_to_srgb(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert HSL (H in degrees, S and L in [0, 1]) to sRGB."""
    hsl = np.asarray(hsl, dtype=np.float64)
    H = hsl[..., 0] % 360.0
    S = hsl[..., 1]
    L = hsl[..., 2]

    amplitude = S * np.minimum(L, 1.0 - L)

    def channel(n: float) -> NDArray[np.float64]:
        k = (n + H / 30.0) % 12.0
        step = np.maximum(-1.0, np.minimum(np.minimum(k - 3.0, 9.0 - k), 1.0))
        return L - amplitude * step

    return np.stack([channel(0.0), channel(8.0), channel(4.0)], axis=-1)


def srgb_to_hwb(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB to HWB.

    Returns:
        Array of shape (..., 3): H in degrees, W and B in [0, 1]
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    W = np.min(srgb, axis=-1)
    B = 1.0 - np.max(srgb, axis=-1)
    return np.stack([_hue_from_srgb(srgb), W, B], axis=-1)


def hwb_to_srgb(hwb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HWB to sRGB.

    When whiteness + blackness >= 1 the result is the gray
    W / (W + B) on every channel.
    """
    hwb = np.asarray(hwb, dtype=np.float64)
    W = hwb[..., 1]
    B = hwb[..., 2]
    total = W + B

    pure = hsl_to_srgb(np.stack([hwb[..., 0], np.ones_like(W), np.full_like(W, 0.5)], axis=-1))
    mixed = pure * (1.0 - W - B)[..., None] + W[..., None]
    gray = (W / np.where(total == 0, 1.0, total))[..., None]
    return np.where((total >= 1.0)[..., None], np.broadcast_to(gray, mixed.shape), mixed)


# =============================================================================
# Convenience: sRGB ↔ Lab / OKLab (full chain)
# =============================================================================


def srgb_to_lab(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB to CIE Lab (D50).

    Full chain: sRGB → Linear RGB → XYZ D65 → XYZ D50 → Lab
    """
    return xyz_d50_to_lab(linear_rgb_to_xyz_d50(srgb_to_linear(srgb)))


def lab_to_srgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE Lab (D50) to sRGB.

    Full chain: Lab → XYZ D50 → XYZ D65 → Linear RGB → sRGB
    """
    return linear_to_srgb(xyz_d50_to_linear_rgb(lab_to_xyz_d50(lab)))


def srgb_to_oklab(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB to OKLab.

    Full chain: sRGB → Linear RGB → OKLab
    """
    return linear_rgb_to_oklab(srgb_to_linear(srgb))


def oklab_to_srgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to sRGB.

    Full chain: OKLab → Linear RGB → sRGB
    """
    return linear_to_srgb(oklab_to_linear_rgb(lab))
