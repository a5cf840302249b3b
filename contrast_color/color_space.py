"""
sRGB <-> CIE L*a*b* conversion.

All functions accept a single triple or an array of shape (..., 3), so a whole
palette can be converted in one call. RGB channels are floats in [0, 1].
"""

from typing import NamedTuple

import numpy as np


class RGBColor(NamedTuple):
    """sRGB color, channels in [0, 1]."""
    r: float
    g: float
    b: float


class LabColor(NamedTuple):
    """CIE L*a*b* color (D65)."""
    L: float
    a: float
    b: float


# RGB to XYZ conversion matrix (sRGB D65)
RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])
XYZ_TO_RGB = np.linalg.inv(RGB_TO_XYZ)

# D65 reference white
D65_WHITE = np.array([95.047, 100.000, 108.883])

DELTA = 6 / 29


def srgb_to_linear(rgb):
    """Remove sRGB gamma companding."""
    rgb = np.asarray(rgb, dtype=float)
    # np.where evaluates both branches; clamp so the power branch stays real
    curve = ((np.maximum(rgb, 0.04045) + 0.055) / 1.055) ** 2.4
    return np.where(rgb <= 0.04045, rgb / 12.92, curve)


def linear_to_srgb(linear):
    """Apply sRGB gamma companding."""
    linear = np.asarray(linear, dtype=float)
    curve = 1.055 * np.maximum(linear, 0.0031308) ** (1 / 2.4) - 0.055
    return np.where(linear <= 0.0031308, linear * 12.92, curve)


def rgb_to_xyz(rgb):
    """Convert RGB (0-1) to XYZ color space (Y of white = 100)."""
    return srgb_to_linear(rgb) @ RGB_TO_XYZ.T * 100


def xyz_to_lab(xyz):
    """Convert XYZ to LAB color space."""
    t = np.asarray(xyz, dtype=float) / D65_WHITE
    f = np.where(t > DELTA ** 3, np.cbrt(t), t / (3 * DELTA ** 2) + 4 / 29)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    L = 116 * fy - 16
    a = 500 * (fx - fy)
    b = 200 * (fy - fz)
    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab):
    """Convert LAB back to XYZ."""
    lab = np.asarray(lab, dtype=float)
    fy = (lab[..., 0] + 16) / 116
    fx = fy + lab[..., 1] / 500
    fz = fy - lab[..., 2] / 200
    f = np.stack([fx, fy, fz], axis=-1)
    t = np.where(f > DELTA, f ** 3, 3 * DELTA ** 2 * (f - 4 / 29))
    return t * D65_WHITE


def xyz_to_rgb(xyz):
    """Convert XYZ back to RGB (0-1). Out-of-gamut values are not clipped."""
    linear = (np.asarray(xyz, dtype=float) / 100) @ XYZ_TO_RGB.T
    return linear_to_srgb(linear)


def rgb_to_lab(rgb):
    """Convert RGB (0-1) to LAB color space."""
    return xyz_to_lab(rgb_to_xyz(rgb))


def lab_to_rgb(lab):
    """Convert LAB to RGB (0-1)."""
    return xyz_to_rgb(lab_to_xyz(lab))


def to_lab(rgb):
    """Convert a single RGB triple to a LabColor."""
    return LabColor(*(float(v) for v in rgb_to_lab(rgb)))


def from_lab(lab):
    """Convert a single LabColor back to an RGBColor."""
    return RGBColor(*(float(v) for v in lab_to_rgb(lab)))
