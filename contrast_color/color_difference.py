"""
CIEDE2000 color difference.

Reference: G. Sharma, W. Wu, E. N. Dalal, "The CIEDE2000 Color-Difference
Formula: Implementation Notes, Supplementary Test Data, and Mathematical
Observations", Color Research & Application 30(1), 2005.
"""

import numpy as np

TWO_PI = 2 * np.pi
POW25_7 = 25 ** 7


def _hue_angle(b, a_prime):
    return np.arctan2(b, a_prime) % TWO_PI


def delta_e_cie2000(lab1, lab2):
    """Calculate CIEDE2000 color difference (kL = kC = kH = 1)."""
    L1, a1, b1 = (float(v) for v in lab1)
    L2, a2, b2 = (float(v) for v in lab2)

    # Chroma correction of the a* axis
    C_bar = (np.hypot(a1, b1) + np.hypot(a2, b2)) / 2
    G = 0.5 * (1 - np.sqrt(C_bar ** 7 / (C_bar ** 7 + POW25_7)))

    a1_prime = a1 * (1 + G)
    a2_prime = a2 * (1 + G)
    C1_prime = np.hypot(a1_prime, b1)
    C2_prime = np.hypot(a2_prime, b2)
    h1_prime = _hue_angle(b1, a1_prime)
    h2_prime = _hue_angle(b2, a2_prime)
    achromatic = C1_prime * C2_prime == 0

    # Differences
    delta_L_prime = L2 - L1
    delta_C_prime = C2_prime - C1_prime

    delta_h = h2_prime - h1_prime
    if achromatic:
        delta_h_prime = 0.0
    elif delta_h > np.pi:
        delta_h_prime = delta_h - TWO_PI
    elif delta_h < -np.pi:
        delta_h_prime = delta_h + TWO_PI
    else:
        delta_h_prime = delta_h
    delta_H_prime = 2 * np.sqrt(C1_prime * C2_prime) * np.sin(delta_h_prime / 2)

    # Means
    L_bar_prime = (L1 + L2) / 2
    C_bar_prime = (C1_prime + C2_prime) / 2

    h_sum = h1_prime + h2_prime
    if achromatic:
        h_bar_prime = h_sum
    elif abs(h1_prime - h2_prime) <= np.pi:
        h_bar_prime = h_sum / 2
    elif h_sum < TWO_PI:
        h_bar_prime = (h_sum + TWO_PI) / 2
    else:
        h_bar_prime = (h_sum - TWO_PI) / 2

    T = (1 - 0.17 * np.cos(h_bar_prime - np.radians(30)) +
         0.24 * np.cos(2 * h_bar_prime) +
         0.32 * np.cos(3 * h_bar_prime + np.radians(6)) -
         0.20 * np.cos(4 * h_bar_prime - np.radians(63)))

    delta_theta = np.radians(30) * np.exp(-((np.degrees(h_bar_prime) - 275) / 25) ** 2)
    R_C = 2 * np.sqrt(C_bar_prime ** 7 / (C_bar_prime ** 7 + POW25_7))

    S_L = 1 + (0.015 * (L_bar_prime - 50) ** 2) / np.sqrt(20 + (L_bar_prime - 50) ** 2)
    S_C = 1 + 0.045 * C_bar_prime
    S_H = 1 + 0.015 * C_bar_prime * T
    R_T = -np.sin(2 * delta_theta) * R_C

    lightness = delta_L_prime / S_L
    chroma = delta_C_prime / S_C
    hue = delta_H_prime / S_H
    total = lightness ** 2 + chroma ** 2 + hue ** 2 + R_T * chroma * hue
    return float(np.sqrt(max(total, 0.0)))
