"""
Pick the most visually distinct color from a candidate palette.

    >>> from contrast_color import ContrastColorPicker, ContrastConfig
    >>> picker = ContrastColorPicker(ContrastConfig(candidates=("black", "white")))
    >>> picker.contrast_color("#ff00ff")
    '#000000'
"""

from .caches import CandidateLabCache, ResultCache
from .color_difference import delta_e_cie2000
from .color_space import LabColor, RGBColor, from_lab, lab_to_rgb, rgb_to_lab, to_lab
from .errors import ContrastColorError, EmptyCandidateSet, InvalidColorInput, UnknownPalette
from .palettes import BASIC_COLORS, MATERIAL_COLORS, PALETTES, get_palette
from .picker import (
    ContrastColorPicker,
    ContrastConfig,
    contrast_color,
    get_default_picker,
    reset_default_picker,
)
from .resolver import is_hex, resolve_color, rgb_to_hex
from .selector import format_color, rank_candidates, select_best

__version__ = "0.1.0"

__all__ = [
    "BASIC_COLORS",
    "CandidateLabCache",
    "ContrastColorError",
    "ContrastColorPicker",
    "ContrastConfig",
    "EmptyCandidateSet",
    "InvalidColorInput",
    "LabColor",
    "MATERIAL_COLORS",
    "PALETTES",
    "RGBColor",
    "ResultCache",
    "UnknownPalette",
    "contrast_color",
    "delta_e_cie2000",
    "format_color",
    "from_lab",
    "get_default_picker",
    "get_palette",
    "is_hex",
    "lab_to_rgb",
    "rank_candidates",
    "reset_default_picker",
    "resolve_color",
    "rgb_to_hex",
    "rgb_to_lab",
    "select_best",
    "to_lab",
]
