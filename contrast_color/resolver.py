"""
Color identifier resolution.

Identifiers are CSS3 color names ("rebeccapurple") or hex triplets
("#f0f", "#ff00ff"). Name and hex parsing is delegated to webcolors.
"""

import webcolors

from .color_space import RGBColor
from .errors import InvalidColorInput

HEX_MARKER = "#"


def is_hex(identifier):
    """True when `identifier` is written in hex form."""
    return isinstance(identifier, str) and identifier.startswith(HEX_MARKER)


def resolve_color(identifier):
    """Resolve a color name or hex string to an RGBColor (channels 0-1)."""
    if not isinstance(identifier, str):
        raise InvalidColorInput(identifier, "expected a string")
    try:
        if is_hex(identifier):
            rgb = webcolors.hex_to_rgb(identifier)
        else:
            rgb = webcolors.name_to_rgb(identifier, spec="css3")
    except ValueError as exc:
        raise InvalidColorInput(identifier, str(exc)) from exc
    return RGBColor(rgb.red / 255, rgb.green / 255, rgb.blue / 255)


def rgb_to_hex(rgb):
    """Render an RGB triple (0-1) as lowercase '#rrggbb'."""
    channels = tuple(int(round(min(1.0, max(0.0, float(c))) * 255)) for c in rgb)
    return webcolors.rgb_to_hex(channels)
