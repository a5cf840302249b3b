"""
Swatch sheet showing each reference color with its chosen contrast color.
"""

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .color_difference import delta_e_cie2000
from .color_space import to_lab
from .resolver import resolve_color


def render_preview(picker, colors, path=None, sample_text="Aa"):
    """
    Draw one swatch per reference color with its contrast color on top.

    Each swatch shows the sample text and the foreground hex in the chosen
    color, plus the CIEDE2000 distance between the two. Saves to `path` when
    given and returns the matplotlib Figure.
    """
    colors = list(colors)
    n_colors = len(colors)
    fig, ax = plt.subplots(figsize=(max(2.0 * n_colors, 4.0), 2.6))
    ax.set_xlim(0, max(n_colors, 1))
    ax.set_ylim(0, 1)
    ax.set_aspect('equal')

    for i, color in enumerate(colors):
        background = resolve_color(color)
        foreground_id = picker.contrast_color(color)
        foreground = resolve_color(foreground_id)
        distance = delta_e_cie2000(to_lab(background), to_lab(foreground))

        rect = Rectangle((i, 0), 1, 1, facecolor=tuple(background), edgecolor='black', linewidth=2)
        ax.add_patch(rect)

        ax.text(i + 0.5, 0.62, sample_text, ha='center', va='center',
                fontsize=22, fontweight='bold', color=tuple(foreground))
        ax.text(i + 0.5, 0.30, foreground_id, ha='center', va='center',
                fontsize=9, color=tuple(foreground), family='monospace')
        ax.text(i + 0.5, 0.14, f"ΔE {distance:.1f}", ha='center', va='center',
                fontsize=8, color=tuple(foreground))
        ax.text(i + 0.5, -0.08, color, ha='center', va='top', fontsize=8, family='monospace')

    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title("Contrast colors (CIEDE2000)", fontsize=12, fontweight='bold')
    fig.tight_layout()

    if path is not None:
        fig.savefig(path, dpi=150, bbox_inches='tight')
    return fig
