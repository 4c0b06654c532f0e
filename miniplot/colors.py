"""
Line colours: the default palette cycle and a few named colours for MiniPlot.color().
"""

import matplotlib.colors as mcolors

# matplotlib's default property cycle (tab10)
PALETTE = list(mcolors.TABLEAU_COLORS.values())

RED = "#ff0000"
GREEN = "#00ff00"
BLUE = "#0000ff"
BLACK = "#000000"
WHITE = "#ffffff"
GRAY = "#a0a0a0"
YELLOW = "#ffff00"
TRANSPARENT = "none"


def get_color(index: int) -> str:
    """Palette colour for index, wrapping around the palette."""
    return PALETTE[index % len(PALETTE)]


def validate_color(color: str | tuple) -> str | tuple:
    """Return color unchanged if matplotlib understands it; raise ValueError otherwise."""
    if color == TRANSPARENT:
        return color
    if not mcolors.is_color_like(color):
        raise ValueError(f"Not a valid colour: {color!r}")
    return color
