"""Color palettes for distribution maps.

Colorblind-friendly categorical colors for neighbouring sets, plus fixed
colors for land and outlines.
"""

from typing import List

# Colorblind-friendly categorical palette (Paul Tol's vibrant + muted)
CATEGORICAL = [
    "#0077BB",  # Blue
    "#EE7733",  # Orange
    "#009988",  # Teal
    "#CC3311",  # Red
    "#33BBEE",  # Cyan
    "#EE3377",  # Magenta
    "#332288",  # Indigo
    "#DDCC77",  # Sand
    "#117733",  # Green
    "#AA4499",  # Purple
]

LAND = "#DDDDDD"
OUTLINE = "#000000"


def get_categorical(n: int = None) -> List[str]:
    """Get categorical palette colors.

    Parameters
    ----------
    n : int, optional
        Number of colors needed, cycling through the palette. If None,
        returns the full palette.

    Returns
    -------
    list of str
        Hex color codes
    """
    if n is None:
        return CATEGORICAL.copy()
    return (CATEGORICAL * ((n // len(CATEGORICAL)) + 1))[:n]
