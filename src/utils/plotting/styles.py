"""Style application for matplotlib plots.

Uses the seaborn style bundled with matplotlib as a base, with overrides
suited to block maps (no grid lines over the image, square pixels).
"""

import matplotlib.pyplot as plt

MAP_STYLE = {
    "axes.grid": False,
    "image.interpolation": "nearest",
    "image.aspect": "equal",
    "figure.dpi": 100,
    "savefig.dpi": 150,
}


def apply_styles(base_style: str = "seaborn-v0_8") -> None:
    """Apply the base style, then the map overrides.

    Parameters
    ----------
    base_style : str, default "seaborn-v0_8"
        Base matplotlib style to use. Skipped if unavailable.
    """
    if base_style in plt.style.available:
        plt.style.use(base_style)
    plt.rcParams.update(MAP_STYLE)
