from enum import Enum

import numpy as np

# Mean Lab lightness above this is a light image; the boundary itself is dark
LIGHT_MODE_THRESHOLD = 55.0


class ThemeMode(Enum):
    DARK = "dark"
    LIGHT = "light"

    @property
    def is_dark(self):
        return self is ThemeMode.DARK

    def toggled(self):
        return ThemeMode.LIGHT if self is ThemeMode.DARK else ThemeMode.DARK


def detect_mode(pixels):
    """Classify Lab pixels as a dark or light image by mean lightness."""
    pixels = np.asarray(pixels, dtype=np.float64).reshape(-1, 3)
    if len(pixels) == 0:
        return ThemeMode.DARK
    mean_l = float(pixels[:, 0].mean())
    return ThemeMode.LIGHT if mean_l > LIGHT_MODE_THRESHOLD else ThemeMode.DARK
