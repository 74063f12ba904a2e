"""
Defaults and boundary configuration. The config root is resolved once here and
passed explicitly to the theme backends.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CLUSTER_COUNT = 16
DEFAULT_SEED = 42

DEFAULT_ACCENT_CONTRAST = 4.5  # Accents (slots 1-6, 9-14) against background
FOREGROUND_CONTRAST = 7.0  # Slot 15 / foreground against background
BRIGHT_BLACK_CONTRAST = 3.0  # Slot 8 against background

MIN_CONTRAST_RATIO = 1.0
MAX_CONTRAST_RATIO = 21.0


def clamp_min_contrast(value):
    """Clamp a contrast ratio to [1, 21], warning when it was out of range."""
    clamped = max(MIN_CONTRAST_RATIO, min(MAX_CONTRAST_RATIO, float(value)))
    if clamped != value:
        logger.warning(
            "minimum contrast %s is outside [%.1f, %.1f], using %.1f",
            value,
            MIN_CONTRAST_RATIO,
            MAX_CONTRAST_RATIO,
            clamped,
        )
    return clamped


def resolve_config_home(environ=None):
    """Resolve the user config root.

    Args:
        environ: Mapping to read variables from (default: os.environ)

    Returns:
        Path: $XDG_CONFIG_HOME if set, else $HOME/.config, else ~/.config
    """
    if environ is None:
        environ = os.environ
    xdg = environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    home = environ.get("HOME")
    if home:
        return Path(home) / ".config"
    return Path("~").expanduser() / ".config"
