"""Generate terminal color themes from wallpaper images."""

__version__ = "0.1.0"
