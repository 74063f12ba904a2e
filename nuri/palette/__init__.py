from .assign import AnsiPalette, assign_slots
from .contrast import enforce_contrast
from .detect import ThemeMode, detect_mode
from .extract import ExtractedColor, extract_colors
from .generator import build_palette, generate_from_image, generate_palette
from .loader import load_and_prepare

__all__ = [
    "AnsiPalette",
    "ExtractedColor",
    "ThemeMode",
    "assign_slots",
    "build_palette",
    "detect_mode",
    "enforce_contrast",
    "extract_colors",
    "generate_from_image",
    "generate_palette",
    "load_and_prepare",
]
