import logging

import numpy as np

from ..config import DEFAULT_ACCENT_CONTRAST, DEFAULT_CLUSTER_COUNT, DEFAULT_SEED
from .assign import SLOT_NAMES, assign_slots
from .contrast import contrast_failures, enforce_contrast
from .detect import detect_mode
from .extract import extract_colors
from .loader import load_and_prepare

logger = logging.getLogger(__name__)

MIN_DISTINCT_COLORS = 6


def build_palette(extracted, mode, min_contrast=DEFAULT_ACCENT_CONTRAST):
    """Assign slots and enforce contrast for already extracted colors."""
    palette = assign_slots(extracted, mode)
    enforce_contrast(palette, min_contrast=min_contrast)
    for slot, ratio, required in contrast_failures(palette, min_contrast=min_contrast):
        logger.warning(
            "%s reaches only %.2f:1 against the background (target %.1f:1)",
            SLOT_NAMES[slot],
            ratio,
            required,
        )
    return palette


def generate_palette(
    pixels,
    k=DEFAULT_CLUSTER_COUNT,
    mode=None,
    min_contrast=DEFAULT_ACCENT_CONTRAST,
    seed=DEFAULT_SEED,
):
    """Run the whole pipeline on Lab pixels.

    Args:
        pixels: (N, 3) array-like of Lab values
        k: Number of colors to extract
        mode: ThemeMode, or None to detect it from the pixels
        min_contrast: Accent contrast minimum
        seed: Clustering seed

    Returns:
        tuple: (AnsiPalette, extracted colors, ThemeMode)
    """
    pixels = np.asarray(pixels, dtype=np.float64).reshape(-1, 3)
    if len(pixels) < k:
        logger.warning("image has only %d pixels for %d requested colors", len(pixels), k)

    extracted = extract_colors(pixels, k=k, seed=seed)
    if len(extracted) < MIN_DISTINCT_COLORS:
        logger.warning(
            "only %d distinct colors found, missing hues will be synthesized",
            len(extracted),
        )

    if mode is None:
        mode = detect_mode(pixels)
        logger.info("detected %s mode", mode.value)

    palette = build_palette(extracted, mode, min_contrast=min_contrast)
    return palette, extracted, mode


def generate_from_image(image_path, **kwargs):
    """Load an image and run `generate_palette` on it."""
    pixels = load_and_prepare(image_path)
    return generate_palette(pixels, **kwargs)
