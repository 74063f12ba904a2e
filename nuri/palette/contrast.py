from ..color import adjust_lightness, contrast_ratio, relative_luminance
from ..config import (
    BRIGHT_BLACK_CONTRAST,
    DEFAULT_ACCENT_CONTRAST,
    FOREGROUND_CONTRAST,
    MAX_CONTRAST_RATIO,
    MIN_CONTRAST_RATIO,
)
from .assign import ACCENT_SLOTS

L_STEP = 0.01  # Oklch lightness change per iteration
MAX_ITERATIONS = 100


def _clamp_ratio(ratio):
    return max(MIN_CONTRAST_RATIO, min(MAX_CONTRAST_RATIO, ratio))


def adjust_to_contrast(color, background, min_ratio, l_step):
    """
    Step a color's Oklch lightness until it meets `min_ratio` against the
    background. Gives up after MAX_ITERATIONS and returns the last color.
    """
    current = color
    for _ in range(MAX_ITERATIONS):
        if contrast_ratio(current, background) >= min_ratio:
            return current
        current = adjust_lightness(current, l_step)
    return current


def enforce_contrast(
    palette,
    min_contrast=DEFAULT_ACCENT_CONTRAST,
    foreground_contrast=FOREGROUND_CONTRAST,
    bright_black_contrast=BRIGHT_BLACK_CONTRAST,
):
    """Adjust palette colors in place to meet WCAG minimums against the background.

    Only Oklch lightness changes. Dark backgrounds push colors lighter, light
    backgrounds push them darker.

    Args:
        palette: AnsiPalette to modify
        min_contrast: Accent minimum (slots 1-6, 9-14)
        foreground_contrast: Slot 15 / foreground minimum
        bright_black_contrast: Slot 8 minimum

    Returns:
        The same palette
    """
    bg = palette.background
    l_step = L_STEP if relative_luminance(bg) < 0.5 else -L_STEP

    accent_min = _clamp_ratio(min_contrast)
    for slot in ACCENT_SLOTS:
        palette.slots[slot] = adjust_to_contrast(
            palette.slots[slot], bg, accent_min, l_step
        )

    palette.slots[15] = adjust_to_contrast(
        palette.slots[15], bg, _clamp_ratio(foreground_contrast), l_step
    )
    palette.sync_foreground()

    palette.slots[8] = adjust_to_contrast(
        palette.slots[8], bg, _clamp_ratio(bright_black_contrast), l_step
    )
    return palette


def contrast_failures(
    palette,
    min_contrast=DEFAULT_ACCENT_CONTRAST,
    foreground_contrast=FOREGROUND_CONTRAST,
    bright_black_contrast=BRIGHT_BLACK_CONTRAST,
):
    """List slots that miss their threshold as (slot, ratio, required) tuples."""
    bg = palette.background
    required = {slot: _clamp_ratio(min_contrast) for slot in ACCENT_SLOTS}
    required[15] = _clamp_ratio(foreground_contrast)
    required[8] = _clamp_ratio(bright_black_contrast)

    failures = []
    for slot in sorted(required):
        ratio = contrast_ratio(palette.slots[slot], bg)
        if ratio < required[slot]:
            failures.append((slot, ratio, required[slot]))
    return failures
