import logging

from ..color import (
    Color,
    adjust_lightness,
    from_oklch,
    hue_distance,
    relative_luminance,
    to_oklch,
)
from .detect import ThemeMode

logger = logging.getLogger(__name__)

SLOT_NAMES = [
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
]

ACCENT_SLOTS = (1, 2, 3, 4, 5, 6, 9, 10, 11, 12, 13, 14)

# (slot, Oklch hue center), processed in this order
HUE_SECTORS = [
    (1, 25.0),  # red
    (2, 145.0),  # green
    (3, 90.0),  # yellow
    (4, 260.0),  # blue
    (5, 325.0),  # magenta
    (6, 195.0),  # cyan
]

# Accent matching
MIN_ACCENT_CHROMA = 0.04  # Below this a color counts as neutral
SECTOR_WINDOW = 45.0  # Max hue distance for a color to fill a sector

# Synthesis of missing hues
MIN_SYNTH_CHROMA = 0.08
FALLBACK_LIGHTNESS = 0.65
FALLBACK_CHROMA = 0.12

# Accent limits to avoid muddy or neon colors
MAX_ACCENT_CHROMA = 0.22
ACCENT_LIGHTNESS = {
    ThemeMode.DARK: (0.50, 0.85),
    ThemeMode.LIGHT: (0.35, 0.65),
}
BRIGHT_STEP = 0.08

# Backgrounds and foregrounds stay near-neutral
BACKGROUND_LIGHTNESS = {
    ThemeMode.DARK: (0.0, 0.25),
    ThemeMode.LIGHT: (0.92, 1.0),
}
FOREGROUND_LIGHTNESS = {
    ThemeMode.DARK: (0.88, 1.0),
    ThemeMode.LIGHT: (0.0, 0.30),
}
MAX_BG_CHROMA = 0.04
MAX_FG_CHROMA = 0.03

WHITE_STEP = 0.12  # Slot 7 sits this far from slot 15, toward the background
BRIGHT_BLACK_MIN_GAP = 0.05

DEFAULT_DARK = Color(24, 24, 24)
DEFAULT_LIGHT = Color(240, 240, 240)


class AnsiPalette:
    """The 16 ANSI slots plus the special terminal colors."""

    def __init__(
        self,
        slots,
        background,
        foreground,
        cursor_color,
        cursor_text,
        selection_bg,
        selection_fg,
    ):
        if len(slots) != 16:
            raise ValueError(f"expected 16 palette slots, got {len(slots)}")
        self.slots = list(slots)
        self.background = background
        self.foreground = foreground
        self.cursor_color = cursor_color
        self.cursor_text = cursor_text
        self.selection_bg = selection_bg
        self.selection_fg = selection_fg

    def special_colors(self):
        """Special colors in serialization order."""
        return [
            ("background", self.background),
            ("foreground", self.foreground),
            ("cursor_color", self.cursor_color),
            ("cursor_text", self.cursor_text),
            ("selection_bg", self.selection_bg),
            ("selection_fg", self.selection_fg),
        ]

    def sync_foreground(self):
        """Copy slot 15 into the foreground-dependent special colors."""
        self.foreground = self.slots[15]
        self.cursor_color = self.foreground
        self.selection_fg = self.foreground

    def sync_background(self):
        """Copy slot 0 into the background-dependent special colors."""
        self.background = self.slots[0]
        self.cursor_text = self.background
        self.selection_bg = self.background

    def copy(self):
        return AnsiPalette(self.slots, **dict(self.special_colors()))

    def __eq__(self, other):
        if not isinstance(other, AnsiPalette):
            return NotImplemented
        return (
            self.slots == other.slots
            and self.special_colors() == other.special_colors()
        )

    def __repr__(self):
        slots = " ".join(c.hex for c in self.slots)
        return f"AnsiPalette(bg={self.background.hex}, fg={self.foreground.hex}, slots=[{slots}])"


def _tone(color, lightness_range, max_chroma):
    """Clamp Oklch lightness into a range and cap chroma, keeping hue."""
    L, chroma, hue = to_oklch(color)
    low, high = lightness_range
    new_l = min(max(L, low), high)
    new_chroma = min(chroma, max_chroma)
    if new_l == L and new_chroma == chroma:
        return color
    return from_oklch((new_l, new_chroma, hue))


def _match_sectors(entries):
    """Greedily claim one extracted color per hue sector.

    Sectors are visited in slot order. Each takes the unclaimed chromatic
    color with the smallest hue distance (ties go to the heavier color).
    An earlier sector can therefore take a color a later one is closer to.

    Returns:
        tuple: ({slot: Color}, set of claimed entry indices)
    """
    matches = {}
    claimed = set()
    for slot, center in HUE_SECTORS:
        best = None
        best_dist = None
        for i, (_, (_, chroma, hue)) in enumerate(entries):
            if i in claimed or chroma < MIN_ACCENT_CHROMA:
                continue
            dist = hue_distance(hue, center)
            if dist > SECTOR_WINDOW:
                continue
            if best is None or dist < best_dist:
                best, best_dist = i, dist
        if best is not None:
            claimed.add(best)
            matches[slot] = entries[best][0].color
    return matches, claimed


def _synthesize_accent(hue, reference):
    """Build a missing accent by rotating the reference color onto `hue`."""
    if reference is None:
        lightness, chroma = FALLBACK_LIGHTNESS, FALLBACK_CHROMA
    else:
        lightness, chroma = reference
    return from_oklch((lightness, max(chroma, MIN_SYNTH_CHROMA), hue))


def _base_colors(colors, mode):
    """Pick background and foreground from the luminance extremes."""
    if colors:
        darkest = min(colors, key=lambda c: relative_luminance(c.color)).color
        lightest = max(colors, key=lambda c: relative_luminance(c.color)).color
    else:
        darkest, lightest = DEFAULT_DARK, DEFAULT_LIGHT

    if mode.is_dark:
        bg_base, fg_base = darkest, lightest
    else:
        bg_base, fg_base = lightest, darkest

    background = _tone(bg_base, BACKGROUND_LIGHTNESS[mode], MAX_BG_CHROMA)
    foreground = _tone(fg_base, FOREGROUND_LIGHTNESS[mode], MAX_FG_CHROMA)
    return background, foreground


def _bright_black(background, accents, entries, claimed, mode):
    """Slot 8 sits between the background and the accent nearest to it."""
    bg_l = to_oklch(background)[0]
    accent_ls = [to_oklch(c)[0] for c in accents]
    nearest_l = min(accent_ls) if mode.is_dark else max(accent_ls)
    low, high = sorted((bg_l, nearest_l))

    for i, (entry, (lightness, _, _)) in enumerate(entries):
        if i in claimed:
            continue
        if low < lightness < high and abs(lightness - bg_l) >= BRIGHT_BLACK_MIN_GAP:
            return _tone(entry.color, (0.0, 1.0), MAX_BG_CHROMA)

    midpoint = (bg_l + nearest_l) / 2
    return adjust_lightness(background, midpoint - bg_l)


def assign_slots(colors, mode):
    """Map extracted colors onto the 16 ANSI slots and the special colors.

    Args:
        colors: Weight-sorted list of ExtractedColor
        mode: ThemeMode

    Returns:
        AnsiPalette with every slot populated
    """
    entries = [(c, to_oklch(c.color)) for c in colors]

    background, foreground = _base_colors(colors, mode)

    matches, claimed = _match_sectors(entries)
    reference = next(
        ((L, chroma) for _, (L, chroma, _) in entries if chroma >= MIN_ACCENT_CHROMA),
        None,
    )

    accents = []
    for slot, hue in HUE_SECTORS:
        color = matches.get(slot)
        if color is None:
            logger.debug("no extracted color for %s, synthesizing", SLOT_NAMES[slot])
            color = _synthesize_accent(hue, reference)
        accents.append(_tone(color, ACCENT_LIGHTNESS[mode], MAX_ACCENT_CHROMA))

    # Bright variants and slot 7 move away from / toward the background
    step = BRIGHT_STEP if mode.is_dark else -BRIGHT_STEP
    bright_accents = [adjust_lightness(c, step) for c in accents]
    white = adjust_lightness(foreground, -WHITE_STEP if mode.is_dark else WHITE_STEP)
    bright_black = _bright_black(background, accents, entries, claimed, mode)

    slots = [background, *accents, white, bright_black, *bright_accents, foreground]

    return AnsiPalette(
        slots,
        background=background,
        foreground=foreground,
        cursor_color=foreground,
        cursor_text=background,
        selection_bg=background,
        selection_fg=foreground,
    )
