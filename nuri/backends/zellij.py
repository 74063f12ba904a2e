from ..color import from_oklch, to_oklch
from .base import ThemeBackend

ORANGE_HUE = 55.0

# (KDL key, slot index); fg/bg come from the special colors
SLOT_KEYS = [
    ("black", 0),
    ("red", 1),
    ("green", 2),
    ("yellow", 3),
    ("blue", 4),
    ("magenta", 5),
    ("cyan", 6),
    ("white", 7),
]


def derive_orange(palette):
    """Zellij's extra accent: red and yellow averaged in Oklch, hue fixed at 55°."""
    red_l, red_c, _ = to_oklch(palette.slots[1])
    yellow_l, yellow_c, _ = to_oklch(palette.slots[3])
    return from_oklch(((red_l + yellow_l) / 2, (red_c + yellow_c) / 2, ORANGE_HUE))


class ZellijBackend(ThemeBackend):
    """Zellij terminal multiplexer theme (KDL)."""

    name = "zellij"
    app_dir = "zellij"
    extension = ".kdl"

    def serialize(self, palette, theme_name):
        entries = [("fg", palette.foreground), ("bg", palette.background)]
        entries.extend((key, palette.slots[slot]) for key, slot in SLOT_KEYS)
        entries.append(("orange", derive_orange(palette)))

        out = ["themes {", f"    {theme_name} {{"]
        out.extend(f'        {key} "{color.hex}"' for key, color in entries)
        out.extend(["    }", "}"])
        return "\n".join(out) + "\n"
