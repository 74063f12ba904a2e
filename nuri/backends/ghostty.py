from .base import ThemeBackend

# Theme file key for each special color, in output order
SPECIAL_KEYS = {
    "background": "background",
    "foreground": "foreground",
    "cursor_color": "cursor-color",
    "cursor_text": "cursor-text",
    "selection_bg": "selection-background",
    "selection_fg": "selection-foreground",
}


class GhosttyBackend(ThemeBackend):
    """Ghostty key-value theme: 6 special colors then 16 palette entries."""

    name = "ghostty"
    app_dir = "ghostty"

    def serialize(self, palette, theme_name):
        lines = [f"{SPECIAL_KEYS[key]} = {color.hex}" for key, color in palette.special_colors()]
        lines.extend(f"palette = {i}={color.hex}" for i, color in enumerate(palette.slots))
        return "\n".join(lines) + "\n"
