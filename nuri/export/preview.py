import sys

from ..color import contrast_ratio, relative_luminance
from ..palette.assign import SLOT_NAMES

RESET = "\x1b[0m"
SHORT_NAMES = ["Blk", "Red", "Grn", "Yel", "Blu", "Mag", "Cyn", "Wht"]


def _fg(color):
    return f"\x1b[38;2;{color.r};{color.g};{color.b}m"


def _bg(color):
    return f"\x1b[48;2;{color.r};{color.g};{color.b}m"


def _label_color(color):
    """Black or white, whichever reads better on `color`."""
    return (0, 0, 0) if relative_luminance(color) > 0.4 else (255, 255, 255)


def _swatch_row(palette, start, selected):
    cells = ["  "]
    for i in range(start, start + 8):
        color = palette.slots[i]
        r, g, b = _label_color(color)
        style = _bg(color) + f"\x1b[38;2;{r};{g};{b}m"
        if i == selected:
            style += "\x1b[1;4m"
        cells.append(f"{style}{SHORT_NAMES[i % 8]:^6}{RESET} ")
    return "".join(cells)


def format_preview(palette, selected=None):
    """Render the palette as truecolor swatches plus a sample terminal session."""
    fg = _fg(palette.foreground)
    base = _bg(palette.background) + fg
    red, green, yellow, blue, magenta, cyan = (_fg(palette.slots[i]) for i in range(1, 7))
    comment = _fg(palette.slots[8])

    sample = [
        f"{green}user@host{fg}:{blue}~/projects{fg}$ ls",
        f"{blue}src/  {fg}README.md  {yellow}setup.cfg  {green}run.sh",
        f"{red}- old line removed",
        f"{green}+ new line added",
        f"{comment}# comment in code",
        f'{cyan}def {fg}main():  {magenta}print{fg}({green}"hello"{fg})',
    ]

    lines = [
        "  Normal",
        _swatch_row(palette, 0, selected),
        "",
        "  Bright",
        _swatch_row(palette, 8, selected),
        "",
    ]
    lines.extend(f"  {base} {line} {RESET}" for line in sample)

    if selected is not None:
        color = palette.slots[selected]
        ratio = contrast_ratio(color, palette.background)
        lines.append("")
        lines.append(
            f"  {_bg(color)}      {RESET}  {selected}:{SLOT_NAMES[selected]}  {color.hex}  contrast {ratio:.1f}:1"
        )
    return "\n".join(lines)


def print_palette(palette, mode, file=None):
    """Print palette info"""
    if file is None:
        file = sys.stdout
    bg = palette.background

    print("\n" + "=" * 60, file=file)
    print(f"TERMINAL PALETTE ({mode.value.upper()} THEME)", file=file)
    print("=" * 60, file=file)
    print(format_preview(palette), file=file)

    print("\nSPECIAL:", file=file)
    for key, c in palette.special_colors():
        print(f"  {key:18} {c.hex}", file=file)

    print("\nSLOTS:", file=file)
    for i, c in enumerate(palette.slots):
        contrast = contrast_ratio(c, bg)
        print(f"  {i:2} {SLOT_NAMES[i]:15} {c.hex}  (contrast: {contrast:.1f}:1)", file=file)
