from ..color import contrast_ratio
from ..config import BRIGHT_BLACK_CONTRAST, DEFAULT_ACCENT_CONTRAST, FOREGROUND_CONTRAST
from ..palette.assign import SLOT_NAMES


def generate_readability_report(palette, mode, min_contrast=DEFAULT_ACCENT_CONTRAST):
    """Generate a readability report for inspection.

    Returns:
        tuple: (report text, list of (name, hex, achieved, required) issues)
    """
    bg = palette.background

    report = []
    report.append("=" * 60)
    report.append("READABILITY REPORT")
    report.append("=" * 60)
    report.append(f"Theme: {mode.value.upper()}")
    report.append(f"Background: {bg.hex}")

    categories = [
        ("FOREGROUND", [15], FOREGROUND_CONTRAST),
        ("ACCENTS", [1, 2, 3, 4, 5, 6], min_contrast),
        ("BRIGHT ACCENTS", [9, 10, 11, 12, 13, 14], min_contrast),
        ("BRIGHT BLACK", [8], BRIGHT_BLACK_CONTRAST),
    ]

    issues = []

    for cat_name, slots, required in categories:
        report.append(f"\n{cat_name} (min: {required}:1)")
        report.append("-" * 50)
        for slot in slots:
            c = palette.slots[slot]
            ratio = contrast_ratio(c, bg)
            status = "✓" if ratio >= required else "✗ FAIL"
            if ratio < required:
                issues.append((SLOT_NAMES[slot], c.hex, ratio, required))
            report.append(f"  {slot:2} {SLOT_NAMES[slot]:15} {c.hex}  {ratio:4.1f}:1  {status}")

    report.append("\n" + "=" * 60)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for name, hex_val, achieved, required in issues:
            report.append(f"  - {name}: {hex_val} has {achieved:.1f}:1, needs {required}:1")
    else:
        report.append("ALL COLORS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 60)

    return "\n".join(report), issues
