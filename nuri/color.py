import math
from collections import namedtuple

import numpy as np

# D65 reference white
XN, YN, ZN = 0.95047, 1.0, 1.08883

LAB_EPSILON = 216 / 24389
LAB_KAPPA = 24389 / 27

MAX_CHROMA = 0.4


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    hex_color = hex_color.strip()
    if hex_color.startswith("#"):
        hex_color = hex_color[1:]
    if len(hex_color) != 6:
        raise ValueError(
            f"invalid hex color: expected 6 hex digits, got {len(hex_color)}"
        )
    try:
        return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"invalid hex color: {hex_color!r}") from None


class Color(namedtuple("Color", ["r", "g", "b"])):
    """An 8-bit sRGB color. The interchange type of the whole pipeline."""

    __slots__ = ()

    @property
    def hex(self):
        return rgb_to_hex(self.r, self.g, self.b)

    @property
    def luminance(self):
        return relative_luminance(self)

    def __str__(self):
        return self.hex


def create_color(r, g, b):
    """Create a Color, clamping each channel to 0-255"""
    r, g, b = (max(0, min(255, int(c))) for c in (r, g, b))
    return Color(r, g, b)


def from_hex(hex_color):
    return Color(*hex_to_rgb(hex_color))


def _srgb_to_linear(c):
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(c):
    return 12.92 * c if c <= 0.0031308 else 1.055 * c ** (1 / 2.4) - 0.055


def _from_linear_clamped(r, g, b):
    """Clamp linear sRGB to [0, 1], encode and round each channel to 8 bits."""
    encoded = (_linear_to_srgb(max(0.0, min(1.0, float(c)))) * 255.0 + 0.5 for c in (r, g, b))
    return create_color(*encoded)


def _linear_channels(color):
    return tuple(_srgb_to_linear(c / 255) for c in color)


def relative_luminance(color):
    """Calculate relative luminance per WCAG 2.0"""
    r, g, b = _linear_channels(color)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(c1, c2):
    """WCAG contrast ratio between two colors, in [1, 21]."""
    lum1 = relative_luminance(c1)
    lum2 = relative_luminance(c2)
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


# === CIELAB ===


def _lab_f(t):
    return t ** (1 / 3) if t > LAB_EPSILON else (LAB_KAPPA * t + 16) / 116


def _lab_f_inv(f):
    f3 = f**3
    return f3 if f3 > LAB_EPSILON else (116 * f - 16) / LAB_KAPPA


def to_lab(color):
    """Convert a Color to CIELAB (L, a, b)."""
    r, g, b = _linear_channels(color)
    x = r * 0.4124564 + g * 0.3575761 + b * 0.1804375
    y = r * 0.2126729 + g * 0.7151522 + b * 0.0721750
    z = r * 0.0193339 + g * 0.1191920 + b * 0.9503041

    fx, fy, fz = _lab_f(x / XN), _lab_f(y / YN), _lab_f(z / ZN)
    return (116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def from_lab(lab):
    """Convert CIELAB (L, a, b) back to a Color."""
    L, a, b = (float(v) for v in lab)
    fy = (L + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    x = _lab_f_inv(fx) * XN
    y = (((L + 16) / 116) ** 3 if L > LAB_KAPPA * LAB_EPSILON else L / LAB_KAPPA) * YN
    z = _lab_f_inv(fz) * ZN

    r = x * 3.2404542 - y * 1.5371385 - z * 0.4985314
    g = -x * 0.9692660 + y * 1.8760108 + z * 0.0415560
    b_out = x * 0.0556434 - y * 0.2040259 + z * 1.0572252
    return _from_linear_clamped(r, g, b_out)


def srgb_to_lab_array(rgb):
    """Convert an (N, 3) array of 8-bit RGB values to CIELAB."""
    rgb_norm = np.asarray(rgb, dtype=np.float64).reshape(-1, 3) / 255.0

    mask = rgb_norm > 0.04045
    rgb_linear = np.where(mask, ((rgb_norm + 0.055) / 1.055) ** 2.4, rgb_norm / 12.92)

    r, g, b = rgb_linear[:, 0], rgb_linear[:, 1], rgb_linear[:, 2]
    x = (r * 0.4124564 + g * 0.3575761 + b * 0.1804375) / XN
    y = (r * 0.2126729 + g * 0.7151522 + b * 0.0721750) / YN
    z = (r * 0.0193339 + g * 0.1191920 + b * 0.9503041) / ZN

    def f(t):
        return np.where(t > LAB_EPSILON, np.cbrt(t), (LAB_KAPPA * t + 16) / 116)

    fx, fy, fz = f(x), f(y), f(z)
    return np.column_stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)])


def lab_distance_sq(lab1, lab2):
    """Squared Euclidean distance in Lab (ΔE squared)."""
    return sum((float(p) - float(q)) ** 2 for p, q in zip(lab1, lab2))


# === OKLCH ===


def _cbrt(v):
    return v ** (1 / 3) if v >= 0 else -((-v) ** (1 / 3))


def to_oklch(color):
    """Convert a Color to Oklch (L in [0, 1], chroma, hue in degrees)."""
    r, g, b = _linear_channels(color)
    l = 0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b
    m = 0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b
    s = 0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b
    l_, m_, s_ = _cbrt(l), _cbrt(m), _cbrt(s)

    L = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
    a = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
    b_ = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_

    chroma = math.hypot(a, b_)
    hue = math.degrees(math.atan2(b_, a)) % 360.0
    return (L, chroma, hue)


def from_oklch(oklch):
    """Convert Oklch (L, chroma, hue) back to a Color, clamping to the sRGB gamut."""
    L, chroma, hue = (float(v) for v in oklch)
    h = math.radians(hue)
    a = chroma * math.cos(h)
    b = chroma * math.sin(h)

    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.2914855480 * b
    l3, m3, s3 = l_**3, m_**3, s_**3

    r = 4.0767416621 * l3 - 3.3077115913 * m3 + 0.2309699292 * s3
    g = -1.2684380046 * l3 + 2.6097574011 * m3 - 0.3413193965 * s3
    b_out = -0.0041960863 * l3 - 0.7034186147 * m3 + 1.7076147010 * s3
    return _from_linear_clamped(r, g, b_out)


def hue_distance(h1, h2):
    """Circular distance between two hues in degrees, in [0, 180]."""
    diff = abs(h1 - h2) % 360.0
    return 360.0 - diff if diff > 180.0 else diff


def adjust_lightness(color, delta):
    """Shift Oklch lightness by delta. Positive = lighter. L is clamped to [0, 1]."""
    L, chroma, hue = to_oklch(color)
    return from_oklch((max(0.0, min(1.0, L + delta)), chroma, hue))


def adjust_chroma(color, delta):
    """Shift Oklch chroma by delta. Chroma is clamped to [0, 0.4]."""
    L, chroma, hue = to_oklch(color)
    return from_oklch((L, max(0.0, min(MAX_CHROMA, chroma + delta)), hue))
