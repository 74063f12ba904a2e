import numpy as np
import pytest
from PIL import Image

from nuri.color import from_oklch, srgb_to_lab_array
from nuri.palette import ExtractedColor, ThemeMode, assign_slots


def extracted(l, chroma, hue, weight):
    return ExtractedColor(from_oklch((l, chroma, hue)), weight)


def lab_pixels(rgb_list):
    return srgb_to_lab_array(np.array(rgb_list, dtype=np.uint8))


SECTOR_HUES = (25.0, 145.0, 90.0, 260.0, 325.0, 195.0)

# A palette with one color per hue sector plus dark and light neutrals
SIX_HUES = [
    extracted(0.60, 0.15, 25.0, 0.12),
    extracted(0.60, 0.15, 145.0, 0.12),
    extracted(0.70, 0.12, 90.0, 0.12),
    extracted(0.55, 0.15, 260.0, 0.12),
    extracted(0.60, 0.15, 325.0, 0.12),
    extracted(0.65, 0.10, 195.0, 0.10),
    extracted(0.10, 0.01, 0.0, 0.15),
    extracted(0.95, 0.01, 0.0, 0.15),
]


@pytest.fixture
def six_hue_palette():
    return assign_slots(SIX_HUES, ThemeMode.DARK)


@pytest.fixture
def colorful_image(tmp_path):
    colors = [
        (220, 50, 50),
        (50, 200, 50),
        (50, 50, 220),
        (220, 220, 50),
        (200, 50, 200),
        (50, 200, 200),
        (20, 20, 20),
        (240, 240, 240),
    ]
    img = Image.new("RGB", (64, 64))
    for x in range(64):
        for y in range(64):
            region = (x // 16) + (y // 16) * 4
            img.putpixel((x, y), colors[region % 8])
    path = tmp_path / "colorful.png"
    img.save(path)
    return path


@pytest.fixture
def dark_image(tmp_path):
    img = Image.new("RGB", (64, 64))
    for x in range(64):
        for y in range(64):
            img.putpixel((x, y), ((x * 40) // 64, (y * 30) // 64 + 5, 20 + (x + y) % 15))
    path = tmp_path / "dark-photo.png"
    img.save(path)
    return path


@pytest.fixture
def light_image(tmp_path):
    img = Image.new("RGB", (64, 64))
    for x in range(64):
        for y in range(64):
            img.putpixel(
                (x, y),
                (200 + (x * 55) // 64, 190 + (y * 55) // 64, 180 + min(((x + y) * 30) // 128, 75)),
            )
    path = tmp_path / "light-photo.png"
    img.save(path)
    return path
