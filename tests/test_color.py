"""Tests for color space conversions and WCAG math."""

import pytest

from nuri.color import (
    Color,
    adjust_chroma,
    adjust_lightness,
    contrast_ratio,
    create_color,
    from_hex,
    from_lab,
    from_oklch,
    hue_distance,
    relative_luminance,
    srgb_to_lab_array,
    to_lab,
    to_oklch,
)

BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)

SAMPLES = [
    Color(200, 100, 50),
    Color(0, 255, 0),
    Color(128, 128, 128),
    Color(12, 34, 250),
    Color(255, 255, 0),
    BLACK,
    WHITE,
]


def _close(a, b, tolerance=1):
    return all(abs(x - y) <= tolerance for x, y in zip(a, b))


def test_hex_round_trip():
    color = from_hex("#ff8800")
    assert color == Color(255, 136, 0)
    assert color.hex == "#ff8800"
    assert str(color) == "#ff8800"


def test_hex_accepts_uppercase_and_missing_hash():
    assert from_hex("#FF8800").hex == "#ff8800"
    assert from_hex("aabbcc").hex == "#aabbcc"


@pytest.mark.parametrize("bad", ["#fff", "#gggggg", "", "#1234567"])
def test_hex_rejects_malformed_input(bad):
    with pytest.raises(ValueError):
        from_hex(bad)


def test_create_color_clamps_channels():
    assert create_color(-10, 128, 300) == Color(0, 128, 255)


@pytest.mark.parametrize("color", SAMPLES)
def test_lab_round_trip_within_one(color):
    assert _close(from_lab(to_lab(color)), color)


@pytest.mark.parametrize("color", SAMPLES)
def test_oklch_round_trip_within_one(color):
    assert _close(from_oklch(to_oklch(color)), color)


def test_vectorized_lab_matches_scalar():
    lab = srgb_to_lab_array([list(c) for c in SAMPLES])
    for row, color in zip(lab, SAMPLES):
        assert row.tolist() == pytest.approx(list(to_lab(color)), abs=1e-6)


def test_white_lab_lightness_is_100():
    L, a, b = to_lab(WHITE)
    assert L == pytest.approx(100.0, abs=0.01)
    assert abs(a) < 0.01 and abs(b) < 0.01


def test_relative_luminance_extremes():
    assert relative_luminance(BLACK) < 0.001
    assert relative_luminance(WHITE) == pytest.approx(1.0, abs=0.001)
    assert WHITE.luminance == relative_luminance(WHITE)


def test_contrast_ratio_black_white():
    assert contrast_ratio(BLACK, WHITE) == pytest.approx(21.0, abs=0.1)


def test_contrast_ratio_same_color_is_one():
    gray = Color(128, 128, 128)
    assert contrast_ratio(gray, gray) == pytest.approx(1.0)


def test_contrast_ratio_is_symmetric():
    a = Color(200, 50, 50)
    b = Color(50, 200, 50)
    assert contrast_ratio(a, b) == contrast_ratio(b, a)


def test_contrast_ratio_mid_gray_vs_black():
    ratio = contrast_ratio(Color(119, 119, 119), BLACK)
    assert 4.5 < ratio < 5.0


def test_adjust_lightness_increases_luminance():
    dark = Color(50, 50, 50)
    assert adjust_lightness(dark, 0.2).luminance > dark.luminance
    assert adjust_lightness(dark, -0.1).luminance < dark.luminance


def test_adjust_lightness_clamps():
    assert adjust_lightness(WHITE, 1.0).luminance > 0.9
    assert adjust_lightness(BLACK, -1.0) == BLACK


def test_adjust_chroma_preserves_hue():
    color = Color(200, 50, 50)
    desaturated = adjust_chroma(color, -0.05)
    assert to_oklch(desaturated)[1] < to_oklch(color)[1]
    assert hue_distance(to_oklch(color)[2], to_oklch(desaturated)[2]) < 5.0


def test_adjust_chroma_to_zero_is_gray():
    gray = adjust_chroma(Color(200, 50, 50), -1.0)
    assert max(gray) - min(gray) <= 1


def test_hue_distance_wraps():
    assert hue_distance(350.0, 10.0) == pytest.approx(20.0)
    assert hue_distance(10.0, 350.0) == pytest.approx(20.0)
    assert hue_distance(0.0, 180.0) == pytest.approx(180.0)
    assert hue_distance(25.0, 25.0) == 0.0


def test_out_of_gamut_oklch_clamps_to_valid_channels():
    color = from_oklch((0.7, 0.4, 145.0))
    assert all(0 <= c <= 255 for c in color)
    assert from_oklch((1.5, 0.0, 0.0)) == WHITE
