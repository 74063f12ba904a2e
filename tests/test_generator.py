"""End-to-end tests for the palette pipeline."""

import logging

import numpy as np
from PIL import Image

from nuri.export import format_preview, generate_readability_report, print_palette
from nuri.palette import ThemeMode, generate_from_image, generate_palette
from nuri.palette.contrast import contrast_failures

from conftest import lab_pixels


def test_generate_from_image(colorful_image):
    palette, extracted, mode = generate_from_image(colorful_image)
    assert len(palette.slots) == 16
    assert len(extracted) >= 6
    assert isinstance(mode, ThemeMode)
    assert contrast_failures(palette) == []


def test_mode_is_detected(dark_image, light_image):
    assert generate_from_image(dark_image)[2] is ThemeMode.DARK
    assert generate_from_image(light_image)[2] is ThemeMode.LIGHT


def test_forced_mode_is_respected(dark_image):
    _, _, mode = generate_from_image(dark_image, mode=ThemeMode.LIGHT)
    assert mode is ThemeMode.LIGHT


def test_pipeline_is_deterministic(colorful_image):
    first = generate_from_image(colorful_image, seed=7)[0]
    second = generate_from_image(colorful_image, seed=7)[0]
    assert first == second


def test_flat_image_warns_and_synthesizes(tmp_path, caplog):
    path = tmp_path / "flat.png"
    Image.new("RGB", (32, 32), (40, 40, 40)).save(path)
    with caplog.at_level(logging.WARNING):
        palette, extracted, _ = generate_from_image(path)
    assert len(extracted) == 1
    assert "distinct colors" in caplog.text
    assert contrast_failures(palette) == []


def test_tiny_input_warns(caplog):
    with caplog.at_level(logging.WARNING):
        palette, _, _ = generate_palette(lab_pixels([(255, 0, 0), (0, 0, 255)]), k=16)
    assert "requested colors" in caplog.text
    assert len(palette.slots) == 16


def test_empty_input_still_builds_a_palette():
    palette, extracted, mode = generate_palette(np.empty((0, 3)))
    assert extracted == []
    assert mode is ThemeMode.DARK
    assert contrast_failures(palette) == []


def test_readability_report(colorful_image):
    palette, _, mode = generate_from_image(colorful_image)
    report, issues = generate_readability_report(palette, mode)
    assert "READABILITY REPORT" in report
    assert "ALL COLORS PASS" in report
    assert issues == []

    palette.slots[3] = palette.background
    report, issues = generate_readability_report(palette, mode)
    assert [name for name, _, _, _ in issues] == ["yellow"]
    assert "ISSUES FOUND: 1" in report


def test_preview_output(colorful_image, capsys):
    palette, _, mode = generate_from_image(colorful_image)
    preview = format_preview(palette, selected=4)
    assert "\x1b[48;2;" in preview
    assert palette.slots[4].hex in preview
    assert "4:blue" in preview

    print_palette(palette, mode)
    out = capsys.readouterr().out
    assert "TERMINAL PALETTE" in out
    assert palette.background.hex in out
