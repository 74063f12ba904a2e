"""Tests for the refinement session state."""

import pytest

from nuri.color import to_oklch
from nuri.palette import ThemeMode
from nuri.palette.contrast import contrast_failures
from nuri.session import RefinementSession

from conftest import lab_pixels

COLORS = [
    (220, 50, 50),
    (50, 200, 50),
    (50, 50, 220),
    (220, 220, 50),
    (200, 50, 200),
    (50, 200, 200),
    (20, 20, 20),
    (240, 240, 240),
]


@pytest.fixture
def session():
    return RefinementSession(lab_pixels(COLORS * 20), mode=ThemeMode.DARK)


def test_new_session_is_clean(session):
    assert not session.dirty
    assert session.selected_slot is None
    assert len(session.extracted) == len(COLORS)
    assert contrast_failures(session.palette) == []


def test_mode_is_detected_when_not_given():
    session = RefinementSession(lab_pixels([(250, 250, 250)] * 30 + [(10, 10, 10)]))
    assert session.mode is ThemeMode.LIGHT


def test_select_validates_range(session):
    session.select("3")
    assert session.selected_slot == 3
    with pytest.raises(ValueError):
        session.select(16)
    with pytest.raises(ValueError):
        session.select(-1)


def test_edits_require_a_selection(session):
    with pytest.raises(ValueError, match="no slot selected"):
        session.nudge_lightness()
    with pytest.raises(ValueError):
        session.cycle_candidate()


def test_nudge_lightness(session):
    session.select(1)
    before = to_oklch(session.palette.slots[1])[0]
    session.nudge_lightness(0.05)
    assert to_oklch(session.palette.slots[1])[0] > before
    assert session.dirty


def test_nudge_chroma_down(session):
    session.select(2)
    before = to_oklch(session.palette.slots[2])[1]
    session.nudge_chroma(-0.03)
    assert to_oklch(session.palette.slots[2])[1] < before


def test_edits_keep_contrast(session):
    session.select(4)
    for _ in range(30):
        session.nudge_lightness(-0.02)
    assert contrast_failures(session.palette) == []


def test_editing_background_updates_specials(session):
    session.select(0)
    session.nudge_lightness(0.03)
    palette = session.palette
    assert palette.background == palette.slots[0]
    assert palette.cursor_text == palette.slots[0]


def test_switch_mode_rebuilds(session):
    dark_bg = session.palette.background
    session.switch_mode()
    assert session.mode is ThemeMode.LIGHT
    assert session.palette.background.luminance > dark_bg.luminance
    assert session.dirty


def test_regenerate_advances_seed(session):
    session.regenerate()
    assert session.seed == 43
    assert session.dirty
    assert len(session.palette.slots) == 16


def test_cycle_walks_extracted_colors(session):
    session.select(3)
    candidates = {c.color for c in session.extracted}
    first = session.cycle_candidate(1)
    second = session.cycle_candidate(1)
    assert first in candidates and second in candidates
    assert first != second
    assert session.cycle_candidate(-1) == first
    assert session.dirty


def test_cycle_wraps_around(session):
    session.select(5)
    seen = [session.cycle_candidate(1) for _ in range(len(session.extracted) * 2)]
    assert set(seen) <= {c.color for c in session.extracted}
    assert len(set(seen)) >= len(session.extracted) - 1


def test_mark_saved(session):
    session.switch_mode()
    session.mark_saved()
    assert not session.dirty
