"""Tests for defaults and config root resolution."""

import logging
from pathlib import Path

from nuri.config import clamp_min_contrast, resolve_config_home


def test_contrast_in_range_is_unchanged(caplog):
    with caplog.at_level(logging.WARNING):
        assert clamp_min_contrast(4.5) == 4.5
    assert not caplog.records


def test_contrast_out_of_range_is_clamped_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        assert clamp_min_contrast(30) == 21.0
        assert clamp_min_contrast(0.5) == 1.0
    assert len(caplog.records) == 2
    assert "outside" in caplog.text


def test_xdg_config_home_wins():
    environ = {"XDG_CONFIG_HOME": "/tmp/xdg", "HOME": "/home/u"}
    assert resolve_config_home(environ) == Path("/tmp/xdg")


def test_home_fallback():
    assert resolve_config_home({"HOME": "/home/u"}) == Path("/home/u/.config")


def test_empty_xdg_is_ignored():
    assert resolve_config_home({"XDG_CONFIG_HOME": "", "HOME": "/home/u"}) == Path("/home/u/.config")


def test_no_variables_uses_expanduser():
    assert resolve_config_home({}) == Path("~").expanduser() / ".config"
