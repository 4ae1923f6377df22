"""Tests for mask documents, whole-SVG inversion and coverage."""

import logging

import pytest

from tests.conftest import BASELINE_WAVE_PATH, NO_PATH_SVG, RELATIVE_WAVE_PATH, WAVE_SVG

from wavemask.engine.coverage import mask_coverage
from wavemask.engine.enclosure import EnclosureOutcome, enclose_path
from wavemask.engine.inverter import invert_path, invert_svg_mask
from wavemask.engine.masks import mask_url, section_masks


def test_mask_url_encoding():
    url = mask_url('<svg viewBox="0 0 1 1"/>')
    assert url.startswith("url('data:image/svg+xml,%3Csvg%20viewBox=%220%200%201%201%22/%3E")
    assert url.endswith("')")


def test_section_masks():
    pair = section_masks(BASELINE_WAVE_PATH, 1000, 100)
    assert "M0,100%20S32.06" in pair.top
    assert "M0,0%20L0,100%20S32.06" in pair.bottom
    assert pair.bottom.endswith("L1000,0%20Z%22/%3E%3C/svg%3E')")


def test_invert_svg_mask_uses_viewbox():
    out = invert_svg_mask(WAVE_SVG)
    expected = invert_path(RELATIVE_WAVE_PATH, 1000, 100)
    assert f'd="{expected}"' in out
    assert out.startswith('<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 1000 100">')


def test_invert_svg_mask_explicit_dimensions():
    out = invert_svg_mask(WAVE_SVG, width=500, height=50)
    assert f'd="{invert_path(RELATIVE_WAVE_PATH, 500, 50)}"' in out


def test_invert_svg_without_path_unchanged(caplog):
    assert invert_svg_mask(NO_PATH_SVG) == NO_PATH_SVG
    assert "No path found" in caplog.text


def test_full_rect_coverage():
    assert mask_coverage("M0,0 L1000,0 L1000,100 L0,100 Z", 1000, 100) == pytest.approx(1.0)


def test_coverage_clipped_to_viewbox():
    assert mask_coverage("M0,0 L2000,0 L2000,100 L0,100 Z", 1000, 100) == pytest.approx(1.0)
    assert mask_coverage("M0,50 L1000,50 L1000,100 L0,100 Z", 1000, 100) == pytest.approx(0.5)


def test_wave_and_enclosure_are_complementary():
    below = mask_coverage(BASELINE_WAVE_PATH, 1000, 100)
    above = mask_coverage(enclose_path(BASELINE_WAVE_PATH, 1000, 100), 1000, 100)
    assert 0.0 < below < 1.0
    assert below + above == pytest.approx(1.0, abs=0.01)


def test_empty_path_has_no_coverage():
    assert mask_coverage("", 1000, 100) == 0.0


def test_invert_svg_mask_keeps_root_id():
    svg = (
        '<svg id="mask" xmlns="http://www.w3.org/2000/svg" viewBox="0 0 1000 100">'
        '<path d="M0,100 L1000,100 L1000,0 L0,0 Z"/></svg>'
    )
    out = invert_svg_mask(svg)
    assert out == (
        '<svg id="mask" xmlns="http://www.w3.org/2000/svg" viewBox="0 0 1000 100">'
        '<path d="Z L1000,100 L0,100 L0,0 M1000,0"/></svg>'
    )


def test_section_masks_exposes_enclosure():
    pair = section_masks(BASELINE_WAVE_PATH, 1000, 100)
    assert pair.enclosure.outcome is EnclosureOutcome.MATCHED
    assert pair.bottom_path == enclose_path(BASELINE_WAVE_PATH, 1000, 100)


def test_section_masks_warns_once_on_fallback(caplog):
    with caplog.at_level(logging.WARNING, logger="wavemask.engine.enclosure"):
        pair = section_masks("M5,5 L10,10", 1000, 100)
    assert pair.enclosure.outcome is EnclosureOutcome.FALLBACK_APPLIED
    assert caplog.text.count("bottom baseline") == 1
