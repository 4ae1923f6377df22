"""Tests for vertical flip and mirror + reverse."""

import pytest

from tests.conftest import ARC_PATH, RECT_PATH, RELATIVE_WAVE_PATH, WAVE_PATH

from wavemask.engine.inverter import invert_path
from wavemask.engine.transforms import invert, mirror_reverse, vertical_flip
from wavemask.svg.commands import PathData
from wavemask.svg.serializer import serialize_path
from wavemask.svg.tokenizer import parse_path_data


def _flip(d: str, height: float = 100.0) -> str:
    return serialize_path(vertical_flip(parse_path_data(d), height))


def _mirror(d: str, width: float = 1000.0) -> str:
    return serialize_path(mirror_reverse(parse_path_data(d), width))


def _assert_same(a: PathData, b: PathData) -> None:
    assert a.letters == b.letters
    for ca, cb in zip(a, b):
        assert ca.args == pytest.approx(cb.args)


# --- vertical flip ---


def test_flip_rect():
    assert _flip(RECT_PATH) == "M0,0 L1000,0 L1000,100 L0,100 Z"


@pytest.mark.parametrize("d", [RECT_PATH, WAVE_PATH, RELATIVE_WAVE_PATH, ARC_PATH])
def test_double_flip_is_identity(d):
    p = parse_path_data(d)
    _assert_same(vertical_flip(vertical_flip(p, 100.0), 100.0), p)


def test_relative_delta_sign_only():
    p = vertical_flip(parse_path_data("m3,-4 v22.53 l1,2,3,4"), 5000.0)
    assert p[0].args == (3.0, 4.0)
    assert p[1].args == (-22.53,)
    assert p[2].args == (1.0, -2.0, 3.0, -4.0)


def test_horizontal_line_untouched():
    assert _flip("H40 h-5") == "H40 h-5"


def test_absolute_vertical_line():
    assert _flip("V30") == "V70"


def test_curve_control_points_flipped():
    assert _flip("C1,2,3,4,5,6 S1,2,3,4 Q1,2,3,4 T1,2", 10.0) == "C1,8,3,6,5,4 S1,8,3,6 Q1,8,3,6 T1,8"


def test_arc_only_endpoint_y_flipped():
    p = vertical_flip(parse_path_data(ARC_PATH), 100.0)
    assert p[1].args == (25.0, 25.0, 0.0, 0.0, 1.0, 50.0, 80.0)


def test_arc_sweep_flag_not_toggled():
    # A geometric mirror would turn sweep 1 into 0; the flag is kept as authored
    p = vertical_flip(parse_path_data("A5,5 0 1 1 10,10"), 100.0)
    assert p[0].args[3:5] == (1.0, 1.0)


def test_relative_arc_passed_through():
    assert _flip("a5,5 0 0 1 10,-10") == "a5,5,0,0,1,10,-10"


def test_short_argument_list_mapped_elementwise():
    assert _flip("C1,2,3", 10.0) == "C1,8,3"
    assert _flip("L5", 10.0) == "L5"


def test_flip_empty():
    assert len(vertical_flip(PathData(), 100.0)) == 0


# --- mirror + reverse ---


def test_mirror_rect():
    assert _mirror(RECT_PATH) == "Z L1000,0 L0,0 L0,100 M1000,100"


def test_mirror_horizontal_and_vertical_lines():
    assert _mirror("H0 h5 V30 v-3") == "v-3 V30 h-5 H1000"


def test_mirror_arc_endpoint_x_only():
    p = mirror_reverse(parse_path_data("A25,25 0 0 1 50,20"), 200.0)
    assert p[0].args == (25.0, 25.0, 0.0, 0.0, 1.0, 150.0, 20.0)


@pytest.mark.parametrize("d", [RECT_PATH, WAVE_PATH, RELATIVE_WAVE_PATH])
def test_double_mirror_restores_order_and_x(d):
    p = parse_path_data(d)
    _assert_same(mirror_reverse(mirror_reverse(p, 1000.0), 1000.0), p)


def test_mirror_empty():
    assert len(mirror_reverse(PathData(), 1000.0)) == 0


# --- full inversion ---


def test_invert_relative_wave():
    out = invert_path(RELATIVE_WAVE_PATH, 1000.0, 100.0)
    assert out.startswith("Z H1000 v-22.53 c-255.72,0,-358.35,-119.2,-673.28,-77.47 S")
    assert out.endswith("M1000,0")


def test_invert_composes_flip_then_mirror():
    p = parse_path_data(WAVE_PATH)
    assert invert(p, 1000.0, 100.0) == mirror_reverse(vertical_flip(p, 100.0), 1000.0)


def test_invert_empty_string():
    assert invert_path("") == ""
    assert invert_path("1 2 3") == ""


def test_invert_overflowing_input_stays_numeric():
    out = invert_path("M0,1e999 L10,10", 1000.0, 100.0)
    assert out == "L990,90 M1000"
    assert "inf" not in out and "nan" not in out
