"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Authored top-of-section wave (viewBox 0 0 1000 100)
WAVE_PATH = "M0,100S32.06,0,326.72,0C582.44,0,685.07,119.2,1000,77.47V100H0Z"

# Same wave with the conventional bottom-edge closure
BASELINE_WAVE_PATH = "M0,100 S32.06,0,326.72,0 C582.44,0,685.07,119.2,1000,77.47 L1000,100 L0,100 Z"

# Relative form of the authored top mask
RELATIVE_WAVE_PATH = "M0,100S32.06,0,326.72,0c255.72,0,358.35,119.2,673.28,77.47v22.53H0Z"

RECT_PATH = "M0,100 L1000,100 L1000,0 L0,0 Z"

WAVE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 1000 100">'
    '<path d="M0,100S32.06,0,326.72,0c255.72,0,358.35,119.2,673.28,77.47v22.53H0Z"/></svg>'
)

NO_PATH_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10"><rect width="5" height="5"/></svg>'

ARC_PATH = "M10,80 A25,25 0 0 1 50,20 L60,30"


@pytest.fixture
def wave_path() -> str:
    return WAVE_PATH


@pytest.fixture
def baseline_wave_path() -> str:
    return BASELINE_WAVE_PATH


@pytest.fixture
def rect_path() -> str:
    return RECT_PATH
