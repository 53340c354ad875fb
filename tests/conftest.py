"""
Pytest configuration and shared fixtures for contracalc tests.
"""

import pytest

from contracalc.calculator import (
    PITCH_5MM,
    BeltRouting,
    design_from_spacing,
)


@pytest.fixture
def pitch():
    """5mm belt pitch in inches."""
    return PITCH_5MM


@pytest.fixture
def normal_design():
    """20T/40T normal belt about 5in apart (rounded 80, floor 81, ceiling 82)."""
    return design_from_spacing(20, 40, 5.0, routing=BeltRouting.NORMAL)


@pytest.fixture
def contra_design():
    """20T/20T contra belt about 4in apart (rounded 60, floor 62, ceiling 63)."""
    return design_from_spacing(20, 20, 4.0, routing=BeltRouting.CONTRA)
