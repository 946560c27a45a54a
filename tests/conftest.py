"""Shared fixtures: the reference beam used throughout the test suite."""
import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rcbeam.core.beam_design import BeamDesignEngine
from rcbeam.models.inputs import (
    BeamInput, DesignInputs, MaterialInput, SlabInput, TwoWaySlab, WallInput,
)


def make_inputs(**overrides) -> DesignInputs:
    """Reference beam with any top-level section replaced."""
    sections = dict(
        slab=SlabInput(
            thickness=125,
            live_load=3.0,
            floor_finish=1.0,
            left=TwoWaySlab(lx=3.0, ly=4.5, support_edge="short"),
        ),
        beam=BeamInput(width=230, depth=450, span=3.0, effective_cover=25),
        wall=WallInput(height=3.0, thickness=230, density=20),
        materials=MaterialInput(
            concrete_grade="M20", steel_grade="Fe500", main_bar_dia=16, stirrup_bar_dia=8,
        ),
    )
    sections.update(overrides)
    return DesignInputs(**sections)


@pytest.fixture
def reference_inputs():
    return make_inputs()


@pytest.fixture(scope="module")
def reference_run():
    """Run the design once and share (loads, analysis, result) across a module."""
    return BeamDesignEngine().design(make_inputs())
