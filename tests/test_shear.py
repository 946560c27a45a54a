"""Shear design with vertical two-legged stirrups."""
import pytest

from rcbeam.core.shear import ShearDesigner
from rcbeam.models.outputs import DesignStatus
from rcbeam.utils.constants import bar_area


def design_shear(vu, **kw):
    args = dict(width=230, effective_depth=425, fck=20, fy=500, ast_provided=402.12, stirrup_dia=8)
    args.update(kw)
    return ShearDesigner().design(shear_force=vu, **args)


class TestDesignedStirrups:

    @pytest.fixture(scope="class")
    def reference_shear(self):
        return design_shear(52.903)

    def test_stresses(self, reference_shear):
        assert reference_shear.tau_v == pytest.approx(0.5412, abs=1e-3)
        assert reference_shear.tau_c == 0.44
        assert reference_shear.tau_c_max == 2.8

    def test_reinforcement_required(self, reference_shear):
        assert reference_shear.shear_reinforcement_required
        assert reference_shear.vus > 0
        assert reference_shear.asv == pytest.approx(2 * bar_area(8))

    def test_spacing_capped_at_300(self, reference_shear):
        assert reference_shear.stirrup_spacing == 300
        assert reference_shear.status == DesignStatus.PASS

    def test_heavy_shear_reduces_spacing(self):
        out = design_shear(200.0)
        assert not out.section_failed
        Vus = 200.0 * 1000 - out.tau_c * 230 * 425
        expected = int(0.87 * 500 * out.asv * 425 / Vus)
        assert out.stirrup_spacing == expected
        assert out.stirrup_spacing < 300


class TestNominalStirrups:

    def test_low_shear_uses_nominal_spacing(self):
        out = design_shear(20.0)
        assert not out.shear_reinforcement_required
        assert out.vus == 0.0
        assert out.stirrup_spacing == 300

    def test_nominal_spacing_governed_by_width(self):
        out = design_shear(10.0, width=600, effective_depth=800)
        expected = int(out.asv * 0.87 * 500 / (0.4 * 600))
        assert out.stirrup_spacing == min(expected, 300)

    def test_spacing_respects_three_quarters_depth(self):
        out = design_shear(10.0, width=230, effective_depth=200)
        assert out.stirrup_spacing <= 0.75 * 200


class TestSectionFailure:

    def test_excess_stress_fails_section(self):
        out = design_shear(400.0)
        assert out.section_failed
        assert out.stirrup_spacing == 0
        assert not out.shear_reinforcement_required
        assert out.status == DesignStatus.FAIL
        assert out.tau_v > out.tau_c_max

    def test_higher_grade_raises_limit(self):
        out = design_shear(300.0, fck=40)
        assert out.tau_c_max == 4.0
        assert not out.section_failed
