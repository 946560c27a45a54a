"""IS 456 code provisions."""
import pytest

from rcbeam.codes.is456 import IS456, TAU_C_TABLE, interpolate_tau_c


@pytest.fixture(scope="module")
def code():
    return IS456()


class TestShearStrengthTable:

    def test_table_points_returned_exactly(self):
        assert TAU_C_TABLE.pt == (0.15, 0.25, 0.50, 0.75, 1.00, 1.25, 1.50, 2.00)
        for pt, tau in zip(TAU_C_TABLE.pt, TAU_C_TABLE.tau_c):
            assert interpolate_tau_c(pt, 20) == tau

    @pytest.mark.parametrize("pt, expected", [(1.75, 0.76), (2.5, 0.79), (3.0, 0.79)])
    def test_held_flat_beyond_two_percent(self, pt, expected):
        assert interpolate_tau_c(pt, 20) == expected

    def test_rounded_to_two_decimals(self):
        # 0.36 + 0.48 x 0.161 = 0.437 at the reference beam's steel ratio
        assert interpolate_tau_c(0.411, 20) == 0.44

    def test_linear_between_points(self):
        assert interpolate_tau_c(0.375, 20) == pytest.approx((0.36 + 0.48) / 2)

    def test_clamped_below_and_above(self):
        assert interpolate_tau_c(0.01, 20) == 0.28
        assert interpolate_tau_c(5.0, 20) == 0.79

    def test_grade_scaling(self):
        assert interpolate_tau_c(1.0, 30) == 0.68  # 0.62 x 1.10 = 0.682

    def test_monotonic_in_pt_and_grade(self):
        values = [interpolate_tau_c(0.1 * i, 25) for i in range(1, 35)]
        assert values == sorted(values)
        assert interpolate_tau_c(0.8, 35) > interpolate_tau_c(0.8, 25)


class TestProvisions:

    @pytest.mark.parametrize("fck, expected", [(20, 2.8), (25, 3.1), (30, 3.5), (35, 3.5), (40, 4.0)])
    def test_maximum_shear_stress(self, code, fck, expected):
        assert code.get_maximum_shear_stress(fck) == expected

    def test_unknown_steel_grade_defaults(self, code):
        assert code.get_limiting_moment_coefficient(250) == 0.138

    def test_minimum_steel(self, code):
        assert code.get_minimum_tension_steel(230, 425, 415) == pytest.approx(0.85 * 230 * 425 / 415)

    def test_basic_span_depth(self, code):
        assert code.get_span_depth_ratio() == 20

    def test_modification_factor_bounds(self, code):
        assert code.get_modification_factor_tension(2.0, 50) == 2.0
        assert code.get_modification_factor_tension(0.1, 300) == 0.7
        assert code.get_modification_factor_tension(3.0, 320) == pytest.approx(
            1 / (0.225 + 0.0032 * 320 - 0.625 * 0.47712125), rel=1e-6,
        )

    def test_modification_factor_floors_pt(self, code):
        assert code.get_modification_factor_tension(0.0, 240) == code.get_modification_factor_tension(0.1, 240)

    def test_code_name(self, code):
        assert code.code_name == "IS 456:2000"
