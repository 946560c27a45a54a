"""Slab load transfer and load aggregation."""
import pytest

from conftest import make_inputs
from rcbeam.core.loads import LoadAggregator, slab_udl
from rcbeam.models.inputs import (
    DisabledSlab, OneWaySlab, PointLoad, SlabInput, TwoWaySlab, WallInput,
)


class TestSlabTransfer:
    """Equivalent UDL delivered to the beam by one panel."""

    def test_disabled_side_contributes_nothing(self):
        assert slab_udl(DisabledSlab(), 7.125) == 0.0

    def test_one_way(self):
        assert slab_udl(OneWaySlab(lx=3.0), 7.125) == pytest.approx(7.125 * 3.0 / 2)

    def test_two_way_short_edge_is_triangular(self):
        side = TwoWaySlab(lx=3.0, ly=4.5, support_edge="short")
        assert slab_udl(side, 7.125) == pytest.approx(7.125)

    def test_two_way_long_edge_is_trapezoidal(self):
        side = TwoWaySlab(lx=3.0, ly=4.5, support_edge="long")
        beta = 1.5
        expected = 7.125 * 3.0 / 2 * (1 - 1 / (3 * beta ** 2))
        assert slab_udl(side, 7.125) == pytest.approx(expected)

    def test_trapezoidal_exceeds_triangular(self):
        short = TwoWaySlab(lx=3.0, ly=4.5, support_edge="short")
        long = TwoWaySlab(lx=3.0, ly=4.5, support_edge="long")
        assert slab_udl(long, 5.0) > slab_udl(short, 5.0)

    def test_square_panel_edges_agree(self):
        """At β = 1 the trapezoid degenerates to the triangle."""
        short = TwoWaySlab(lx=4.0, ly=4.0, support_edge="short")
        long = TwoWaySlab(lx=4.0, ly=4.0, support_edge="long")
        assert slab_udl(long, 6.0) == pytest.approx(slab_udl(short, 6.0))

    def test_unknown_side_rejected(self):
        with pytest.raises(TypeError):
            slab_udl(object(), 5.0)


class TestLoadAggregator:
    """Service components and factored totals."""

    def test_reference_components(self, reference_inputs):
        loads = LoadAggregator().calculate(reference_inputs)
        assert loads.slab_self_weight == pytest.approx(3.125)
        assert loads.total_slab_load_area == pytest.approx(7.125)
        assert loads.udl_from_left_slab == pytest.approx(7.125)
        assert loads.udl_from_right_slab == 0.0
        assert loads.beam_self_weight == pytest.approx(2.5875)
        assert loads.wall_load == pytest.approx(13.8)
        assert loads.total_service_udl == pytest.approx(23.5125)
        assert loads.total_design_udl == pytest.approx(35.26875)

    def test_disabled_sides_give_zero_slab_load(self):
        inputs = make_inputs(slab=SlabInput(thickness=125, live_load=3.0))
        loads = LoadAggregator().calculate(inputs)
        assert loads.udl_total_slab == 0.0

    def test_both_sides_add(self):
        slab = SlabInput(
            thickness=125, live_load=3.0,
            left=OneWaySlab(lx=3.0), right=OneWaySlab(lx=3.0),
        )
        loads = LoadAggregator().calculate(make_inputs(slab=slab))
        assert loads.udl_total_slab == pytest.approx(2 * loads.udl_from_left_slab)

    def test_no_wall(self):
        loads = LoadAggregator().calculate(make_inputs(wall=WallInput()))
        assert loads.wall_load == 0.0

    def test_point_loads_are_factored(self):
        inputs = make_inputs(point_loads=(PointLoad(value=10, distance=1.0),))
        loads = LoadAggregator().calculate(inputs)
        assert loads.factored_point_loads[0].value == pytest.approx(15.0)
        assert loads.factored_point_loads[0].distance == 1.0

    def test_design_udl_is_factored_service_udl(self, reference_inputs):
        loads = LoadAggregator(load_factor=1.2).calculate(reference_inputs)
        assert loads.total_design_udl == pytest.approx(1.2 * loads.total_service_udl)

    def test_concrete_unit_weight_is_configurable(self, reference_inputs):
        loads = LoadAggregator(concrete_unit_weight=24).calculate(reference_inputs)
        assert loads.beam_self_weight == pytest.approx(0.23 * 0.45 * 24)
