"""
Load aggregation for a beam carrying slab panels, a wall and point loads.

Slab load transfer (equivalent UDL on the supporting beam):
- One-way panel: w·Lx/2
- Two-way panel, short edge (triangular): w·Lx/3
- Two-way panel, long edge (trapezoidal): w·Lx/2·(1 - 1/(3β²)), β = Ly/Lx

The trapezoidal value is the usual equivalent-UDL simplification for
moment and shear, not the exact load shape.
"""

from loguru import logger

from rcbeam.models.inputs import (
    DesignInputs, DisabledSlab, OneWaySlab, PointLoad, SupportEdge, TwoWaySlab,
)
from rcbeam.models.outputs import LoadResult
from rcbeam.utils.constants import CONCRETE_UNIT_WEIGHT, LOAD_FACTOR


def slab_udl(side, area_load: float) -> float:
    """
    Load per metre run transferred to the beam from one slab panel.

    Args:
        side: DisabledSlab, OneWaySlab or TwoWaySlab
        area_load: Total slab load in kN/m²

    Returns:
        Service UDL in kN/m
    """
    if isinstance(side, DisabledSlab):
        return 0.0

    if isinstance(side, OneWaySlab):
        return area_load * side.lx / 2

    if isinstance(side, TwoWaySlab):
        if side.support_edge == SupportEdge.SHORT:
            return area_load * side.lx / 3
        beta = side.aspect_ratio
        return area_load * side.lx / 2 * (1 - 1 / (3 * beta ** 2))

    raise TypeError(f"Unknown slab side: {side!r}")


class LoadAggregator:
    """
    Factored design load per unit length and factored point loads.

    Concrete unit weight and the load factor are explicit constants of the
    aggregator; masonry density always comes from the wall input.
    """

    def __init__(
        self,
        concrete_unit_weight: float = CONCRETE_UNIT_WEIGHT,
        load_factor: float = LOAD_FACTOR,
    ):
        self.concrete_unit_weight = concrete_unit_weight
        self.load_factor = load_factor

    def calculate(self, inputs: DesignInputs) -> LoadResult:
        """
        Aggregate slab, self-weight and wall loads.

        Args:
            inputs: Validated design inputs

        Returns:
            LoadResult with service components and factored totals
        """
        slab = inputs.slab
        beam = inputs.beam
        wall = inputs.wall

        # Slab load per m²
        slab_self_weight = slab.thickness / 1000 * self.concrete_unit_weight
        total_slab_load_area = slab_self_weight + slab.live_load + slab.floor_finish

        # Transfer to beam
        udl_left = slab_udl(slab.left, total_slab_load_area)
        udl_right = slab_udl(slab.right, total_slab_load_area)
        udl_total_slab = udl_left + udl_right

        beam_self_weight = (beam.width / 1000) * (beam.depth / 1000) * self.concrete_unit_weight
        wall_load = (wall.thickness / 1000) * wall.height * wall.density

        total_service_udl = udl_total_slab + beam_self_weight + wall_load
        total_design_udl = total_service_udl * self.load_factor

        factored_point_loads = tuple(
            PointLoad(value=p.value * self.load_factor, distance=p.distance)
            for p in inputs.point_loads
        )

        logger.debug(
            "Loads: slab {:.2f} kN/m² | left {:.2f} right {:.2f} self {:.2f} wall {:.2f} kN/m "
            "| wu = {:.2f} kN/m, {} point load(s)",
            total_slab_load_area, udl_left, udl_right, beam_self_weight, wall_load,
            total_design_udl, len(factored_point_loads),
        )

        return LoadResult(
            slab_self_weight=slab_self_weight,
            total_slab_load_area=total_slab_load_area,
            udl_from_left_slab=udl_left,
            udl_from_right_slab=udl_right,
            udl_total_slab=udl_total_slab,
            beam_self_weight=beam_self_weight,
            wall_load=wall_load,
            total_service_udl=total_service_udl,
            load_factor=self.load_factor,
            total_design_udl=total_design_udl,
            factored_point_loads=factored_point_loads,
        )
