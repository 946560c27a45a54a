"""
Section analysis of a simply supported span.

Superposes the factored UDL with the factored point loads:
- M(x) = w·x·(L-x)/2 + Σ Pi·x·(L-di)/L (x ≤ di) or Pi·di·(L-x)/L (x > di)
- Peak moment is the largest M over midspan, every load point and every
  zero-shear location between load points (exact for a single span).
- Peak shear = w·L/2 + Σ Pi·max(di, L-di)/L, the worst end reaction of
  each point load summed with the UDL reaction.
"""

from typing import List

from loguru import logger

from rcbeam.models.inputs import DesignInputs
from rcbeam.models.outputs import AnalysisResult, LoadResult


class SectionAnalyzer:
    """Peak bending moment and shear for a simply supported beam."""

    def analyze(self, inputs: DesignInputs, loads: LoadResult) -> AnalysisResult:
        """
        Derive design moment and shear from the aggregated loads.

        Args:
            inputs: Design inputs (span and section)
            loads: Aggregated factored loads

        Returns:
            AnalysisResult with Mu, Vu, effective depth and the loading
        """
        L = inputs.beam.span
        w = loads.total_design_udl
        point_loads = loads.factored_point_loads

        section = AnalysisResult(
            max_moment=0.0,
            max_shear=0.0,
            effective_depth=inputs.beam.effective_depth,
            span=L,
            design_udl=w,
            point_loads=point_loads,
        )

        max_moment = max(section.moment_at(x) for x in self._moment_stations(section))

        max_shear = w * L / 2 + sum(
            p.value * max(p.distance, L - p.distance) / L for p in point_loads
        )

        logger.debug(
            "Analysis: L = {} m, Mu = {:.2f} kNm, Vu = {:.2f} kN, d = {:.0f} mm",
            L, max_moment, max_shear, section.effective_depth,
        )

        return section.model_copy(update={"max_moment": max_moment, "max_shear": max_shear})

    def _moment_stations(self, section: AnalysisResult) -> List[float]:
        """Midspan, load points and zero-shear points inside each segment."""
        L = section.span
        w = section.design_udl
        load_points = sorted({p.distance for p in section.point_loads})

        stations = [L / 2] + load_points
        if w <= 0:
            return stations

        bounds = [0.0] + load_points + [L]
        for a, b in zip(bounds[:-1], bounds[1:]):
            if b <= a:
                continue
            # Shear is linear in w between load points
            mid = (a + b) / 2
            x0 = mid + section.shear_at(mid) / w
            if a < x0 < b:
                stations.append(x0)
        return stations
