"""
IS 456:2000 code provisions for reinforced concrete beam design.

Key clauses implemented:
- Clause 23.2.1: Span/depth ratios and modification factor (Fig. 4)
- Clause 26.5.1.1: Minimum tension reinforcement
- Clause 38.1 / Annex G: Limiting moment of resistance
- Clause 40: Limit state of collapse - Shear
- Table 19: Design shear strength of concrete
- Table 20: Maximum shear stress
"""

import math
from typing import NamedTuple, Tuple

import numpy as np

from .base_code import DesignCode


class TauCTable(NamedTuple):
    """Design shear strength τc against pt% for one concrete grade."""
    fck: float
    pt: Tuple[float, ...]
    tau_c: Tuple[float, ...]


# Table 19, M20 row up to pt = 2.0; held flat beyond the last point.
# Other grades are scaled from this reference grade.
TAU_C_TABLE = TauCTable(
    fck=20,
    pt=(0.15, 0.25, 0.50, 0.75, 1.00, 1.25, 1.50, 2.00),
    tau_c=(0.28, 0.36, 0.48, 0.56, 0.62, 0.67, 0.72, 0.79),
)

PT_MIN = 0.15
PT_MAX = 3.0
GRADE_ADJUSTMENT_PER_MPA = 0.01
TAU_C_DECIMALS = 2


def interpolate_tau_c(pt: float, fck: float, table: TauCTable = TAU_C_TABLE) -> float:
    """
    Design shear strength of concrete from Table 19.

    pt is clamped to the table range before linear interpolation, then the
    reference-grade value is scaled by 1 + (fck - fck_ref) x 0.01 and
    rounded to two decimals, the precision Table 19 is published to.

    Args:
        pt: Percentage of tension reinforcement (100*As/bd)
        fck: Characteristic compressive strength of concrete (MPa)
        table: Reference-grade breakpoints

    Returns:
        τc in MPa (N/mm²)
    """
    pt = max(PT_MIN, min(pt, PT_MAX))
    tau_ref = float(np.interp(pt, table.pt, table.tau_c))
    grade_factor = 1 + (fck - table.fck) * GRADE_ADJUSTMENT_PER_MPA
    return round(tau_ref * grade_factor, TAU_C_DECIMALS)


class IS456(DesignCode):
    """
    IS 456:2000 - Indian Standard for Plain and Reinforced Concrete.
    Code of Practice for Plain and Reinforced Concrete (Fourth Revision).
    """

    # Mu,lim / (fck·b·d²) per Annex G, keyed by fy
    LIMITING_MOMENT_COEFFICIENT = {
        415: 0.138,
        500: 0.133,
        550: 0.129,
    }

    # Table 20: Maximum shear stress τc,max (N/mm²), lower bound fck per step
    MAX_SHEAR_STRESS = (
        (40, 4.0),
        (30, 3.5),
        (25, 3.1),
        (0, 2.8),
    )

    # Basic span/depth ratio for a simply supported span (Clause 23.2.1)
    BASIC_SPAN_DEPTH_RATIO = 20

    MODIFICATION_FACTOR_RANGE = (0.7, 2.0)
    PT_FLOOR_FOR_LOG = 0.1

    @property
    def code_name(self) -> str:
        return "IS 456:2000"

    def get_limiting_moment_coefficient(self, fy: float) -> float:
        """
        Limiting moment coefficient k such that Mu,lim = k·fck·b·d².

        Grades other than Fe500/Fe550 take the Fe415 value.
        """
        return self.LIMITING_MOMENT_COEFFICIENT.get(int(fy), 0.138)

    def get_minimum_tension_steel(self, b: float, d: float, fy: float) -> float:
        """
        Minimum tension reinforcement per Clause 26.5.1.1(a).

        As_min = 0.85·b·d / fy

        Returns:
            Area in mm²
        """
        return 0.85 * b * d / fy

    def get_shear_strength_concrete(self, pt: float, fck: float) -> float:
        """Design shear strength of concrete per Table 19."""
        return interpolate_tau_c(pt, fck)

    def get_maximum_shear_stress(self, fck: float) -> float:
        """
        Maximum shear stress per Table 20, as a step function of fck.

        Args:
            fck: Characteristic compressive strength (MPa)

        Returns:
            τc,max in MPa
        """
        for lower_bound, tau_max in self.MAX_SHEAR_STRESS:
            if fck >= lower_bound:
                return tau_max
        return self.MAX_SHEAR_STRESS[-1][1]

    def get_span_depth_ratio(self) -> float:
        """Basic span/effective depth ratio of a simply supported span, Clause 23.2.1."""
        return self.BASIC_SPAN_DEPTH_RATIO

    def get_modification_factor_tension(self, pt: float, fs: float) -> float:
        """
        Modification factor for tension reinforcement per Clause 23.2.1(c).

        Curve fit of Fig. 4:
            kt = 1 / (0.225 + 0.0032·fs - 0.625·log10(pt))

        Args:
            pt: Percentage of tension reinforcement provided
            fs: Steel stress at service load (MPa)

        Returns:
            Modification factor (kt), limited to the chart range 0.7-2.0
        """
        pt = max(pt, self.PT_FLOOR_FOR_LOG)
        denominator = 0.225 + 0.0032 * fs - 0.625 * math.log10(pt)

        kt = 1 / denominator if denominator > 0 else 1.0

        kt_min, kt_max = self.MODIFICATION_FACTOR_RANGE
        return max(kt_min, min(kt, kt_max))
