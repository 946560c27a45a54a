"""
Output data models for IS 456 beam design results.
"""

from enum import Enum
from typing import Iterator, Optional, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict

from .inputs import DesignInputs, PointLoad


class DesignStatus(str, Enum):
    """Status of a design check."""
    PASS = "pass"
    FAIL = "fail"
    WARNING = "warning"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class CalculationStep(_Frozen):
    """Single calculation step for transparency."""
    step_number: int
    description: str
    formula: str
    substitution: str
    result: float
    unit: str
    code_reference: Optional[str] = None


class LoadResult(_Frozen):
    """Load aggregation results."""
    # Slab (per unit area)
    slab_self_weight: float  # kN/m²
    total_slab_load_area: float  # kN/m²

    # Transfer to beam (per unit length, service)
    udl_from_left_slab: float  # kN/m
    udl_from_right_slab: float  # kN/m
    udl_total_slab: float  # kN/m
    beam_self_weight: float  # kN/m
    wall_load: float  # kN/m
    total_service_udl: float  # kN/m

    # Factored
    load_factor: float
    total_design_udl: float  # kN/m
    factored_point_loads: Tuple[PointLoad, ...] = ()


class AnalysisResult(_Frozen):
    """Simply supported span under factored UDL and point loads."""
    max_moment: float  # Mu in kNm
    max_shear: float  # Vu in kN
    effective_depth: float  # d in mm

    # Loading the diagrams are derived from
    span: float  # m
    design_udl: float  # kN/m
    point_loads: Tuple[PointLoad, ...] = ()

    @property
    def left_reaction(self) -> float:
        """Reaction at the left support (kN)."""
        L = self.span
        return self.design_udl * L / 2 + sum(
            p.value * (L - p.distance) / L for p in self.point_loads
        )

    def moment_at(self, x: float) -> float:
        """Bending moment at x metres from the left support (kNm)."""
        L = self.span
        m = self.design_udl * x * (L - x) / 2
        for p in self.point_loads:
            if x <= p.distance:
                m += p.value * x * (L - p.distance) / L
            else:
                m += p.value * p.distance * (L - x) / L
        return m

    def shear_at(self, x: float) -> float:
        """Shear force just right of x metres from the left support (kN)."""
        v = self.left_reaction - self.design_udl * x
        for p in self.point_loads:
            if p.distance < x:
                v -= p.value
        return v

    def moment_diagram(self, segments: int = 40) -> Iterator[Tuple[float, float]]:
        """Yield (x, M) samples over the span."""
        for x in np.linspace(0.0, self.span, segments + 1):
            yield float(x), self.moment_at(float(x))

    def shear_diagram(self, segments: int = 40) -> Iterator[Tuple[float, float]]:
        """Yield (x, V) samples over the span."""
        for x in np.linspace(0.0, self.span, segments + 1):
            yield float(x), self.shear_at(float(x))


class FlexuralDesignOutput(_Frozen):
    """Flexural design results."""
    status: DesignStatus

    # Design forces
    design_moment: float  # Mu in kNm
    k_lim: float
    mu_lim: float  # Mu_lim in kNm
    is_doubly_reinforced: bool

    # Tension reinforcement
    ast_computed: float  # From the moment equation (mm²)
    ast_min: float  # 0.85bd/fy (mm²)
    ast_required: float  # mm²
    bar_diameter: float  # mm
    bar_area: float  # mm²
    number_of_bars: int
    ast_provided: float  # mm²
    pt_provided: float  # %

    calculation_steps: Tuple[CalculationStep, ...] = ()

    @property
    def arrangement(self) -> str:
        """Bar arrangement, e.g. '3-16φ'."""
        return f"{self.number_of_bars}-{self.bar_diameter:g}φ"


class ShearDesignOutput(_Frozen):
    """Shear design results."""
    status: DesignStatus

    design_shear: float  # Vu in kN
    tau_v: float  # Nominal shear stress (N/mm²)
    pt: float  # %
    tau_c: float  # Concrete shear capacity (N/mm²)
    tau_c_max: float  # Maximum shear stress (N/mm²)

    shear_reinforcement_required: bool
    section_failed: bool

    stirrup_diameter: float  # mm
    stirrup_legs: int
    asv: float  # mm²
    vus: float  # Shear carried by stirrups (kN)
    spacing_max: float  # mm
    stirrup_spacing: int  # mm, 0 when the section fails

    calculation_steps: Tuple[CalculationStep, ...] = ()


class DeflectionCheckOutput(_Frozen):
    """Span/depth deflection check results."""
    status: DesignStatus

    basic_ld: float
    pt: float  # % (floored for the logarithm)
    fs: float  # Service stress in steel (N/mm²)
    modification_factor_kt: float
    allowable_ld: float
    actual_ld: float
    deflection_check_passed: bool

    calculation_steps: Tuple[CalculationStep, ...] = ()


class DesignResult(_Frozen):
    """Complete beam design output."""
    flexure: FlexuralDesignOutput
    shear: ShearDesignOutput
    deflection: DeflectionCheckOutput

    design_code: str = "IS 456:2000"
    warnings: Tuple[str, ...] = ()

    @property
    def overall_status(self) -> DesignStatus:
        statuses = [self.flexure.status, self.shear.status, self.deflection.status]
        if DesignStatus.FAIL in statuses:
            return DesignStatus.FAIL
        if DesignStatus.WARNING in statuses:
            return DesignStatus.WARNING
        return DesignStatus.PASS

    @property
    def is_safe(self) -> bool:
        """Check if all design checks pass."""
        return self.overall_status == DesignStatus.PASS

    @property
    def mu_lim(self) -> float:
        return self.flexure.mu_lim

    @property
    def is_doubly_reinforced(self) -> bool:
        return self.flexure.is_doubly_reinforced

    @property
    def ast_required(self) -> float:
        return self.flexure.ast_required

    @property
    def ast_provided(self) -> float:
        return self.flexure.ast_provided

    @property
    def stirrup_spacing(self) -> int:
        return self.shear.stirrup_spacing

    @property
    def reinforcement_summary(self) -> str:
        """Quick summary of reinforcement."""
        summary = f"Bottom: {self.flexure.arrangement}"
        if self.shear.section_failed:
            summary += " | Stirrups: SECTION FAILS IN SHEAR"
        else:
            summary += (
                f" | Stirrups: {self.shear.stirrup_legs}L-"
                f"{self.shear.stirrup_diameter:g}φ @ {self.shear.stirrup_spacing}mm c/c"
            )
        return summary


class DesignSnapshot(_Frozen):
    """Read-only bundle of one design run, handed to report consumers."""
    inputs: DesignInputs
    loads: LoadResult
    analysis: AnalysisResult
    design: DesignResult
