"""
Main beam design orchestrator per IS 456:2000.

Coordinates the complete design workflow:
1. Load aggregation (slab transfer + self weight + wall + point loads)
2. Section analysis (Mu, Vu)
3. Flexural design
4. Shear design
5. Deflection check

Every stage reads its predecessor's record and returns a new one; nothing
is mutated, so the same inputs always give an identical result.
"""

from typing import Tuple

from loguru import logger

from rcbeam.codes.base_code import DesignCode
from rcbeam.codes.is456 import IS456
from rcbeam.config import DEFAULT_SETTINGS, DesignSettings
from rcbeam.core.analysis import SectionAnalyzer
from rcbeam.core.flexure import FlexureDesigner
from rcbeam.core.loads import LoadAggregator
from rcbeam.core.serviceability import ServiceabilityChecker
from rcbeam.core.shear import ShearDesigner
from rcbeam.models.inputs import DesignInputs
from rcbeam.models.outputs import (
    AnalysisResult, DesignResult, DesignSnapshot, LoadResult,
)


class BeamDesignEngine:
    """
    Main calculation engine for a simply supported RC beam.

    Key features:
    - One-way / two-way (triangular, trapezoidal) slab load transfer
    - Point loads superposed on the factored UDL
    - Singly reinforced design with doubly-reinforced flagging
    - Nominal/design stirrups with section-failure detection
    - Span/depth deflection check
    """

    def __init__(self, settings: DesignSettings = None, code: DesignCode = None):
        self.settings = settings or DEFAULT_SETTINGS
        self.code = code or IS456()
        self.load_aggregator = LoadAggregator(
            concrete_unit_weight=self.settings.concrete_unit_weight,
            load_factor=self.settings.load_factor,
        )
        self.section_analyzer = SectionAnalyzer()
        self.flexure_designer = FlexureDesigner(self.code)
        self.shear_designer = ShearDesigner(self.code)
        self.serviceability_checker = ServiceabilityChecker(self.code)

    def design(self, inputs: DesignInputs) -> Tuple[LoadResult, AnalysisResult, DesignResult]:
        """
        Execute complete beam design workflow.

        Args:
            inputs: DesignInputs with all parameters

        Returns:
            (LoadResult, AnalysisResult, DesignResult)
        """
        warnings = []

        fck = inputs.fck
        fy = inputs.fy
        b = inputs.beam.width

        loads = self.load_aggregator.calculate(inputs)
        analysis = self.section_analyzer.analyze(inputs, loads)
        d = analysis.effective_depth

        flexure = self.flexure_designer.design(
            moment=analysis.max_moment,
            width=b,
            effective_depth=d,
            fck=fck,
            fy=fy,
            bar_dia=inputs.materials.main_bar_dia,
        )

        if flexure.is_doubly_reinforced:
            warnings.append(
                f"Mu ({analysis.max_moment:.1f} kNm) exceeds Mu,lim ({flexure.mu_lim:.1f} kNm). "
                "Section is doubly reinforced; tension steel is reported at Mu,lim and "
                "compression steel is not designed. Increase depth or width."
            )

        shear = self.shear_designer.design(
            shear_force=analysis.max_shear,
            width=b,
            effective_depth=d,
            fck=fck,
            fy=fy,
            ast_provided=flexure.ast_provided,
            stirrup_dia=inputs.materials.stirrup_bar_dia,
        )

        if shear.section_failed:
            warnings.append(
                f"Nominal shear stress ({shear.tau_v:.2f} N/mm²) exceeds τc,max "
                f"({shear.tau_c_max:.2f} N/mm²). Section fails in shear; revise geometry."
            )

        deflection = self.serviceability_checker.check_deflection(
            span_m=inputs.beam.span,
            effective_depth=d,
            ast_required=flexure.ast_required,
            ast_provided=flexure.ast_provided,
            width=b,
            fy=fy,
        )

        if not deflection.deflection_check_passed:
            warnings.append(
                f"Span/depth ratio {deflection.actual_ld:.1f} exceeds allowable "
                f"{deflection.allowable_ld:.1f}. Increase depth."
            )

        result = DesignResult(
            flexure=flexure,
            shear=shear,
            deflection=deflection,
            design_code=self.code.code_name,
            warnings=tuple(warnings),
        )

        logger.debug(
            "Design {}: {} | {}",
            result.overall_status.value, result.reinforcement_summary,
            "L/d OK" if deflection.deflection_check_passed else "L/d FAILS",
        )

        return loads, analysis, result

    def snapshot(self, inputs: DesignInputs) -> DesignSnapshot:
        """Run the design and bundle inputs with all three result records."""
        loads, analysis, result = self.design(inputs)
        return DesignSnapshot(inputs=inputs, loads=loads, analysis=analysis, design=result)


def design(
    inputs: DesignInputs,
    settings: DesignSettings = None,
) -> Tuple[LoadResult, AnalysisResult, DesignResult]:
    """Design one beam with a fresh engine."""
    return BeamDesignEngine(settings).design(inputs)
