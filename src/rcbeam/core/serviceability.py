"""
Serviceability checks per IS 456:2000.

Implements:
- Deflection control by span/effective depth ratio (Clause 23.2.1)
"""

from loguru import logger

from rcbeam.codes.base_code import DesignCode
from rcbeam.codes.is456 import IS456
from rcbeam.models.outputs import CalculationStep, DeflectionCheckOutput, DesignStatus


class ServiceabilityChecker:
    """
    Serviceability checks per IS 456:2000.

    A failed deflection check is advisory: the design completes and the
    result carries a WARNING status.
    """

    def __init__(self, code: DesignCode = None):
        self.code = code or IS456()

    def check_deflection(
        self,
        span_m: float,           # Span (m)
        effective_depth: float,  # d (mm)
        ast_required: float,     # mm²
        ast_provided: float,     # mm²
        width: float,            # b (mm)
        fy: float,               # Steel strength (MPa)
    ) -> DeflectionCheckOutput:
        """
        Check span/effective depth ratio per IS 456 Cl. 23.2.1.

        Args:
            span_m: Span in meters
            effective_depth: Effective depth d in mm
            ast_required: Required tension steel in mm²
            ast_provided: Provided tension steel in mm²
            width: Beam width b in mm
            fy: Characteristic steel strength in MPa

        Returns:
            DeflectionCheckOutput
        """
        steps = []
        d = effective_depth

        basic_ld = self.code.get_span_depth_ratio()

        pt = max(100 * ast_provided / (width * d), 0.1)
        stress_ratio = ast_required / ast_provided if ast_provided > 0 else 1.0
        fs = 0.58 * fy * stress_ratio

        steps.append(CalculationStep(
            step_number=1,
            description="Service stress in tension steel",
            formula="fs = 0.58 × fy × Ast,req / Ast,prov",
            substitution=f"= 0.58 × {fy:g} × {ast_required:.1f} / {ast_provided:.1f}",
            result=round(fs, 1),
            unit="N/mm²",
            code_reference="IS 456:2000, Fig. 4"
        ))

        kt = self.code.get_modification_factor_tension(pt, fs)

        steps.append(CalculationStep(
            step_number=2,
            description="Modification factor for tension steel",
            formula="kt = 1 / (0.225 + 0.0032 fs - 0.625 log10(pt))",
            substitution=f"fs = {fs:.1f}, pt = {pt:.3f}",
            result=round(kt, 3),
            unit="",
            code_reference="IS 456:2000, Cl. 23.2.1(c)"
        ))

        allowable_ld = basic_ld * kt
        actual_ld = span_m * 1000 / d
        passed = actual_ld <= allowable_ld

        steps.append(CalculationStep(
            step_number=3,
            description="Span/depth check",
            formula="L/d ≤ basic × kt",
            substitution=(
                f"{actual_ld:.2f} {'≤' if passed else '>'} {basic_ld:g} × {kt:.3f} = {allowable_ld:.2f}"
            ),
            result=round(actual_ld, 2),
            unit="",
            code_reference="IS 456:2000, Cl. 23.2.1"
        ))

        if not passed:
            logger.warning(
                "L/d = {:.2f} exceeds allowable {:.2f}; deflection check fails",
                actual_ld, allowable_ld,
            )

        return DeflectionCheckOutput(
            status=DesignStatus.PASS if passed else DesignStatus.WARNING,
            basic_ld=basic_ld,
            pt=pt,
            fs=fs,
            modification_factor_kt=kt,
            allowable_ld=allowable_ld,
            actual_ld=actual_ld,
            deflection_check_passed=passed,
            calculation_steps=tuple(steps),
        )
