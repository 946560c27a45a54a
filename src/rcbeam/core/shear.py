"""
Shear design calculations per IS 456:2000.

Implements limit state design for vertical stirrups:
- Nominal shear stress τv
- Concrete capacity τc (Table 19) and upper limit τc,max (Table 20)
- Minimum (nominal) or designed stirrup spacing

Key clauses:
- IS 456:2000 Clause 40.1: Nominal shear stress
- IS 456:2000 Clause 40.3: Minimum shear reinforcement
- IS 456:2000 Clause 40.4: Design of shear reinforcement
"""

import math

from loguru import logger

from rcbeam.codes.base_code import DesignCode
from rcbeam.codes.is456 import IS456
from rcbeam.models.outputs import CalculationStep, DesignStatus, ShearDesignOutput
from rcbeam.utils.constants import STIRRUP_LEGS, bar_area


class ShearDesigner:
    """
    Shear reinforcement design per IS 456:2000.

    A nominal stress above τc,max is a section failure: spacing is reported
    as 0 and no stirrup design is attempted.
    """

    MAX_SPACING = 300  # mm
    MAX_SPACING_RATIO = 0.75  # × d

    def __init__(self, code: DesignCode = None):
        self.code = code or IS456()

    def design(
        self,
        shear_force: float,      # Vu (kN)
        width: float,            # Beam width b (mm)
        effective_depth: float,  # Effective depth d (mm)
        fck: float,              # Concrete strength (MPa)
        fy: float,               # Steel yield strength (MPa)
        ast_provided: float,     # Provided tension steel area (mm²)
        stirrup_dia: float = 8,  # Stirrup diameter (mm)
    ) -> ShearDesignOutput:
        """
        Design shear reinforcement per IS 456:2000.

        Args:
            shear_force: Design shear force in kN
            width: Beam width b in mm
            effective_depth: Effective depth d in mm
            fck: Characteristic concrete strength in MPa
            fy: Characteristic steel yield strength in MPa
            ast_provided: Provided tension steel area in mm²
            stirrup_dia: Stirrup diameter in mm

        Returns:
            ShearDesignOutput with complete design details
        """
        steps = []
        step_num = 1

        b = width
        d = effective_depth
        Vu = shear_force

        # Step 1: Nominal shear stress
        tau_v = Vu * 1000 / (b * d)

        steps.append(CalculationStep(
            step_number=step_num,
            description="Nominal shear stress",
            formula="τv = Vu / (b × d)",
            substitution=f"= {Vu * 1000:.0f} / ({b:.0f} × {d:.0f})",
            result=round(tau_v, 3),
            unit="N/mm²",
            code_reference="IS 456:2000, Cl. 40.1"
        ))
        step_num += 1

        # Step 2: Concrete capacity
        pt = 100 * ast_provided / (b * d)
        tau_c = self.code.get_shear_strength_concrete(pt, fck)
        tau_c_max = self.code.get_maximum_shear_stress(fck)

        steps.append(CalculationStep(
            step_number=step_num,
            description="Design shear strength of concrete",
            formula="τc from Table 19 at pt",
            substitution=f"pt = {pt:.3f}%, M{fck:g}",
            result=round(tau_c, 3),
            unit="N/mm²",
            code_reference="IS 456:2000, Table 19"
        ))
        step_num += 1

        steps.append(CalculationStep(
            step_number=step_num,
            description="Maximum shear stress",
            formula="τc,max from Table 20",
            substitution=f"M{fck:g}",
            result=tau_c_max,
            unit="N/mm²",
            code_reference="IS 456:2000, Table 20"
        ))
        step_num += 1

        n_legs = STIRRUP_LEGS
        Asv = n_legs * bar_area(stirrup_dia)
        sv_max = min(self.MAX_SPACING_RATIO * d, self.MAX_SPACING)

        # Step 3: Section adequacy
        if tau_v > tau_c_max:
            steps.append(CalculationStep(
                step_number=step_num,
                description="Shear adequacy check",
                formula="τv ≤ τc,max",
                substitution=f"{tau_v:.3f} > {tau_c_max:.2f} ✗ (SECTION INADEQUATE)",
                result=0,
                unit="",
                code_reference="Increase section size"
            ))
            logger.warning(
                "τv = {:.3f} N/mm² exceeds τc,max = {:.2f} N/mm²; section fails in shear",
                tau_v, tau_c_max,
            )

            return ShearDesignOutput(
                status=DesignStatus.FAIL,
                design_shear=Vu,
                tau_v=tau_v,
                pt=pt,
                tau_c=tau_c,
                tau_c_max=tau_c_max,
                shear_reinforcement_required=False,
                section_failed=True,
                stirrup_diameter=stirrup_dia,
                stirrup_legs=n_legs,
                asv=Asv,
                vus=0.0,
                spacing_max=sv_max,
                stirrup_spacing=0,
                calculation_steps=tuple(steps),
            )

        # Step 4: Stirrup spacing
        shear_reinf_required = tau_v >= tau_c
        Vus = 0.0

        if not shear_reinf_required:
            sv_required = Asv * 0.87 * fy / (0.4 * b)

            steps.append(CalculationStep(
                step_number=step_num,
                description="Minimum shear reinforcement",
                formula="Sv = 0.87 × fy × Asv / (0.4 × b)",
                substitution=f"τv = {tau_v:.3f} < τc = {tau_c:.3f}; = 0.87 × {fy:g} × {Asv:.1f} / (0.4 × {b:.0f})",
                result=round(sv_required, 0),
                unit="mm",
                code_reference="IS 456:2000, Cl. 26.5.1.6"
            ))
        else:
            Vus = Vu * 1000 - tau_c * b * d  # N
            sv_required = 0.87 * fy * Asv * d / Vus if Vus > 0 else sv_max

            steps.append(CalculationStep(
                step_number=step_num,
                description="Design shear reinforcement",
                formula="Sv = 0.87 × fy × Asv × d / Vus",
                substitution=f"Vus = {Vus:.0f} N; = 0.87 × {fy:g} × {Asv:.1f} × {d:.0f} / {Vus:.0f}",
                result=round(sv_required, 0),
                unit="mm",
                code_reference="IS 456:2000, Cl. 40.4(a)"
            ))
        step_num += 1

        sv_provided = math.floor(min(sv_required, sv_max))

        steps.append(CalculationStep(
            step_number=step_num,
            description="Stirrup arrangement",
            formula=f"Provide {n_legs}L-{stirrup_dia:g}φ @ {sv_provided}mm c/c",
            substitution=f"Sv,max = min(0.75 × {d:.0f}, {self.MAX_SPACING})",
            result=sv_provided,
            unit="mm",
            code_reference="IS 456:2000, Cl. 26.5.1.5"
        ))

        return ShearDesignOutput(
            status=DesignStatus.PASS,
            design_shear=Vu,
            tau_v=tau_v,
            pt=pt,
            tau_c=tau_c,
            tau_c_max=tau_c_max,
            shear_reinforcement_required=shear_reinf_required,
            section_failed=False,
            stirrup_diameter=stirrup_dia,
            stirrup_legs=n_legs,
            asv=Asv,
            vus=Vus / 1000,
            spacing_max=sv_max,
            stirrup_spacing=sv_provided,
            calculation_steps=tuple(steps),
        )
