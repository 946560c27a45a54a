"""
Flexural design calculations per IS 456:2000.

Implements limit state design of rectangular sections:
- Limiting moment of resistance (Annex G)
- Singly / doubly reinforced decision
- Required tension steel and bar arrangement

Doubly reinforced sections are flagged only: tension steel is computed at
Mu,lim and no compression steel is designed.

Key clauses:
- IS 456:2000 Annex G-1.1: Rectangular sections
- IS 456:2000 Clause 26.5.1.1: Minimum tension reinforcement
"""

import math

from loguru import logger

from rcbeam.codes.base_code import DesignCode
from rcbeam.codes.is456 import IS456
from rcbeam.models.outputs import CalculationStep, DesignStatus, FlexuralDesignOutput
from rcbeam.utils.constants import bar_area


class FlexureDesigner:
    """
    Flexural reinforcement design per IS 456:2000.
    """

    def __init__(self, code: DesignCode = None):
        self.code = code or IS456()

    def design(
        self,
        moment: float,           # Design moment Mu (kNm)
        width: float,            # Beam width b (mm)
        effective_depth: float,  # Effective depth d (mm)
        fck: float,              # Concrete strength (MPa)
        fy: float,               # Steel yield strength (MPa)
        bar_dia: float,          # Main bar diameter (mm)
    ) -> FlexuralDesignOutput:
        """
        Design tension reinforcement per IS 456:2000.

        Args:
            moment: Design bending moment in kNm
            width: Beam width (b) in mm
            effective_depth: Effective depth to tension steel (d) in mm
            fck: Characteristic concrete strength in MPa
            fy: Characteristic steel yield strength in MPa
            bar_dia: Selected main bar diameter in mm

        Returns:
            FlexuralDesignOutput with complete design details
        """
        steps = []
        b = width
        d = effective_depth
        Mu = moment

        # Step 1: Limiting moment
        k_lim = self.code.get_limiting_moment_coefficient(fy)
        Mu_lim = k_lim * fck * b * d ** 2 / 1e6  # kNm

        steps.append(CalculationStep(
            step_number=1,
            description="Limiting moment of resistance",
            formula="Mu,lim = k × fck × b × d²",
            substitution=f"= {k_lim} × {fck:g} × {b:.0f} × {d:.0f}²",
            result=round(Mu_lim, 2),
            unit="kNm",
            code_reference="IS 456:2000, Annex G-1.1(c)"
        ))

        is_doubly = Mu > Mu_lim
        M_design = Mu_lim if is_doubly else Mu

        steps.append(CalculationStep(
            step_number=2,
            description="Section type",
            formula="Mu > Mu,lim → doubly reinforced",
            substitution=(
                f"{Mu:.2f} > {Mu_lim:.2f} (DOUBLY REINFORCED, Ast at Mu,lim)"
                if is_doubly else f"{Mu:.2f} ≤ {Mu_lim:.2f} (singly reinforced)"
            ),
            result=round(M_design, 2),
            unit="kNm",
            code_reference=""
        ))

        # Step 2: Tension steel from the moment equation
        radicand = 1 - 4.6 * M_design * 1e6 / (fck * b * d ** 2)
        radicand = max(0.0, radicand)
        ast_computed = 0.5 * (fck / fy) * (1 - math.sqrt(radicand)) * b * d

        steps.append(CalculationStep(
            step_number=3,
            description="Required tension steel",
            formula="Ast = 0.5 fck/fy × (1 - √(1 - 4.6M/(fck·b·d²))) × b × d",
            substitution=f"= 0.5 × {fck:g}/{fy:g} × (1 - √{radicand:.4f}) × {b:.0f} × {d:.0f}",
            result=round(ast_computed, 1),
            unit="mm²",
            code_reference="IS 456:2000, Annex G-1.1(b)"
        ))

        # Step 3: Minimum steel
        ast_min = self.code.get_minimum_tension_steel(b, d, fy)
        ast_required = max(ast_computed, ast_min)

        steps.append(CalculationStep(
            step_number=4,
            description="Minimum tension steel",
            formula="Ast,min = 0.85 × b × d / fy",
            substitution=f"= 0.85 × {b:.0f} × {d:.0f} / {fy:g}",
            result=round(ast_min, 1),
            unit="mm²",
            code_reference="IS 456:2000, Cl. 26.5.1.1"
        ))

        # Step 4: Bars
        area_one_bar = bar_area(bar_dia)
        n_bars = max(1, math.ceil(ast_required / area_one_bar))
        ast_provided = n_bars * area_one_bar
        pt_provided = 100 * ast_provided / (b * d)

        steps.append(CalculationStep(
            step_number=5,
            description="Tension bars provided",
            formula=f"Provide {n_bars}-{bar_dia:g}φ",
            substitution=f"Ast,prov = {n_bars} × {area_one_bar:.1f}, pt = {pt_provided:.3f}%",
            result=round(ast_provided, 1),
            unit="mm²",
            code_reference=""
        ))

        if is_doubly:
            logger.warning(
                "Mu = {:.2f} kNm exceeds Mu,lim = {:.2f} kNm; section flagged doubly reinforced",
                Mu, Mu_lim,
            )

        return FlexuralDesignOutput(
            status=DesignStatus.WARNING if is_doubly else DesignStatus.PASS,
            design_moment=Mu,
            k_lim=k_lim,
            mu_lim=Mu_lim,
            is_doubly_reinforced=is_doubly,
            ast_computed=ast_computed,
            ast_min=ast_min,
            ast_required=ast_required,
            bar_diameter=bar_dia,
            bar_area=area_one_bar,
            number_of_bars=n_bars,
            ast_provided=ast_provided,
            pt_provided=pt_provided,
            calculation_steps=tuple(steps),
        )
