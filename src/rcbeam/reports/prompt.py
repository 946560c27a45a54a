"""
Read-only text projection of a design run for a language-model reviewer.
"""

from rcbeam.models.inputs import DisabledSlab, OneWaySlab, SupportEdge
from rcbeam.models.outputs import DesignSnapshot


def describe_slab(side_name: str, side, udl: float) -> str:
    """One line describing the panel on one side of the beam."""
    if isinstance(side, DisabledSlab):
        return f"{side_name} side: no slab"
    if isinstance(side, OneWaySlab):
        return f"{side_name} side: one-way slab (Lx = {side.lx:g} m), {udl:.2f} kN/m"
    shape = "triangular" if side.support_edge == SupportEdge.SHORT else "trapezoidal"
    return (
        f"{side_name} side: two-way slab (Lx = {side.lx:g} m, Ly = {side.ly:g} m) "
        f"supported on {side.support_edge.value} edge ({shape} load), {udl:.2f} kN/m"
    )


def build_report_prompt(snapshot: DesignSnapshot) -> str:
    """
    Format inputs, loads, analysis and design as a review prompt.

    Args:
        snapshot: One complete design run

    Returns:
        Prompt text (Markdown)
    """
    inputs = snapshot.inputs
    loads = snapshot.loads
    analysis = snapshot.analysis
    design = snapshot.design
    flexure = design.flexure
    shear = design.shear
    deflection = design.deflection
    slab = inputs.slab
    beam = inputs.beam
    wall = inputs.wall
    mat = inputs.materials

    if inputs.point_loads:
        point_loads = ", ".join(f"{p.value:g} kN at {p.distance:g} m" for p in inputs.point_loads)
    else:
        point_loads = "None"

    if shear.section_failed:
        stirrups = "SECTION FAILS IN SHEAR (τv > τc,max)"
    else:
        stirrups = (
            f"{shear.stirrup_legs}-legged {shear.stirrup_diameter:g} mm @ "
            f"{shear.stirrup_spacing} mm c/c"
        )

    lines = [
        "You are a senior structural engineer. Review the following reinforced "
        f"concrete beam design to {design.design_code}.",
        "",
        "**Input parameters:**",
        f"- Clear span: {beam.span:g} m",
        f"- Beam size: {beam.width:g} mm x {beam.depth:g} mm, effective cover {beam.effective_cover:g} mm",
        "- Slab configuration:",
        f"  - {describe_slab('Left', slab.left, loads.udl_from_left_slab)}",
        f"  - {describe_slab('Right', slab.right, loads.udl_from_right_slab)}",
        f"- Point loads (service): {point_loads}",
        f"- Slab loads: thickness {slab.thickness:g} mm, live {slab.live_load:g} kN/m², "
        f"finish {slab.floor_finish:g} kN/m²",
        f"- Wall: height {wall.height:g} m, thickness {wall.thickness:g} mm, density {wall.density:g} kN/m³",
        f"- Materials: concrete {mat.concrete_grade.value}, steel {mat.steel_grade.value}",
        "",
        "**Calculated results:**",
        f"- Total design UDL: {loads.total_design_udl:.2f} kN/m (factored)",
        f"- Max moment (Mu): {analysis.max_moment:.2f} kNm",
        f"- Max shear (Vu): {analysis.max_shear:.2f} kN",
        f"- Limiting moment (Mu,lim): {flexure.mu_lim:.2f} kNm",
        "- Status: " + (
            "DOUBLY REINFORCED REQUIRED (compression steel not designed)"
            if flexure.is_doubly_reinforced else "Singly reinforced"
        ),
        f"- Required Ast: {flexure.ast_required:.0f} mm²",
        f"- Provided: {flexure.number_of_bars} bars of {flexure.bar_diameter:g} mm "
        f"(total {flexure.ast_provided:.0f} mm²)",
        f"- Shear stress (τv): {shear.tau_v:.2f} N/mm²",
        f"- Concrete shear capacity (τc): {shear.tau_c:.2f} N/mm²",
        f"- Stirrups: {stirrups}",
        f"- Deflection: L/d {deflection.actual_ld:.1f} vs allowable {deflection.allowable_ld:.1f} "
        f"({'OK' if deflection.deflection_check_passed else 'FAILS'})",
        "",
        "**Task:**",
        "1. Give a professional summary of the design adequacy.",
        "2. Explain how the slab load transfer (triangular / trapezoidal / one-way) "
        "and the point loads affect the design.",
        "3. If the beam is doubly reinforced or fails in shear or deflection, "
        "recommend increasing depth or width.",
        "4. Comment on the shear capacity and stirrup spacing.",
        "5. Give 3-4 bullet points on detailing (anchorage length, lap length, cover).",
        "6. Format the answer with clear Markdown headings.",
    ]
    return "\n".join(lines)
