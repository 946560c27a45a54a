"""Command-line interface for the RC Beam Design Tool.

Usage::

    rcbeam-design run <input_yaml> [-o output_dir] [--no-diagrams]
    rcbeam-design template
    rcbeam-design validate <input_yaml>
    rcbeam-design prompt <input_yaml> [--beam NAME]
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from rcbeam.core.beam_design import BeamDesignEngine
from rcbeam.input_parser import InputError, ParsedInput, generate_template, parse_input
from rcbeam.logging_utils import configure_logging
from rcbeam.models.outputs import DesignStatus, DesignSnapshot
from rcbeam.reports.prompt import build_report_prompt
from rcbeam.schedule import DesignSchedule


_STATUS_COLOURS = {
    DesignStatus.PASS: "green",
    DesignStatus.WARNING: "yellow",
    DesignStatus.FAIL: "red",
}


def _load(input_file: str) -> ParsedInput:
    try:
        return parse_input(input_file)
    except InputError as exc:
        click.secho(f"Error parsing input:\n{exc}", fg="red", err=True)
        raise SystemExit(1) from exc


# ---------------------------------------------------------------------------
# Top-level group
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(package_name="rcbeam")
def main():
    """RC Beam Design Tool - IS 456:2000."""


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------

def _print_summary(name: str, snapshot: DesignSnapshot) -> None:
    loads = snapshot.loads
    analysis = snapshot.analysis
    design = snapshot.design
    flexure = design.flexure
    shear = design.shear
    deflection = design.deflection

    click.echo("")
    click.secho("=" * 60, bold=True)
    click.secho(f"  BEAM {name}", bold=True)
    click.secho("=" * 60, bold=True)

    click.echo(f"  Slab UDL (L + R)     : {loads.udl_total_slab:.2f} kN/m")
    click.echo(f"  Beam self weight     : {loads.beam_self_weight:.2f} kN/m")
    click.echo(f"  Wall load            : {loads.wall_load:.2f} kN/m")
    click.echo(f"  Design UDL (wu)      : {loads.total_design_udl:.2f} kN/m")
    click.echo(f"  Mu                   : {analysis.max_moment:.2f} kNm")
    click.echo(f"  Vu                   : {analysis.max_shear:.2f} kN")
    click.echo(f"  Mu,lim               : {flexure.mu_lim:.2f} kNm")
    click.echo(f"  Ast req / prov       : {flexure.ast_required:.0f} / "
               f"{flexure.ast_provided:.0f} mm² ({flexure.arrangement})")
    click.echo(f"  tau_v / tau_c        : {shear.tau_v:.3f} / {shear.tau_c:.3f} N/mm²")
    click.echo(f"  L/d actual / allow   : {deflection.actual_ld:.2f} / "
               f"{deflection.allowable_ld:.2f}")
    click.echo(f"  Reinforcement        : {design.reinforcement_summary}")

    status = design.overall_status
    click.echo("  Status               : ", nl=False)
    click.secho(status.value.upper(), fg=_STATUS_COLOURS[status])
    for warning in design.warnings:
        click.secho(f"  ! {warning}", fg="yellow")


@main.command()
@click.argument("input_file", type=click.Path(exists=True))
@click.option(
    "-o", "--output",
    default="./output",
    show_default=True,
    help="Output directory for results.",
)
@click.option(
    "--diagrams/--no-diagrams",
    default=True,
    show_default=True,
    help="Write cross-section and force diagrams as PNG.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log every design stage.")
def run(input_file: str, output: str, diagrams: bool, verbose: bool) -> None:
    """Design every beam in INPUT_FILE."""
    configure_logging("DEBUG" if verbose else "WARNING")
    output_dir = Path(output)
    output_dir.mkdir(parents=True, exist_ok=True)

    click.echo(f"Reading input file: {input_file}")
    parsed = _load(input_file)
    engine = BeamDesignEngine(parsed.settings)
    schedule = DesignSchedule()

    results = {}
    for name, inputs in parsed.beams:
        snapshot = engine.snapshot(inputs)
        schedule.save(
            inputs, snapshot.design, loads=snapshot.loads, name=name, settings=parsed.settings,
        )
        _print_summary(name, snapshot)
        results[name] = snapshot.model_dump(mode="json")

        if diagrams:
            import matplotlib
            matplotlib.use("Agg")
            from rcbeam.reports.diagrams import cross_section_for, generate_force_diagrams

            section_png = output_dir / f"{name}_section.png"
            section_png.write_bytes(cross_section_for(snapshot, return_figure=False))
            forces_png = output_dir / f"{name}_forces.png"
            forces_png.write_bytes(generate_force_diagrams(
                snapshot.analysis,
                segments=parsed.settings.diagram_segments,
                return_figure=False,
            ))

    results_file = output_dir / "results.json"
    with open(results_file, "w", encoding="utf-8") as fh:
        json.dump(results, fh, indent=2)

    click.secho("\n" + "=" * 60, bold=True)
    click.echo(f"{len(schedule)} beam(s) designed.")
    click.echo(f"Results saved to {results_file.resolve()}")


# ---------------------------------------------------------------------------
# template
# ---------------------------------------------------------------------------

@main.command()
def template() -> None:
    """Print a sample input YAML to stdout."""
    click.echo(generate_template())


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------

@main.command()
@click.argument("input_file", type=click.Path(exists=True))
def validate(input_file: str) -> None:
    """Validate an input YAML file without running the design."""
    click.echo(f"Validating: {input_file}")
    parsed = _load(input_file)
    names = ", ".join(name for name, _ in parsed.beams)
    click.secho(f"\nInput file is valid ({len(parsed.beams)} beam(s): {names}).", fg="green")


# ---------------------------------------------------------------------------
# prompt
# ---------------------------------------------------------------------------

@main.command()
@click.argument("input_file", type=click.Path(exists=True))
@click.option("--beam", "beam_name", default=None, help="Beam to describe (default: first).")
def prompt(input_file: str, beam_name: str | None) -> None:
    """Print the design-review prompt for one beam in INPUT_FILE."""
    parsed = _load(input_file)
    beams = dict(parsed.beams)
    if beam_name is None:
        beam_name = parsed.beams[0][0]
    if beam_name not in beams:
        click.secho(
            f"No beam named {beam_name!r}. Available: {', '.join(beams)}",
            fg="red", err=True,
        )
        raise SystemExit(1)

    snapshot = BeamDesignEngine(parsed.settings).snapshot(beams[beam_name])
    click.echo(build_report_prompt(snapshot))


# ---------------------------------------------------------------------------
# Allow ``python -m rcbeam.cli``
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    main()
